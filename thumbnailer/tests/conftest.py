"""
Pytest fixtures for thumbnailer tests.
"""

import io

import pytest


@pytest.fixture
def s3_config():
    """Fixture providing S3 configuration."""
    from thumbnailer.s3_config import S3Config

    return S3Config(
        dest_bucket='uploads-thumbs',
        endpoint='https://test-endpoint.example.com:9000',
        region='us-east-1',
        access_key='test-access-key',
        secret_key='test-secret-key',
    )


@pytest.fixture
def mock_boto3_client(mocker):
    """Fixture providing a mocked boto3 client."""
    mock_client = mocker.MagicMock()
    mocker.patch('thumbnailer.s3_client.boto3.client', return_value=mock_client)
    return mock_client


@pytest.fixture
def sample_image_bytes():
    """Fixture providing sample JPEG image bytes."""
    from PIL import Image

    img = Image.new('RGB', (300, 200), color='red')
    buffer = io.BytesIO()
    img.save(buffer, format='JPEG')
    return buffer.getvalue()


@pytest.fixture
def sample_png_bytes():
    """Fixture providing sample PNG image bytes."""
    from PIL import Image

    # Simple test image with transparency
    img = Image.new('RGBA', (120, 240), color=(255, 0, 0, 128))
    buffer = io.BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def memory_storage():
    """Fixture providing an in-memory storage client."""
    from thumbnailer.errors import ObjectNotFound
    from thumbnailer.storage import StorageClient

    class MemoryStorage(StorageClient):
        def __init__(self):
            super().__init__()
            self.objects = {}
            self.content_types = {}
            self.writes = []

        def download_object(self, bucket, key):
            try:
                return self.objects[(bucket, key)]
            except KeyError:
                raise ObjectNotFound(bucket, key, 'NoSuchKey')

        def upload_object(self, bucket, key, data, content_type='application/octet-stream'):
            self.objects[(bucket, key)] = data
            self.content_types[(bucket, key)] = content_type
            self.writes.append((bucket, key))

    return MemoryStorage()


@pytest.fixture
def s3_event():
    """Fixture providing an S3 ObjectCreated event with two records."""
    return {
        'Records': [
            {
                'eventName': 'ObjectCreated:Put',
                's3': {
                    'bucket': {'name': 'uploads'},
                    'object': {'key': 'vacation.jpg', 'size': 1024},
                },
            },
            {
                'eventName': 'ObjectCreated:Put',
                's3': {
                    'bucket': {'name': 'uploads'},
                    'object': {'key': 'my+file%20name.png', 'size': 2048},
                },
            },
        ]
    }


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')
