"""
S3Client - S3/MinIO operations for fetching sources and writing thumbnails.
"""

import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .errors import AccessDenied, FetchError, ObjectNotFound, WriteError
from .s3_config import S3Config
from .storage import StorageClient


class S3Client(StorageClient):
    """
    Wrapper for S3/MinIO operations.

    Each call is a single request; retries are left to boto3's own
    retry policy and to the platform redelivering the event.
    """

    NOT_FOUND_CODES = {'NoSuchKey', 'NoSuchBucket', '404', 'NotFound'}
    ACCESS_DENIED_CODES = {'AccessDenied', '403', 'Forbidden'}

    def __init__(self, config: S3Config, logger: Optional[logging.Logger] = None):
        """
        Initialize S3 client.

        Args:
            config: S3 configuration
            logger: Optional logger instance
        """
        super().__init__(logger or logging.getLogger(__name__))
        self.config = config

        # Custom endpoints (MinIO) need path-style addressing
        addressing = {'addressing_style': 'path'} if config.endpoint else None

        self._client = boto3.client(
            's3',
            endpoint_url=config.endpoint,
            aws_access_key_id=config.access_key,
            aws_secret_access_key=config.secret_key,
            region_name=config.region,
            config=Config(signature_version='s3v4', s3=addressing),
            verify=config.verify_ssl
        )

    @property
    def client(self):
        """Return the underlying boto3 client."""
        return self._client

    def download_object(self, bucket: str, key: str) -> bytes:
        """Download an object from S3."""
        self.logger.debug(f"Fetching s3://{bucket}/{key}")
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
            return response['Body'].read()
        except ClientError as e:
            error = e.response.get('Error', {})
            code = str(error.get('Code', ''))
            message = error.get('Message', str(e))
            if code in self.NOT_FOUND_CODES:
                raise ObjectNotFound(bucket, key, code, message) from e
            if code in self.ACCESS_DENIED_CODES:
                raise AccessDenied(bucket, key, code, message) from e
            raise FetchError(bucket, key, code or None, message) from e
        except BotoCoreError as e:
            raise FetchError(bucket, key, message=str(e)) from e

    def upload_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str = 'application/octet-stream'
    ) -> None:
        """Upload an object to S3."""
        try:
            self._client.put_object(
                Bucket=bucket,
                Key=key,
                Body=data,
                ContentType=content_type
            )
        except (ClientError, BotoCoreError) as e:
            raise WriteError(bucket, key, str(e)) from e
