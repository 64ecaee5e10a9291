"""
S3 thumbnailing pipeline.

An upload to the source bucket triggers the function, which fetches the
image, writes square thumbnails at 50, 100 and 200 pixels to the
destination bucket, and then writes a JSON manifest listing them.

Entry point: thumbnailer.handler.lambda_handler
"""

__version__ = "1.0.0"

from .errors import (
    ThumbnailerError,
    ConfigurationError,
    FetchError,
    ObjectNotFound,
    AccessDenied,
    DecodeError,
    WriteError,
)
from .keys import path_parts, decode_event_key, variant_key, manifest_key, object_url
from .s3_config import S3Config
from .storage import StorageClient
from .s3_client import S3Client
from .local_client import LocalConfig, LocalClient
from .events import NotificationRecord, parse_batch
from .resize_engine import SIZES, ResizeEngine, ResizedVariant
from .manifest import ManifestEntry, ThumbnailManifest
from .processing_stats import ProcessingStats
from .processor import EventProcessor

__all__ = [
    "ThumbnailerError",
    "ConfigurationError",
    "FetchError",
    "ObjectNotFound",
    "AccessDenied",
    "DecodeError",
    "WriteError",
    "path_parts",
    "decode_event_key",
    "variant_key",
    "manifest_key",
    "object_url",
    "S3Config",
    "StorageClient",
    "S3Client",
    "LocalConfig",
    "LocalClient",
    "NotificationRecord",
    "parse_batch",
    "SIZES",
    "ResizeEngine",
    "ResizedVariant",
    "ManifestEntry",
    "ThumbnailManifest",
    "ProcessingStats",
    "EventProcessor",
]
