"""
StorageClient - Operations the pipeline needs from an object store.
"""

import logging
from typing import Optional

from .manifest import ThumbnailManifest

MANIFEST_CONTENT_TYPE = 'application/json'


class StorageClient:
    """
    Base for storage backends.

    Subclasses provide download_object and upload_object; the variant
    and manifest writers are shared. Writes always overwrite.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def download_object(self, bucket: str, key: str) -> bytes:
        """Return the full content of an object, or raise FetchError."""
        raise NotImplementedError

    def upload_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str = 'application/octet-stream'
    ) -> None:
        """Store an object, replacing any existing one, or raise WriteError."""
        raise NotImplementedError

    def write_variant(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        """Persist one resized variant verbatim."""
        self.upload_object(bucket, key, data, content_type)
        self.logger.debug(f"Wrote {key} ({len(data)} bytes)")

    def write_manifest(self, bucket: str, key: str, manifest: ThumbnailManifest) -> None:
        """Persist a manifest as JSON."""
        body = manifest.to_json().encode('utf-8')
        self.upload_object(bucket, key, body, MANIFEST_CONTENT_TYPE)
        self.logger.debug(f"Wrote {key} ({len(manifest)} entries)")
