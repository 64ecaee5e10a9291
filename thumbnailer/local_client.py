"""
LocalClient - Filesystem stand-in for S3, one directory per bucket.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import AccessDenied, FetchError, ObjectNotFound, WriteError
from .storage import StorageClient


@dataclass(frozen=True)
class LocalConfig:
    """
    Configuration for local filesystem storage.

    Attributes:
        root_path: Directory holding one sub-directory per bucket
    """
    root_path: str

    def validate(self) -> List[str]:
        """Return a list of problems (empty if valid)."""
        errors = []
        if not self.root_path:
            errors.append("Local root path is required")
        elif not os.path.isdir(self.root_path):
            errors.append(f"Local root path does not exist: {self.root_path}")
        return errors


class LocalClient(StorageClient):
    """
    Stores objects as files at <root>/<bucket>/<key>.

    Content types are not persisted.
    """

    def __init__(self, config: LocalConfig, logger: Optional[logging.Logger] = None):
        super().__init__(logger or logging.getLogger(__name__))
        self.config = config
        self.root = Path(config.root_path)

    def object_path(self, bucket: str, key: str) -> Path:
        """Filesystem path for an object, refusing keys that escape the bucket."""
        bucket_dir = (self.root / bucket).resolve()
        path = (bucket_dir / key.lstrip('/')).resolve()
        if bucket_dir != path and bucket_dir not in path.parents:
            raise ValueError(f"Key escapes bucket directory: {key}")
        return path

    def download_object(self, bucket: str, key: str) -> bytes:
        """Read an object from disk."""
        try:
            return self.object_path(bucket, key).read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise ObjectNotFound(bucket, key, 'NoSuchKey', str(e)) from e
        except PermissionError as e:
            raise AccessDenied(bucket, key, 'AccessDenied', str(e)) from e
        except (OSError, ValueError) as e:
            raise FetchError(bucket, key, message=str(e)) from e

    def upload_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str = 'application/octet-stream'
    ) -> None:
        """Write an object to disk, replacing any existing file."""
        try:
            path = self.object_path(bucket, key)
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_name(path.name + '.tmp')
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except (OSError, ValueError) as e:
            raise WriteError(bucket, key, str(e)) from e
