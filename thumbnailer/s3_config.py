"""
S3Config - Process-wide storage configuration read from the environment.
"""

import os
from dataclasses import dataclass, replace
from typing import List, Optional

from .errors import ConfigurationError


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == '':
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class S3Config:
    """
    Storage configuration, built once at process start and never mutated.

    Attributes:
        dest_bucket: Bucket receiving thumbnails and manifests (DEST_BUCKET)
        endpoint: Custom S3 endpoint URL, e.g. MinIO (S3_ENDPOINT)
        region: AWS region (S3_REGION)
        access_key: Access key; boto3's credential chain is used when unset
        secret_key: Secret key; boto3's credential chain is used when unset
        verify_ssl: Verify TLS certificates (S3_VERIFY_SSL)
        url_base: Base for retrieval URLs written to manifests (THUMBNAIL_URL_BASE)
    """
    dest_bucket: str = ''
    endpoint: Optional[str] = None
    region: Optional[str] = None
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    verify_ssl: bool = True
    url_base: str = ''

    @classmethod
    def from_env(cls) -> 'S3Config':
        """Create configuration from environment variables."""
        return cls(
            dest_bucket=os.getenv('DEST_BUCKET', ''),
            endpoint=os.getenv('S3_ENDPOINT') or None,
            region=os.getenv('S3_REGION') or None,
            access_key=os.getenv('S3_ACCESS_KEY') or None,
            secret_key=os.getenv('S3_SECRET_KEY') or None,
            verify_ssl=_env_flag('S3_VERIFY_SSL', True),
            url_base=os.getenv('THUMBNAIL_URL_BASE', ''),
        )

    def with_overrides(self, **changes) -> 'S3Config':
        """Return a copy with the given non-empty fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v})

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        if not self.dest_bucket:
            errors.append("DEST_BUCKET environment variable is required")
        if bool(self.access_key) != bool(self.secret_key):
            errors.append("S3_ACCESS_KEY and S3_SECRET_KEY must be set together")
        if self.endpoint and not self.endpoint.startswith(('http://', 'https://')):
            errors.append(f"S3_ENDPOINT must be an http(s) URL, got '{self.endpoint}'")
        return errors

    def require_valid(self) -> 'S3Config':
        """Raise ConfigurationError unless the configuration is usable."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(errors)
        return self
