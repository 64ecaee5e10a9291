"""
Errors raised while processing upload notifications.

Every error propagates to the invocation boundary; nothing in the
pipeline catches one of these to move on to the next record.
"""

from typing import Iterable, Optional


class ThumbnailerError(Exception):
    """Base class for all thumbnailer errors."""


class ConfigurationError(ThumbnailerError):
    """Required configuration is missing or invalid."""

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems) or "invalid configuration")


class FetchError(ThumbnailerError):
    """The source object could not be retrieved."""

    def __init__(self, bucket: str, key: str, code: Optional[str] = None, message: str = ''):
        self.bucket = bucket
        self.key = key
        self.code = code
        text = f"Failed to fetch s3://{bucket}/{key}"
        if code:
            text += f" ({code})"
        if message:
            text += f": {message}"
        super().__init__(text)


class ObjectNotFound(FetchError):
    """The source object does not exist."""


class AccessDenied(FetchError):
    """Read access to the source object was refused."""


class DecodeError(ThumbnailerError):
    """Source bytes are not an image the decoder supports."""


class WriteError(ThumbnailerError):
    """A variant or manifest could not be persisted."""

    def __init__(self, bucket: str, key: str, message: str = ''):
        self.bucket = bucket
        self.key = key
        text = f"Failed to write s3://{bucket}/{key}"
        if message:
            text += f": {message}"
        super().__init__(text)
