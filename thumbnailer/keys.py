"""
Key handling for source objects and generated thumbnails.

Pure functions only: no storage or network access happens here.
"""

import re
from typing import Tuple
from urllib.parse import quote, unquote

_PATH_PARTS = re.compile(r'(.+)\.(.+?)', re.DOTALL)


def path_parts(name: str) -> Tuple[str, str]:
    """
    Split a key into (base, extension) at its last dot.

    Args:
        name: Object key, e.g. 'photo.final.jpg'

    Returns:
        Tuple like ('photo.final', 'jpg'), or (name, '') when there is
        nothing to split
    """
    match = _PATH_PARTS.fullmatch(name)
    if not match:
        return name, ''
    return match.group(1), match.group(2)


def decode_event_key(raw_key: str) -> str:
    """
    Recover the storage key from a key as it appears in a notification.

    S3 encodes spaces as '+' and everything else with percent escapes,
    so '+' is replaced before percent-decoding.
    """
    return unquote(raw_key.replace('+', ' '))


def encode_event_key(key: str) -> str:
    """Encode a storage key the way S3 writes it into notifications."""
    return quote(key, safe='/').replace('%20', '+')


def variant_key(base: str, size: int, output_format: str) -> str:
    """Destination key for one resized variant."""
    return f"{base}-{size}x{size}.{output_format}"


def manifest_key(source_key: str) -> str:
    """Destination key for the manifest of a source object."""
    return f"{source_key}.thumbnails.json"


def object_url(bucket: str, key: str, url_base: str = '') -> str:
    """
    Fully-qualified retrieval URL for an object in the destination bucket.

    Args:
        bucket: Destination bucket name
        key: Object key, used verbatim
        url_base: Optional base URL replacing the virtual-hosted S3 host
    """
    if url_base:
        return f"{url_base.rstrip('/')}/{key}"
    return f"https://{bucket}.s3.amazonaws.com/{key}"
