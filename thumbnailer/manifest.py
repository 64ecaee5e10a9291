"""
ThumbnailManifest - The JSON listing of variants produced for one source object.
"""

import json
from dataclasses import dataclass, field, asdict
from typing import Iterator, List

from .keys import object_url


@dataclass
class ManifestEntry:
    """
    One produced variant.

    Attributes:
        key: Destination key of the variant
        url: Fully-qualified retrieval URL
        width: Declared width in pixels
        height: Declared height in pixels
    """
    key: str
    url: str
    width: int
    height: int

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'ManifestEntry':
        return cls(
            key=data['key'],
            url=data['url'],
            width=int(data['width']),
            height=int(data['height']),
        )


@dataclass
class ThumbnailManifest:
    """
    Ordered manifest entries for a single source object.

    Entries keep the order in which variants were written.
    """
    source_key: str
    entries: List[ManifestEntry] = field(default_factory=list)

    def add_variant(self, bucket: str, key: str, size: int, url_base: str = '') -> ManifestEntry:
        """Append an entry for a square variant written to bucket/key."""
        entry = ManifestEntry(
            key=key,
            url=object_url(bucket, key, url_base),
            width=size,
            height=size,
        )
        self.entries.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self.entries)

    def to_list(self) -> List[dict]:
        """Convert to the persisted JSON array shape."""
        return [entry.to_dict() for entry in self.entries]

    def to_json(self) -> str:
        return json.dumps(self.to_list())

    @classmethod
    def from_json(cls, source_key: str, text: str) -> 'ThumbnailManifest':
        """Parse a persisted manifest."""
        return cls(
            source_key=source_key,
            entries=[ManifestEntry.from_dict(item) for item in json.loads(text)],
        )
