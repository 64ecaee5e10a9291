"""
NotificationRecord - One uploaded object referenced by an S3 event.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .keys import decode_event_key


@dataclass(frozen=True)
class NotificationRecord:
    """
    A single record from an S3 notification batch.

    Attributes:
        bucket: Source bucket name
        raw_key: Object key as delivered (percent-encoded, '+' for space)
        size: Object size in bytes, if the event carried it
        event_name: Event type, e.g. 'ObjectCreated:Put'
    """
    bucket: str
    raw_key: str
    size: Optional[int] = None
    event_name: Optional[str] = None

    @property
    def key(self) -> str:
        """The decoded storage key."""
        return decode_event_key(self.raw_key)

    @classmethod
    def from_dict(cls, data: dict) -> 'NotificationRecord':
        """Create from one element of an event's 'Records' list."""
        s3 = data.get('s3') or {}
        bucket = (s3.get('bucket') or {}).get('name')
        obj = s3.get('object') or {}
        raw_key = obj.get('key')
        if not bucket or raw_key is None:
            raise ValueError(f"Notification record has no bucket name or object key: {data!r}")
        return cls(
            bucket=bucket,
            raw_key=raw_key,
            size=obj.get('size'),
            event_name=data.get('eventName'),
        )

    def to_dict(self) -> dict:
        """Convert back to the S3 event record shape."""
        obj = {'key': self.raw_key}
        if self.size is not None:
            obj['size'] = self.size
        record = {'s3': {'bucket': {'name': self.bucket}, 'object': obj}}
        if self.event_name:
            record['eventName'] = self.event_name
        return record


def parse_batch(event: dict, logger: Optional[logging.Logger] = None) -> List[NotificationRecord]:
    """
    Parse an S3 notification event into records, in received order.

    The 's3:TestEvent' that S3 sends when notifications are first
    configured has no records and yields an empty batch.
    """
    logger = logger or logging.getLogger(__name__)
    if 'Records' not in event:
        if event.get('Event') == 's3:TestEvent':
            logger.info("Received s3:TestEvent, nothing to process")
        else:
            logger.warning("Event has no 'Records', nothing to process")
        return []
    return [NotificationRecord.from_dict(r) for r in event['Records']]
