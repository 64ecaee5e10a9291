"""
EventProcessor - Turns upload notifications into thumbnails and manifests.
"""

import logging
from typing import Iterable, Optional, Sequence

from .events import NotificationRecord
from .keys import manifest_key, path_parts, variant_key
from .manifest import ThumbnailManifest
from .processing_stats import ProcessingStats
from .resize_engine import SIZES, ResizeEngine
from .storage import StorageClient


class EventProcessor:
    """
    Processes notification records one at a time, in arrival order.

    For each record the source is fetched once, one variant per size is
    resized and written, then the manifest is written. Any error aborts
    the whole batch; variants already written are left in place.
    """

    def __init__(
        self,
        source: StorageClient,
        destination: StorageClient,
        dest_bucket: str,
        engine: Optional[ResizeEngine] = None,
        sizes: Sequence[int] = SIZES,
        url_base: str = '',
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize processor.

        Args:
            source: Client used to fetch uploaded objects
            destination: Client used to write variants and manifests
            dest_bucket: Bucket receiving the output
            engine: Resize engine (default: ResizeEngine())
            sizes: Square edge lengths, in output order
            url_base: Optional base for manifest URLs
            logger: Optional logger instance
        """
        self.source = source
        self.destination = destination
        self.dest_bucket = dest_bucket
        self.engine = engine or ResizeEngine()
        self.sizes = tuple(sizes)
        self.url_base = url_base
        self.logger = logger or logging.getLogger(__name__)

    def process_batch(self, records: Iterable[NotificationRecord]) -> ProcessingStats:
        """
        Process every record in order.

        Returns:
            ProcessingStats for the batch
        """
        records = list(records)
        stats = ProcessingStats(total_records=len(records))

        for record in records:
            self.process_record(record, stats)

        self.logger.info(f"Batch complete: {stats.summary()}")
        return stats

    def process_record(
        self,
        record: NotificationRecord,
        stats: Optional[ProcessingStats] = None
    ) -> ThumbnailManifest:
        """
        Generate all variants and the manifest for one uploaded object.

        Returns:
            The manifest that was written
        """
        key = record.key
        base, _ = path_parts(key)

        self.logger.info(f"{key}: Fetching from {record.bucket}")
        image_data = self.source.download_object(record.bucket, key)

        manifest = ThumbnailManifest(source_key=key)
        for size in self.sizes:
            variant = self.engine.resize(image_data, size)
            dest_key = variant_key(base, size, variant.format)

            self.logger.info(f"{key}: Creating {dest_key}")
            self.destination.write_variant(
                self.dest_bucket, dest_key, variant.data, variant.content_type
            )
            manifest.add_variant(self.dest_bucket, dest_key, size, self.url_base)

            if stats is not None:
                stats.variants_written += 1
                stats.bytes_written += len(variant.data)

        self.logger.info(f"{key}: Creating thumbnails.json")
        self.destination.write_manifest(self.dest_bucket, manifest_key(key), manifest)

        if stats is not None:
            stats.records_processed += 1
        return manifest
