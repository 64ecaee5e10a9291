"""
ProcessingStats - Statistics for one invocation.
"""

import time
from dataclasses import dataclass, field


@dataclass
class ProcessingStats:
    """
    Statistics for one notification batch.

    Attributes:
        total_records: Records in the batch
        records_processed: Records whose manifest was written
        variants_written: Variant objects written
        bytes_written: Total bytes of variants written
        start_time: Start timestamp
    """
    total_records: int = 0
    records_processed: int = 0
    variants_written: int = 0
    bytes_written: int = 0
    start_time: float = field(default_factory=time.time)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def remaining_count(self) -> int:
        """Records not yet processed."""
        return self.total_records - self.records_processed

    def summary(self) -> str:
        return (
            f"{self.records_processed}/{self.total_records} records, "
            f"{self.variants_written} thumbnails ({self.bytes_written} bytes) "
            f"in {self.elapsed_seconds:.1f}s"
        )
