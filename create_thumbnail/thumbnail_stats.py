"""
ThumbnailStats - Counters for a batch of thumbnail requests.
"""

import time
from dataclasses import dataclass, field
from typing import List


@dataclass
class ThumbnailStats:
    """
    Statistics for a batch run.

    Attributes:
        total_to_process: Number of source images in the batch
        processed: Thumbnails created (or planned, in dry-run mode)
        animated: How many of those went down the video path
        static: How many of those went down the still-image path
        errors: Sources that failed
        start_time: Start timestamp
        error_details: One message per failure
        results: ThumbnailResult for every success, in order
    """
    total_to_process: int = 0
    processed: int = 0
    animated: int = 0
    static: int = 0
    errors: int = 0
    start_time: float = field(default_factory=time.time)
    error_details: List[str] = field(default_factory=list)
    results: list = field(default_factory=list)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def completed_count(self) -> int:
        """Total completed (processed + errors)."""
        return self.processed + self.errors

    @property
    def remaining_count(self) -> int:
        """Remaining to process."""
        return self.total_to_process - self.completed_count

    def record_success(self, result) -> None:
        """Count a ThumbnailResult and keep it."""
        self.processed += 1
        self.results.append(result)
        if result.animated:
            self.animated += 1
        else:
            self.static += 1

    def record_error(self, message: str) -> None:
        self.errors += 1
        self.error_details.append(message)
