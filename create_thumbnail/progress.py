"""
ThumbnailProgress - Prints per-file results of a batch run.
"""

import logging
from typing import Optional

from .thumbnail_stats import ThumbnailStats


class ThumbnailProgress:
    """
    Reports batch progress, optionally one line per file.
    """

    def __init__(
        self,
        show_files: bool = False,
        log_interval: int = 100,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize progress tracker.

        Args:
            show_files: If True, print each file as it's processed
            log_interval: Log summary progress every N images (when not show_files)
            logger: Optional logger instance
        """
        self.show_files = show_files
        self.log_interval = log_interval
        self.logger = logger or logging.getLogger(__name__)
        self.last_logged = 0

    def on_file_processed(self, result, success: bool, error: Optional[str] = None) -> None:
        """
        Called when a file is processed.

        Args:
            result: ThumbnailResult on success, the source path on failure
            success: Whether generation succeeded
            error: Error message (if failed)
        """
        if not self.show_files:
            return
        if success:
            kind = 'video' if result.animated else 'image'
            print(f"  [OK] {result.source.name} -> {result.destination} "
                  f"({result.size}, {kind})")
        else:
            print(f"  [ERROR] {result} -> {error or 'failed'}")

    def on_dry_run(self, result) -> None:
        """Called in dry-run mode."""
        if self.show_files:
            print(f"  [DRY RUN] {result.source.name} -> would write {result.destination} "
                  f"({result.size})")

    def on_progress_update(self, stats: ThumbnailStats) -> None:
        """
        Called after every file to report overall progress.

        Args:
            stats: Current batch statistics
        """
        total_done = stats.completed_count

        if not self.show_files and total_done - self.last_logged >= self.log_interval:
            self.last_logged = total_done
            self.logger.info(
                f"Progress: {stats.processed} created, {stats.errors} errors, "
                f"{stats.remaining_count} left"
            )

    def __call__(self, stats: ThumbnailStats) -> None:
        """Allow use as callback for stats updates."""
        self.on_progress_update(stats)
