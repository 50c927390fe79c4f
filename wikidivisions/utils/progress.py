"""
Progress tracking for the page-by-page pipelines.
Logs milestones (25%, 50%, 75%, 100%) rather than one line per page.
"""
import logging
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

MILESTONES = (0.25, 0.50, 0.75)


class ProgressTracker:
    """
    Milestone logger for a known number of pages.

    Example:
        >>> progress = ProgressTracker("countries")
        >>> progress.start(250)
        >>> for country in countries:
        ...     progress.update()
        >>> progress.finish()
    """

    def __init__(self, label: str = "items", enabled: bool = True):
        """
        Initialize progress tracker.

        Args:
            label: What is being counted, for log messages
            enabled: Whether progress tracking is enabled
        """
        self.label = label
        self.enabled = enabled
        self.start_time: Optional[datetime] = None
        self.current_item = 0
        self.total_items = 0

    def start(self, total: int):
        self.total_items = total
        self.current_item = 0
        self.start_time = datetime.now()

        if self.enabled:
            logger.info(f"Processing {total} {self.label}...")

    def update(self, increment: int = 1):
        previous = self.current_item
        self.current_item += increment

        if not self.enabled or self.total_items <= 0:
            return

        if self.current_item == self.total_items:
            self._log_progress()
            return

        for milestone in MILESTONES:
            threshold = self.total_items * milestone
            if previous < threshold <= self.current_item:
                self._log_progress()
                return

    def _log_progress(self):
        percentage = self.current_item / self.total_items * 100
        logger.info(
            f"  Progress: {self.current_item}/{self.total_items} {self.label} "
            f"({percentage:.1f}%) - {self.elapsed_seconds():.1f}s elapsed"
        )

    def finish(self):
        if self.enabled:
            logger.info(
                f"Completed {self.current_item}/{self.total_items} {self.label} "
                f"in {self.elapsed_seconds():.1f}s"
            )

    def elapsed_seconds(self) -> float:
        if self.start_time:
            return (datetime.now() - self.start_time).total_seconds()
        return 0.0
