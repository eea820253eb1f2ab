"""Progress tracking for music organization."""

from typing import Dict


class ProgressTracker:
    """Tracks progress and statistics during a copy run."""

    def __init__(self):
        """Initialize the progress tracker."""
        self.reset()

    def set_found(self, count: int):
        """Record how many songs the scan found.

        Args:
            count: Number of songs found in the input directory
        """
        self.stats["found"] = count

    def increment_copied(self):
        """Increment the copied counter."""
        self.stats["copied"] += 1

    def increment_replaced(self):
        """Increment the counter of overwritten destination files."""
        self.stats["replaced"] += 1

    def increment_skipped(self):
        """Increment the skipped counter."""
        self.stats["skipped"] += 1

    @property
    def processed(self) -> int:
        return self.stats["copied"] + self.stats["replaced"] + self.stats["skipped"]

    def get_stats(self) -> Dict:
        """Get current statistics.

        Returns:
            Dictionary containing current stats
        """
        return self.stats.copy()

    def reset(self):
        """Reset all statistics to zero."""
        self.stats = {
            "found": 0,
            "copied": 0,
            "replaced": 0,
            "skipped": 0,
        }
