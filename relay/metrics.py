"""
RelayMetrics: Tracks simple statistics for score relay traffic.
"""

import threading


class RelayMetrics:
    """
    Tracks submitted scores, refreshes, failures and reconciliations.

    Attributes:
        submitted (int): Scores successfully submitted to the store.
        refreshed (int): Successful best-score refreshes.
        failed (int): Calls that ended in a failure result or an exception.
        raised (int): Times the local best score was raised by the store's answer.
    """

    def __init__(self):
        """Initialize all counters to zero."""
        self._lock = threading.Lock()
        self.submitted = 0
        self.refreshed = 0
        self.failed = 0
        self.raised = 0

    def incr(self, name: str, amount: int = 1) -> None:
        """
        Increment the counter *name* by *amount*.

        Args:
            name (str): One of 'submitted', 'refreshed', 'failed', 'raised'.
            amount (int): Increment, defaults to 1.
        """
        with self._lock:
            setattr(self, name, getattr(self, name) + amount)

    def report(self) -> dict:
        """
        Return a snapshot of current metrics.

        Returns:
            dict: Dictionary containing 'submitted', 'refreshed', 'failed' and 'raised' counters.
        """
        with self._lock:
            return {
                "submitted": self.submitted,
                "refreshed": self.refreshed,
                "failed": self.failed,
                "raised": self.raised,
            }
