#!/usr/bin/env python3
"""
sim/best_score.py
=================
Process-local best score shared by the world (frame loop thread) and the
score relay (worker thread).  The only write operation is
:meth:`BestScore.reconcile`, so the value never decreases.
"""

from __future__ import annotations

import logging
import threading

log = logging.getLogger(__name__)


class BestScore:
    """Monotonic integer guarded by a lock.

    Parameters
    ----------
    initial : int
        Seed value, clamped to zero.
    """

    def __init__(self, initial: int = 0) -> None:
        self._value = max(0, int(initial))
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def reconcile(self, candidate: int) -> int:
        """Raise the stored best to *candidate* if it is higher.

        Returns the best score after reconciliation.
        """
        with self._lock:
            if candidate > self._value:
                log.info("best score raised %d -> %d", self._value, candidate)
                self._value = int(candidate)
            return self._value
