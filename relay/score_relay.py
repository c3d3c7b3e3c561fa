"""
ScoreRelay: forwards finished runs to the score store and reconciles the
locally cached best score.

Supports:
    - Fire-and-forget submission on a background worker thread
    - Opportunistic refresh of the authoritative best score
    - Inline mode (background=False) for deterministic tests
    - Failure counting and logging; nothing ever propagates to the caller

Intended usage:
    - World calls report_score() on the transition into GameOver
    - main calls launch() once at startup to seed the best score
"""

import logging
import queue
import threading
from typing import Callable, Optional, Tuple

from sim.best_score import BestScore
from .metrics import RelayMetrics
from .result import StoreResult
from .store import ScoreStore

log = logging.getLogger(__name__)

_STOP = object()


class ScoreRelay:
    """
    Decouples the frame loop from the score-persistence collaborator.

    Attributes:
        store (ScoreStore): The collaborator to submit to and refresh from.
        best (BestScore): Shared best-score cache; only ever raised via max.
        metrics (RelayMetrics): Counters for submissions, refreshes and failures.
    """

    def __init__(
        self,
        store: ScoreStore,
        best: Optional[BestScore] = None,
        background: bool = True,
    ):
        """
        Initialize a ScoreRelay.

        Args:
            store (ScoreStore): Score-persistence collaborator.
            best (Optional[BestScore]): Shared cache; a new one when None.
            background (bool): Run store calls on a worker thread. When False
                every call runs inline on the caller's thread.
        """
        self.store = store
        self.best = best if best is not None else BestScore()
        self.metrics = RelayMetrics()
        self._background = background
        self._jobs: "queue.Queue" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._closed = False

    @property
    def best_score(self) -> int:
        return self.best.value

    # ── Public API ────────────────────────────────────────────────────────────

    def report_score(self, score: int) -> None:
        """
        Submit a finished run's score without waiting for the answer.

        Args:
            score (int): Score of the run that just ended.
        """
        self._dispatch("submit", lambda: self.store.submit(score), "submitted")

    def refresh_best(self) -> None:
        """Pull the authoritative best score and reconcile it into the local cache."""
        self._dispatch("get", self.store.get, "refreshed")

    def launch(self) -> None:
        """Announce a new game session and seed the local best from the reply."""
        self._dispatch("launch", self.store.launch, "refreshed")

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until every queued call has been handled.

        Args:
            timeout (Optional[float]): Seconds to wait; None waits forever.

        Returns:
            bool: True if the queue drained within the timeout.
        """
        if self._thread is None:
            return True
        done = threading.Event()

        def _waiter():
            self._jobs.join()
            done.set()

        threading.Thread(target=_waiter, daemon=True, name="ScoreRelayFlush").start()
        return done.wait(timeout)

    def close(self, timeout: float = 2.0) -> None:
        """Stop accepting work, drain the queue and join the worker."""
        if self._closed:
            return
        self._closed = True
        if self._thread is not None:
            self._jobs.put(_STOP)
            self._thread.join(timeout=timeout)
            log.info("ScoreRelay stopped metrics=%s", self.metrics.report())

    # ── Internals ─────────────────────────────────────────────────────────────

    def _dispatch(
        self, label: str, call: Callable[[], StoreResult], counter: str
    ) -> None:
        if self._closed:
            log.warning("relay closed, dropping %s", label)
            return
        job = (label, call, counter)
        if not self._background:
            self._run(job)
            return
        self._ensure_worker()
        self._jobs.put(job)

    def _ensure_worker(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._loop, daemon=True, name="ScoreRelay"
        )
        self._thread.start()
        log.info("ScoreRelay worker started")

    def _loop(self) -> None:
        while True:
            job = self._jobs.get()
            try:
                if job is _STOP:
                    return
                self._run(job)
            finally:
                self._jobs.task_done()

    def _run(self, job: Tuple[str, Callable[[], StoreResult], str]) -> None:
        label, call, counter = job
        try:
            result = call()
        except Exception:
            self.metrics.incr("failed")
            log.exception("score store %s raised; keeping best=%d", label, self.best_score)
            return

        if not isinstance(result, StoreResult) or not result.success or result.best_score is None:
            self.metrics.incr("failed")
            error = getattr(result, "error", None)
            log.warning("score store %s failed (%s); keeping best=%d", label, error, self.best_score)
            return

        self.metrics.incr(counter)
        before = self.best_score
        after = self.best.reconcile(result.best_score)
        if after > before:
            self.metrics.incr("raised")
        log.info("score store %s ok remote=%d best=%d", label, result.best_score, after)
