"""
Signal Store - append-only history of feedback signals.

Appends serialize on a lock and publish a new tuple snapshot; readers
take whatever snapshot is current and never wait on writers.
"""
import threading
from typing import Optional

from loguru import logger

from .models import FeedbackSignal, now_ms


HOUR_MS = 60 * 60 * 1000


class SignalStore:
    """
    Holds the feedback history for one process/session.

    Repeated feedback on the same article is kept as separate entries,
    so its effect on scoring accumulates.
    """

    def __init__(self, retention_hours: Optional[int] = None):
        """
        Args:
            retention_hours: Age after which prune() drops a signal.
                             None keeps everything.
        """
        self.retention_hours = retention_hours
        self._signals: tuple[FeedbackSignal, ...] = ()
        self._write_lock = threading.Lock()

    def record(self, signal: FeedbackSignal) -> None:
        """Append a signal to the history."""
        with self._write_lock:
            self._signals = self._signals + (signal,)
        logger.debug(
            f"Recorded feedback for {signal.article_id} "
            f"(helpful={signal.helpful}, total={len(self._signals)})"
        )

    def all(self) -> tuple[FeedbackSignal, ...]:
        """Return the current history, oldest first."""
        return self._signals

    def prune(self, now: Optional[int] = None) -> int:
        """
        Drop signals older than the retention window.

        Returns:
            Number of signals removed
        """
        if self.retention_hours is None:
            return 0

        cutoff = (now if now is not None else now_ms()) - self.retention_hours * HOUR_MS
        with self._write_lock:
            kept = tuple(s for s in self._signals if s.timestamp >= cutoff)
            removed = len(self._signals) - len(kept)
            self._signals = kept

        if removed:
            logger.info(f"Pruned {removed} expired feedback signals")
        return removed

    def __len__(self) -> int:
        return len(self._signals)
