"""
Feedback Module - user reactions that drive adaptive ranking.

Components:
- FeedbackSignal: Immutable record of one reaction
- SignalStore: Append-only, concurrently readable history
"""

from .models import FeedbackSignal, now_ms
from .store import SignalStore


__all__ = [
    "FeedbackSignal",
    "SignalStore",
    "now_ms",
]
