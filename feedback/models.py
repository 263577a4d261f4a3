"""
Data models for user feedback.
"""
import time
from dataclasses import dataclass, field
from typing import Iterable, Optional


def now_ms() -> int:
    """Current wall-clock time in milliseconds since epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class FeedbackSignal:
    """One user reaction to an article. Never mutated once recorded."""
    article_id: str
    helpful: bool
    timestamp: int  # ms since epoch
    pairs: frozenset = field(default_factory=frozenset)
    topics: frozenset = field(default_factory=frozenset)

    @classmethod
    def create(
        cls,
        article_id: str,
        helpful: bool,
        pairs: Iterable[str] = (),
        topics: Iterable[str] = (),
        timestamp: Optional[int] = None,
    ) -> "FeedbackSignal":
        """Build a signal, stamping it with the current time if none is given."""
        return cls(
            article_id=article_id,
            helpful=helpful,
            timestamp=now_ms() if timestamp is None else int(timestamp),
            pairs=frozenset(pairs or ()),
            topics=frozenset(topics or ()),
        )

    def to_dict(self) -> dict:
        return {
            "articleId": self.article_id,
            "helpful": self.helpful,
            "timestamp": self.timestamp,
            "pairs": sorted(self.pairs),
            "topics": sorted(self.topics),
        }
