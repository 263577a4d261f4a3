"""
Data models for the Ranker module.
"""
from dataclasses import dataclass

from processor.scorer.models import RankedArticle


@dataclass
class RankingResult:
    """Result of one ranking pass."""
    articles: list[RankedArticle]
    threshold: float
    considered: int
    signal_count: int = 0
    ranked_at: str = ""

    @property
    def filtered(self) -> int:
        return self.considered - len(self.articles)

    def to_dict(self) -> dict:
        return {
            "articles": [a.to_dict() for a in self.articles],
            "threshold": self.threshold,
            "considered": self.considered,
            "filtered": self.filtered,
            "signalCount": self.signal_count,
            "rankedAt": self.ranked_at,
        }
