"""
Data models for the Scorer module.
"""
from dataclasses import dataclass

from crawlers.base_crawler import CandidateArticle


@dataclass(frozen=True)
class RankedArticle:
    """A candidate article with its feedback-adjusted relevance."""
    article: CandidateArticle
    boosted_relevance: float
    boost: float = 0.0

    @property
    def id(self) -> str:
        return self.article.id

    @property
    def published_at(self):
        return self.article.published_at

    def to_dict(self) -> dict:
        return {
            **self.article.to_dict(),
            "baseRelevance": self.article.relevance_score,
            "boostedRelevance": round(self.boosted_relevance, 2),
            "boost": round(self.boost, 2),
        }
