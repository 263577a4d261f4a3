"""
Ranker - personalized article ranking

Scores every candidate against the feedback history, drops those below
the adaptive threshold and orders the rest.
"""
from datetime import datetime, timezone
from typing import Optional, Sequence

from loguru import logger

from crawlers.base_crawler import CandidateArticle
from feedback.models import FeedbackSignal, now_ms
from processor.scorer import RankedArticle, RelevanceScorer
from .models import RankingResult
from .threshold import get_adaptive_threshold


def sort_key(ranked: RankedArticle):
    """Higher relevance first, then newer, then id for a total order."""
    return (-ranked.boosted_relevance, -ranked.published_at.timestamp(), ranked.id)


class ArticleRanker:
    """
    Produces the final presented list. Purely a projection: no state
    is kept between passes and the threshold is recomputed every time.
    """

    def __init__(self, scorer: RelevanceScorer = None):
        self.scorer = scorer or RelevanceScorer()

    def rank(
        self,
        articles: Sequence[CandidateArticle],
        signals: Sequence[FeedbackSignal],
        now: Optional[int] = None,
    ) -> RankingResult:
        """
        Rank candidate articles.

        Args:
            articles: Candidates from the news source
            signals: Feedback history snapshot
            now: Reference time in ms since epoch (defaults to current time)

        Returns:
            RankingResult with the retained articles, best first
        """
        now = now_ms() if now is None else now

        scored = self.scorer.score_batch(articles, signals, now)
        threshold = get_adaptive_threshold(signals, now)

        kept = [r for r in scored if r.boosted_relevance >= threshold]
        kept.sort(key=sort_key)

        logger.info(
            f"Ranking complete: kept={len(kept)}/{len(scored)}, "
            f"threshold={threshold}, signals={len(signals)}"
        )

        return RankingResult(
            articles=kept,
            threshold=threshold,
            considered=len(scored),
            signal_count=len(signals),
            ranked_at=datetime.fromtimestamp(now / 1000, tz=timezone.utc).isoformat(),
        )
