"""
Feed Pipeline - the ranking operation exposed to callers.

Pipeline Flow (per request, or per scheduled refresh):
1. Prune expired feedback from the signal store
2. Fetch candidate articles for the requested pairs/topics
3. Score against a snapshot of the feedback history
4. Filter by the adaptive threshold and order

The signal store is handed in by the owner of its lifetime (the API app
or the scheduler), so scoring and ranking stay pure.
"""
from typing import Iterable, Optional

from loguru import logger

from crawlers.base_crawler import BaseNewsSource
from feedback import FeedbackSignal, SignalStore, now_ms
from .ranker import ArticleRanker, RankingResult, get_adaptive_threshold


class FeedPipeline:
    """
    Ranking entry point.

    News source failures propagate as NewsSourceError: there is no
    synthetic substitute for missing news, so the caller decides.
    """

    def __init__(
        self,
        source: BaseNewsSource,
        store: SignalStore,
        ranker: ArticleRanker = None,
    ):
        self.source = source
        self.store = store
        self.ranker = ranker or ArticleRanker()

    async def rank(
        self,
        pairs: Optional[Iterable[str]] = None,
        topics: Optional[Iterable[str]] = None,
        limit: Optional[int] = None,
        now: Optional[int] = None,
    ) -> RankingResult:
        """
        Fetch, score, filter and order articles for the given interests.

        Args:
            pairs: Currency pairs of interest
            topics: Topics of interest
            limit: Upstream fetch limit
            now: Reference time in ms since epoch (defaults to current time)

        Returns:
            RankingResult (an empty article list is a valid outcome)
        """
        now = now_ms() if now is None else now
        self.store.prune(now)

        articles = await self.source.run(pairs=pairs, topics=topics, limit=limit)
        signals = self.store.all()

        return self.ranker.rank(articles, signals, now)

    def record_feedback(self, signal: FeedbackSignal) -> float:
        """
        Record a reaction and return the threshold it produces.
        """
        self.store.record(signal)
        threshold = self.current_threshold()
        logger.info(
            f"Feedback on {signal.article_id}: helpful={signal.helpful}, "
            f"threshold now {threshold}"
        )
        return threshold

    def current_threshold(self, now: Optional[int] = None) -> float:
        """Threshold for the current history, recomputed on every call."""
        return get_adaptive_threshold(self.store.all(), now)
