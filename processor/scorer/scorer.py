"""
Scorer - feedback-driven relevance boosting

Adjusts an article's upstream relevance by the user's recent reactions
to articles sharing its currency pairs and topics.
"""
from typing import Iterable, Optional, Sequence

from loguru import logger

from crawlers.base_crawler import CandidateArticle
from feedback.models import FeedbackSignal, now_ms
from .config import (
    WEIGHT_HELPFUL,
    WEIGHT_UNHELPFUL,
    clamp_score,
    get_decay_factor,
)
from .models import RankedArticle


def tag_overlap(signal: FeedbackSignal, article: CandidateArticle) -> int:
    """Number of pairs plus number of topics shared by signal and article."""
    return len(signal.pairs & article.pairs) + len(signal.topics & article.topics)


def boost_from_signals(
    article: CandidateArticle,
    signals: Iterable[FeedbackSignal],
    now: Optional[int] = None,
) -> float:
    """
    Signed boost for an article given the feedback history.

    Each signal contributes overlap * weight * decay, where weight is
    +12 for helpful and -10 for unhelpful feedback and decay falls
    linearly to zero over 72 hours.

    Args:
        article: Candidate article
        signals: Feedback history
        now: Reference time in ms since epoch (defaults to current time)

    Returns:
        Sum of contributions (unclamped)
    """
    now = now_ms() if now is None else now
    total = 0.0

    for signal in signals:
        overlap = tag_overlap(signal, article)
        if not overlap:
            continue
        decay = get_decay_factor(now - signal.timestamp)
        weight = WEIGHT_HELPFUL if signal.helpful else WEIGHT_UNHELPFUL
        total += overlap * weight * decay

    return total


class RelevanceScorer:
    """
    Computes boosted relevance for candidate articles.

    Stateless: every call is a pure function of (article, history, now).
    """

    def score(
        self,
        article: CandidateArticle,
        signals: Sequence[FeedbackSignal],
        now: Optional[int] = None,
    ) -> RankedArticle:
        """Score a single article, clamping the result to [0, 100]."""
        boost = boost_from_signals(article, signals, now)
        boosted = clamp_score(article.relevance_score + boost)
        return RankedArticle(article=article, boosted_relevance=boosted, boost=boost)

    def score_batch(
        self,
        articles: Sequence[CandidateArticle],
        signals: Sequence[FeedbackSignal],
        now: Optional[int] = None,
    ) -> list[RankedArticle]:
        """Score many articles against the same history and reference time."""
        now = now_ms() if now is None else now
        results = [self.score(article, signals, now) for article in articles]

        boosted_count = sum(1 for r in results if r.boost > 0)
        suppressed_count = sum(1 for r in results if r.boost < 0)
        logger.debug(
            f"Scored {len(results)} articles against {len(signals)} signals: "
            f"boosted={boosted_count}, suppressed={suppressed_count}"
        )
        return results
