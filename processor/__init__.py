"""
Processor package for the Forex Alert Feed.

Adaptive relevance engine:
- Scorer: Boost base relevance from feedback history
- Ranker: Adaptive threshold, filtering and ordering

Main entry point: FeedPipeline class
"""

from .scorer import RelevanceScorer, RankedArticle, boost_from_signals
from .ranker import ArticleRanker, RankingResult, get_adaptive_threshold
from .pipeline import FeedPipeline

__all__ = [
    # Pipeline
    "FeedPipeline",
    # Scorer
    "RelevanceScorer",
    "RankedArticle",
    "boost_from_signals",
    # Ranker
    "ArticleRanker",
    "RankingResult",
    "get_adaptive_threshold",
]
