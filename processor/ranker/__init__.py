"""
Ranker Module - adaptive filtering and ordering

Applies the feedback-derived threshold and orders the survivors.

Components:
- ArticleRanker: Main ranking logic
- RankingResult: Data class for one ranking pass
- Threshold/cadence configuration and utilities
"""

from .models import RankingResult
from .config import (
    THRESHOLD_BASELINE,
    THRESHOLD_MIN,
    THRESHOLD_MAX,
    REFRESH_INTERVALS_SECONDS,
    get_refresh_interval,
)
from .threshold import get_adaptive_threshold
from .ranker import ArticleRanker, sort_key


__all__ = [
    # Main classes
    "ArticleRanker",
    # Models
    "RankingResult",
    # Config
    "THRESHOLD_BASELINE",
    "THRESHOLD_MIN",
    "THRESHOLD_MAX",
    "REFRESH_INTERVALS_SECONDS",
    # Utilities
    "get_adaptive_threshold",
    "get_refresh_interval",
    "sort_key",
]
