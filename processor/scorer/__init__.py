"""
Scorer Module - feedback-adjusted relevance

Components:
- RelevanceScorer: Boosts base relevance from feedback history
- RankedArticle: Article plus boosted relevance
- Decay/weight configuration and utilities
"""

from .models import RankedArticle
from .config import (
    WEIGHT_HELPFUL,
    WEIGHT_UNHELPFUL,
    DECAY_HORIZON_MS,
    clamp_score,
    get_decay_factor,
)
from .scorer import RelevanceScorer, boost_from_signals, tag_overlap


__all__ = [
    "RelevanceScorer",
    "RankedArticle",
    "WEIGHT_HELPFUL",
    "WEIGHT_UNHELPFUL",
    "DECAY_HORIZON_MS",
    "boost_from_signals",
    "clamp_score",
    "get_decay_factor",
    "tag_overlap",
]
