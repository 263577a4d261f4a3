"""
Configuration and utilities for feedback-driven relevance scoring.

Contains:
- Feedback weights
- Linear decay horizon and factor calculation
- Score clamping
"""


# ============================================
# FEEDBACK WEIGHTS
# ============================================

WEIGHT_HELPFUL = 12       # per overlapping tag, fresh signal
WEIGHT_UNHELPFUL = -10    # per overlapping tag, fresh signal


# ============================================
# DECAY CONFIGURATION
# ============================================

DECAY_HORIZON_MS = 3 * 24 * 60 * 60 * 1000   # 72 hours: influence reaches zero


# ============================================
# SCORE BOUNDS
# ============================================

SCORE_MIN = 0.0
SCORE_MAX = 100.0


# ============================================
# UTILITY FUNCTIONS
# ============================================

def get_decay_factor(elapsed_ms: float) -> float:
    """
    Linear decay of a signal's influence with age.

    Args:
        elapsed_ms: Milliseconds since the signal was recorded.
                    Negative values (clock skew) count as fresh.

    Returns:
        Decay factor between 0.0 and 1.0
    """
    elapsed_ms = max(0.0, elapsed_ms)
    return max(0.0, 1.0 - elapsed_ms / DECAY_HORIZON_MS)


def clamp_score(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    """Clamp a score into [low, high]."""
    return max(low, min(high, value))
