"""
Configuration for article ranking and the adaptive threshold.

Contains:
- Threshold baseline and bounds
- Feedback saturation for threshold adaptation
- Refresh cadences for the periodic re-rank
"""


# ============================================
# ADAPTIVE THRESHOLD
# ============================================

THRESHOLD_BASELINE = 50.0    # No recent feedback
THRESHOLD_SWING = 30.0       # Max distance from baseline at full confidence
THRESHOLD_MIN = 20.0         # Never admit everything
THRESHOLD_MAX = 90.0         # Never block everything
THRESHOLD_SATURATION = 10    # Recent signals needed for full confidence


# ============================================
# REFRESH CADENCE
# ============================================

REFRESH_INTERVALS_SECONDS = {
    "realtime": 15,
    "hourly": 60 * 60,
    "daily": 24 * 60 * 60,
}
DEFAULT_REFRESH_SECONDS = 60


def get_refresh_interval(digest_frequency: str) -> int:
    """Seconds between feed refreshes for a digest cadence."""
    return REFRESH_INTERVALS_SECONDS.get((digest_frequency or "").lower(), DEFAULT_REFRESH_SECONDS)
