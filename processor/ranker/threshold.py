"""
Adaptive threshold - minimum boosted relevance an article needs to be shown.

threshold = BASELINE - (helpful_ratio - 0.5) * 2 * SWING * confidence

where helpful_ratio is taken over signals still inside the decay
horizon and confidence = min(1, recent / SATURATION). Mostly-helpful
feedback relaxes the threshold, mostly-unhelpful feedback tightens it,
and a handful of reactions only moves it a little.
"""
from typing import Iterable, Optional

from feedback.models import FeedbackSignal, now_ms
from processor.scorer.config import DECAY_HORIZON_MS, clamp_score
from .config import (
    THRESHOLD_BASELINE,
    THRESHOLD_MAX,
    THRESHOLD_MIN,
    THRESHOLD_SATURATION,
    THRESHOLD_SWING,
)


def get_adaptive_threshold(
    signals: Iterable[FeedbackSignal],
    now: Optional[int] = None,
) -> float:
    """
    Compute the current acceptance threshold from the feedback history.

    Args:
        signals: Full feedback history
        now: Reference time in ms since epoch (defaults to current time)

    Returns:
        Threshold in [THRESHOLD_MIN, THRESHOLD_MAX]
    """
    now = now_ms() if now is None else now

    helpful = 0
    total = 0
    for signal in signals:
        if now - signal.timestamp >= DECAY_HORIZON_MS:
            continue
        total += 1
        if signal.helpful:
            helpful += 1

    if total == 0:
        return THRESHOLD_BASELINE

    ratio = helpful / total
    confidence = min(1.0, total / THRESHOLD_SATURATION)
    threshold = THRESHOLD_BASELINE - (ratio - 0.5) * 2 * THRESHOLD_SWING * confidence

    return round(clamp_score(threshold, THRESHOLD_MIN, THRESHOLD_MAX), 2)
