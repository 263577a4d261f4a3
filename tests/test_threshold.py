import pytest

from processor.ranker import THRESHOLD_BASELINE, THRESHOLD_MAX, THRESHOLD_MIN, get_adaptive_threshold

from conftest import NOW_MS


def test_baseline_without_feedback():
    assert get_adaptive_threshold([], NOW_MS) == THRESHOLD_BASELINE


def test_expired_feedback_is_ignored(make_signal):
    signals = [make_signal(helpful=False, hours_ago=100) for _ in range(20)]

    assert get_adaptive_threshold(signals, NOW_MS) == THRESHOLD_BASELINE


def test_helpful_feedback_relaxes(make_signal):
    assert get_adaptive_threshold([make_signal(helpful=True)], NOW_MS) < THRESHOLD_BASELINE


def test_unhelpful_feedback_tightens(make_signal):
    assert get_adaptive_threshold([make_signal(helpful=False)], NOW_MS) > THRESHOLD_BASELINE


def test_monotonic_in_helpful_ratio(make_signal):
    thresholds = []
    for helpful_count in range(11):
        signals = (
            [make_signal(helpful=True) for _ in range(helpful_count)]
            + [make_signal(helpful=False) for _ in range(10 - helpful_count)]
        )
        thresholds.append(get_adaptive_threshold(signals, NOW_MS))

    assert thresholds == sorted(thresholds, reverse=True)
    assert thresholds[0] > thresholds[-1]


@pytest.mark.parametrize("count", [0, 1, 10, 1000])
@pytest.mark.parametrize("helpful", [True, False])
def test_always_within_bounds(make_signal, count, helpful):
    signals = [make_signal(helpful=helpful) for _ in range(count)]

    threshold = get_adaptive_threshold(signals, NOW_MS)

    assert THRESHOLD_MIN <= threshold <= THRESHOLD_MAX


def test_saturated_extremes(make_signal):
    all_helpful = [make_signal(helpful=True) for _ in range(50)]
    all_unhelpful = [make_signal(helpful=False) for _ in range(50)]

    assert get_adaptive_threshold(all_helpful, NOW_MS) == 20
    assert get_adaptive_threshold(all_unhelpful, NOW_MS) == 80
