import pytest

from cadence.model.performance import PerformanceStatus
from cadence.service.performance import classify_performance


@pytest.mark.parametrize(
    ("actual", "planned", "expected"),
    [
        (48, 50, PerformanceStatus.ON_TRACK),
        (47, 50, PerformanceStatus.BEHIND),
        (60, 50, PerformanceStatus.ON_TRACK),
        (61, 50, PerformanceStatus.AHEAD),
        (50, 50, PerformanceStatus.ON_TRACK),
        (0, 100, PerformanceStatus.BEHIND),
        (100, 0, PerformanceStatus.AHEAD),
        (0, 0, PerformanceStatus.ON_TRACK),
    ],
)
def test_classify_performance(
    actual: int, planned: int, expected: PerformanceStatus
) -> None:
    assert classify_performance(actual, planned) == expected


def test_classification_is_ordered_by_actual_progress() -> None:
    order = {
        PerformanceStatus.BEHIND: 0,
        PerformanceStatus.ON_TRACK: 1,
        PerformanceStatus.AHEAD: 2,
    }
    for planned in (0, 25, 50, 90):
        ranks = [order[classify_performance(actual, planned)] for actual in range(101)]
        assert ranks == sorted(ranks)
