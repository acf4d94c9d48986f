import pytest

from cadence.model.activity import Activity
from cadence.service.progress import (
    clamp_percent,
    compute_planned_progress,
    compute_progress,
    round_half_up,
)
from cadence.time import add_days, utc_day


def _activities(*weights_done: tuple[int, bool]) -> list[Activity]:
    return [
        {"description": f"step {i}", "weight": weight, "is_completed": done}
        for i, (weight, done) in enumerate(weights_done)
    ]


def test_round_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(12.5) == 13
    assert round_half_up(33.3) == 33
    assert round_half_up(66.7) == 67


def test_clamp_percent() -> None:
    assert clamp_percent(-5) == 0
    assert clamp_percent(42) == 42
    assert clamp_percent(130) == 100


def test_progress_of_no_activities_is_zero() -> None:
    assert compute_progress([]) == 0


def test_progress_with_zero_total_weight_is_zero() -> None:
    assert compute_progress(_activities((0, True), (0, False))) == 0


def test_progress_is_weighted() -> None:
    assert compute_progress(_activities((3, True), (2, False))) == 60
    assert compute_progress(_activities((1, True), (1, False), (1, False))) == 33
    assert compute_progress(_activities((1, True), (1, True), (1, False))) == 67


def test_progress_rounds_halves_up() -> None:
    # 1 of 8 weight units is 12.5%
    assert compute_progress(_activities((1, True), (5, False), (2, False))) == 13


def test_progress_bounds() -> None:
    assert compute_progress(_activities((4, False), (1, False))) == 0
    assert compute_progress(_activities((4, True), (1, True))) == 100


def test_completing_an_activity_never_lowers_progress() -> None:
    weights = [5, 1, 3, 2, 4]
    done = [False] * len(weights)
    previous = compute_progress(_activities(*zip(weights, done)))
    for i in range(len(weights)):
        done[i] = True
        current = compute_progress(_activities(*zip(weights, done)))
        assert current >= previous
        previous = current
    assert previous == 100


@pytest.mark.parametrize(
    ("today", "expected"),
    [
        (utc_day(2023, 12, 25), 0),
        (utc_day(2024, 1, 1), 0),
        (utc_day(2024, 1, 4), 30),
        (utc_day(2024, 1, 6), 50),
        (utc_day(2024, 1, 11), 100),
        (utc_day(2024, 1, 20), 100),
    ],
)
def test_planned_progress_interpolates_between_start_and_end(
    today, expected: int
) -> None:
    assert (
        compute_planned_progress(utc_day(2024, 1, 1), utc_day(2024, 1, 11), today)
        == expected
    )


def test_planned_progress_rounds_halves_up() -> None:
    # one day into an eight day range
    assert (
        compute_planned_progress(
            utc_day(2024, 1, 1), utc_day(2024, 1, 9), utc_day(2024, 1, 2)
        )
        == 13
    )


def test_planned_progress_ignores_time_of_day() -> None:
    assert (
        compute_planned_progress(
            "2024-01-01T23:00:00Z", "2024-01-11T01:00:00Z", utc_day(2024, 1, 6)
        )
        == 50
    )


def test_planned_progress_with_missing_dates_is_zero() -> None:
    today = utc_day(2024, 1, 6)
    assert compute_planned_progress(None, utc_day(2024, 1, 11), today) == 0
    assert compute_planned_progress(utc_day(2024, 1, 1), None, today) == 0
    assert compute_planned_progress("garbage", utc_day(2024, 1, 11), today) == 0


def test_planned_progress_of_empty_or_inverted_range_is_zero() -> None:
    today = utc_day(2024, 2, 1)
    same_day = utc_day(2024, 1, 1)
    assert compute_planned_progress(same_day, same_day, today) == 0
    assert compute_planned_progress(utc_day(2024, 1, 11), same_day, today) == 0


def test_planned_progress_never_decreases_over_time() -> None:
    start = utc_day(2024, 1, 1)
    end = utc_day(2024, 1, 18)
    previous = 0
    for offset in range(-3, 25):
        current = compute_planned_progress(start, end, add_days(start, offset))
        assert 0 <= current <= 100
        assert current >= previous
        previous = current
    assert previous == 100
