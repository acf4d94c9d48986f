import datetime
from typing import Any

from cadence.service.grid import (
    DEFAULT_ZOOM,
    build_grid,
    compute_span,
    compute_today_offset,
    zoom_in,
    zoom_out,
)
from cadence.time import utc_day


def _ranges(*pairs: tuple[Any, Any]) -> list[dict[str, Any]]:
    return [{"start": start, "end": end} for start, end in pairs]


SAMPLE_TASKS = _ranges(
    ("2024-01-10", "2024-01-20"),
    ("2024-01-05", "2024-01-08"),
    ("2024-02-01", "2024-02-03"),
)


def test_span_is_padded_by_a_day_on_each_side() -> None:
    span = compute_span(SAMPLE_TASKS, today=utc_day(2024, 1, 15))
    assert span == {
        "start": utc_day(2024, 1, 4),
        "end": utc_day(2024, 2, 4),
        "total_days": 32,
    }


def test_span_accepts_datetime_values() -> None:
    tasks = _ranges(
        (datetime.date(2024, 1, 10), datetime.datetime(2024, 1, 20, 17, 30)),
    )
    span = compute_span(tasks, today=utc_day(2024, 1, 15))
    assert span["start"] == utc_day(2024, 1, 9)
    assert span["end"] == utc_day(2024, 1, 21)
    assert span["total_days"] == 13


def test_span_without_tasks_is_a_window_around_today() -> None:
    span = compute_span([], today=utc_day(2024, 6, 15))
    assert span == {
        "start": utc_day(2024, 5, 31),
        "end": utc_day(2024, 6, 30),
        "total_days": 31,
    }


def test_span_ignores_tasks_with_unparseable_dates() -> None:
    tasks = _ranges(("garbage", "2023-01-01"), ("2024-01-10", "2024-01-20"))
    span = compute_span(tasks, today=utc_day(2024, 1, 15))
    assert span["start"] == utc_day(2024, 1, 9)
    assert span["end"] == utc_day(2024, 1, 21)

    only_garbage = compute_span(_ranges(("garbage", None)), today=utc_day(2024, 6, 15))
    assert only_garbage["total_days"] == 31


def test_grid_month_bands() -> None:
    grid = build_grid(SAMPLE_TASKS, DEFAULT_ZOOM, today=utc_day(2024, 1, 15))
    assert grid["month_bands"] == [
        {"label": "January 2024", "start_day_index": 0, "day_count": 28},
        {"label": "February 2024", "start_day_index": 28, "day_count": 4},
    ]


def test_grid_week_bands() -> None:
    grid = build_grid(SAMPLE_TASKS, DEFAULT_ZOOM, today=utc_day(2024, 1, 15))
    weeks = grid["week_bands"]
    assert [band["label"] for band in weeks] == ["53", "1", "2", "3", "4", "5"]
    assert [band["day_count"] for band in weeks] == [3, 7, 7, 7, 7, 1]
    assert [band["start_day_index"] for band in weeks] == [0, 3, 10, 17, 24, 31]


def test_bands_partition_the_span() -> None:
    task_sets = [
        SAMPLE_TASKS,
        _ranges(("2023-12-28", "2024-01-03")),
        _ranges(("2024-02-27", "2024-03-02"), ("2024-05-01", "2024-05-01")),
        _ranges(("2023-06-15", "2024-08-20")),
    ]
    for tasks in task_sets:
        grid = build_grid(tasks, 14, today=utc_day(2024, 1, 1))
        total_days = grid["span"]["total_days"]
        assert len(grid["days"]) == total_days
        for bands in (grid["month_bands"], grid["week_bands"]):
            assert sum(band["day_count"] for band in bands) == total_days
            assert bands[0]["start_day_index"] == 0
            for previous, current in zip(bands, bands[1:]):
                assert (
                    current["start_day_index"]
                    == previous["start_day_index"] + previous["day_count"]
                )


def test_month_bands_across_a_year_boundary() -> None:
    grid = build_grid(
        _ranges(("2023-12-28", "2024-01-03")), 18, today=utc_day(2024, 1, 1)
    )
    assert grid["month_bands"] == [
        {"label": "December 2023", "start_day_index": 0, "day_count": 5},
        {"label": "January 2024", "start_day_index": 5, "day_count": 4},
    ]


def test_grid_days() -> None:
    grid = build_grid(SAMPLE_TASKS, DEFAULT_ZOOM, today=utc_day(2024, 1, 15))
    first_days = grid["days"][:4]
    assert [day["index"] for day in first_days] == [0, 1, 2, 3]
    assert [day["date"] for day in first_days] == [
        utc_day(2024, 1, 4),
        utc_day(2024, 1, 5),
        utc_day(2024, 1, 6),
        utc_day(2024, 1, 7),
    ]
    assert [day["is_non_working"] for day in first_days] == [False, True, True, False]
    assert [day["week_number"] for day in first_days] == [53, 53, 53, 1]


def test_grid_without_dated_tasks_has_no_bands() -> None:
    grid = build_grid([], 14, today=utc_day(2024, 6, 15))
    assert len(grid["days"]) == 31
    assert grid["month_bands"] == []
    assert grid["week_bands"] == []
    assert grid["today_offset"] == 15 * 14


def test_today_offset() -> None:
    span = compute_span(SAMPLE_TASKS, today=utc_day(2024, 1, 15))
    assert compute_today_offset(span, 18, utc_day(2024, 1, 15)) == 11 * 18
    assert compute_today_offset(span, 18, utc_day(2024, 1, 4)) == 0
    assert compute_today_offset(span, 18, utc_day(2024, 2, 4)) == 31 * 18
    assert compute_today_offset(span, 18, utc_day(2024, 3, 1)) is None
    assert compute_today_offset(span, 18, utc_day(2024, 1, 3)) is None


def test_today_offset_ignores_time_of_day() -> None:
    span = compute_span(SAMPLE_TASKS, today=utc_day(2024, 1, 15))
    late_evening = utc_day(2024, 1, 15).add(hours=22)
    assert compute_today_offset(span, 22, late_evening) == 11 * 22


def test_zoom_steps_through_levels() -> None:
    assert zoom_in(14) == 18
    assert zoom_in(18) == 22
    assert zoom_out(22) == 18
    assert zoom_out(18) == 14


def test_zoom_stays_put_at_the_ends() -> None:
    assert zoom_in(22) == 22
    assert zoom_out(14) == 14


def test_zoom_leaves_unknown_widths_alone() -> None:
    assert zoom_in(20) == 20
    assert zoom_out(20) == 20
