# SPDX-License-Identifier: MIT

import logging
from typing import Any, Callable, Mapping, Optional, Sequence

import pendulum

from cadence.model.grid import Band, CalendarSpan, GridDay, TimelineGrid
from cadence.time import (
    add_days,
    days_between,
    is_non_working_day,
    month_label,
    parse_day,
    to_utc_midnight,
    week_number,
)

logger = logging.getLogger(__name__)

ZOOM_LEVELS = (14, 18, 22)
DEFAULT_ZOOM = 18

# Days shown either side of today when there is nothing to place.
EMPTY_WINDOW_DAYS = 15
SPAN_PADDING_DAYS = 1


def zoom_in(day_width: int) -> int:
    if day_width not in ZOOM_LEVELS:
        return day_width
    index = ZOOM_LEVELS.index(day_width)
    return ZOOM_LEVELS[min(index + 1, len(ZOOM_LEVELS) - 1)]


def zoom_out(day_width: int) -> int:
    if day_width not in ZOOM_LEVELS:
        return day_width
    index = ZOOM_LEVELS.index(day_width)
    return ZOOM_LEVELS[max(index - 1, 0)]


def _dated_ranges(
    tasks: Sequence[Mapping[str, Any]],
) -> list[tuple[pendulum.DateTime, pendulum.DateTime]]:
    ranges = []
    for task in tasks:
        start = parse_day(task.get("start"))
        end = parse_day(task.get("end"))
        if start is not None and end is not None:
            ranges.append((start, end))
    return ranges


def compute_span(
    tasks: Sequence[Mapping[str, Any]], today: pendulum.DateTime
) -> CalendarSpan:
    """
    Visible date range for a set of tasks.

    The range runs from the earliest start to the latest end, padded by a day
    on each side. Tasks without a parseable start and end are ignored; when
    none are left the range is a window of EMPTY_WINDOW_DAYS around today.
    """
    ranges = _dated_ranges(tasks)

    if not ranges:
        today_day = to_utc_midnight(today)
        start = add_days(today_day, -EMPTY_WINDOW_DAYS)
        end = add_days(today_day, EMPTY_WINDOW_DAYS)
        logger.debug("no dated tasks, using window %s..%s", start, end)
    else:
        start = add_days(min(start for start, _ in ranges), -SPAN_PADDING_DAYS)
        end = add_days(max(end for _, end in ranges), SPAN_PADDING_DAYS)

    return {
        "start": start,
        "end": end,
        "total_days": days_between(start, end) + 1,
    }


def generate_days(span: CalendarSpan) -> list[GridDay]:
    days: list[GridDay] = []
    for index in range(span["total_days"]):
        date = add_days(span["start"], index)
        days.append(
            {
                "index": index,
                "date": date,
                "week_number": week_number(date),
                "is_non_working": is_non_working_day(date),
            }
        )
    return days


def _build_bands(
    days: list[GridDay], key: Callable[[GridDay], Any], label: Callable[[GridDay], str]
) -> list[Band]:
    """Group consecutive days sharing the same key into labelled bands."""
    bands: list[Band] = []
    current_key: Any = None
    for day in days:
        day_key = key(day)
        if not bands or day_key != current_key:
            current_key = day_key
            bands.append(
                {
                    "label": label(day),
                    "start_day_index": day["index"],
                    "day_count": 1,
                }
            )
        else:
            bands[-1]["day_count"] += 1
    return bands


def build_month_bands(days: list[GridDay]) -> list[Band]:
    return _build_bands(
        days,
        key=lambda day: (day["date"].year, day["date"].month),
        label=lambda day: month_label(day["date"]),
    )


def build_week_bands(days: list[GridDay]) -> list[Band]:
    return _build_bands(
        days,
        key=lambda day: day["week_number"],
        label=lambda day: str(day["week_number"]),
    )


def compute_today_offset(
    span: CalendarSpan, day_width: int, today: pendulum.DateTime
) -> Optional[int]:
    today_day = to_utc_midnight(today)
    if today_day < span["start"] or today_day > span["end"]:
        return None
    return days_between(span["start"], today_day) * day_width


def build_grid(
    tasks: Sequence[Mapping[str, Any]],
    day_width: int,
    today: pendulum.DateTime,
) -> TimelineGrid:
    """
    Build the calendar grid for a gantt view.

    Args:
        tasks: Anything carrying "start" and "end" dates
        day_width: Width of one day in display units (the zoom level); not validated
        today: The current day, used for the empty fallback window and the today marker

    Returns:
        The span, one entry per day, week and month header bands and the
        today marker offset (None when today lies outside the span). Bands
        are only produced when at least one task is dated.
    """
    span = compute_span(tasks, today)
    days = generate_days(span)
    has_dated_tasks = bool(_dated_ranges(tasks))

    return {
        "span": span,
        "day_width": day_width,
        "days": days,
        "week_bands": build_week_bands(days) if has_dated_tasks else [],
        "month_bands": build_month_bands(days) if has_dated_tasks else [],
        "today_offset": compute_today_offset(span, day_width, today),
    }
