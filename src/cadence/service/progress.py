# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum

from cadence.model.activity import Activity
from cadence.time import DateInput, days_between, parse_day


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def compute_progress(activities: list[Activity]) -> int:
    """
    Weighted completion of a list of activities, as an integer percentage.

    Completion is binary per activity; only the weight is continuous. An
    empty list or a zero total weight yields 0.
    """
    if not activities:
        return 0

    total_weight = sum(activity["weight"] or 0 for activity in activities)
    if total_weight == 0:
        return 0

    completed_weight = sum(
        activity["weight"] or 0
        for activity in activities
        if activity["is_completed"]
    )
    return round_half_up(100 * completed_weight / total_weight)


def compute_planned_progress(
    start: Optional[DateInput],
    end: Optional[DateInput],
    today: pendulum.DateTime,
) -> int:
    """
    Share of the start..end range that has elapsed as of today.

    All three values are compared as UTC calendar days. Missing dates and
    zero or negative ranges yield 0 rather than 100.
    """
    start_day = parse_day(start)
    end_day = parse_day(end)
    today_day = parse_day(today)
    if start_day is None or end_day is None or today_day is None:
        return 0

    total_days = days_between(start_day, end_day)
    if total_days <= 0:
        return 0

    elapsed_days = days_between(start_day, today_day)
    if elapsed_days <= 0:
        return 0
    if elapsed_days >= total_days:
        return 100

    return round_half_up(100 * elapsed_days / total_days)
