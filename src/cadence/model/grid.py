# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class CalendarSpan(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    total_days: int


class GridDay(TypedDict):
    index: int
    date: pendulum.DateTime
    week_number: int
    is_non_working: bool


class Band(TypedDict):
    label: str
    start_day_index: int
    day_count: int


class TimelineGrid(TypedDict):
    span: CalendarSpan
    day_width: int
    days: list[GridDay]
    week_bands: list[Band]
    month_bands: list[Band]
    today_offset: Optional[int]
