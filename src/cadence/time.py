# SPDX-License-Identifier: MIT

import datetime
import logging
import math
from typing import Optional, TypeAlias, Union

import pendulum

logger = logging.getLogger(__name__)

DateInput: TypeAlias = Union[str, datetime.date, datetime.datetime, pendulum.DateTime]

# Friday and Saturday are the non-working days of the target calendar.
NON_WORKING_WEEKDAYS = (pendulum.FRIDAY, pendulum.SATURDAY)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_utc() -> pendulum.DateTime:
    return to_utc_midnight(now_utc())


def utc_day(year: int, month: int, day: int) -> pendulum.DateTime:
    return pendulum.datetime(year, month, day, tz="UTC")


def to_utc_midnight(value: DateInput) -> pendulum.DateTime:
    """
    Truncate a date or timestamp to 00:00:00 UTC of its calendar day.

    Naive datetimes are read as UTC, aware datetimes are converted to UTC
    first, plain dates and date strings are taken as the calendar day they
    name. Raises ValueError for strings that do not describe a date.
    """
    if isinstance(value, str):
        parsed = pendulum.parse(value, tz="UTC")
        if not isinstance(parsed, (datetime.datetime, datetime.date)):
            raise ValueError(f"not a calendar date: {value!r}")
        value = parsed

    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            instant = pendulum.instance(value, tz="UTC")
        else:
            instant = pendulum.instance(value).in_tz("UTC")
        return utc_day(instant.year, instant.month, instant.day)

    return utc_day(value.year, value.month, value.day)


def parse_day(value: Optional[DateInput]) -> Optional[pendulum.DateTime]:
    """
    Lenient form of to_utc_midnight used at the data boundary.

    Returns None for missing, empty or unparseable input so callers can apply
    their own skip policy instead of failing.
    """
    if value is None or value == "":
        return None
    try:
        return to_utc_midnight(value)
    except (ValueError, TypeError, OverflowError):
        logger.debug("ignoring unparseable date %r", value)
        return None


def days_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """Signed number of calendar days from start to end."""
    return end.toordinal() - start.toordinal()


def add_days(day: pendulum.DateTime, days: int) -> pendulum.DateTime:
    return day.add(days=days)


def is_non_working_day(day: pendulum.DateTime) -> bool:
    return day.day_of_week in NON_WORKING_WEEKDAYS


def week_number(value: DateInput) -> int:
    """
    Week of the year with Sunday as the first day of the week.

    The date is moved back to the Sunday that opens its week, then the days
    since January 1st of that Sunday's year are counted in whole weeks.
    """
    day = to_utc_midnight(value)
    # isoweekday: Monday=1 .. Sunday=7, so Sunday maps to 0
    sunday = day.subtract(days=day.isoweekday() % 7)
    year_start = utc_day(sunday.year, 1, 1)
    return math.ceil((days_between(year_start, sunday) + 1) / 7)


def month_label(day: pendulum.DateTime) -> str:
    return f"{MONTH_NAMES[day.month - 1]} {day.year}"


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD")


def datetime_to_date_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_date_str(datetime)
