# SPDX-License-Identifier: MIT

import re
from enum import StrEnum
from typing import Optional, TypeVar

import pendulum
import typer

from cadence.time import today_utc, to_utc_midnight

E = TypeVar("E", bound=StrEnum)


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a command line date into a UTC calendar day.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/tm, or a day offset
    from today such as 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}", date):
        try:
            return to_utc_midnight(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {date}: {e}")

    if re.match(r"^-?\d+$", date):
        return today_utc().add(days=int(date))

    if date in ("today", "t"):
        return today_utc()
    if date in ("yesterday", "y"):
        return today_utc().subtract(days=1)
    if date in ("tomorrow", "tm"):
        return today_utc().add(days=1)

    raise typer.BadParameter(f"Invalid date: {date}")


def parse_enum(enum_type: type[E], value: str) -> E:
    try:
        return enum_type(value.strip().lower().replace("-", "_"))
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise typer.BadParameter(f"{value!r} is not one of: {choices}")


def parse_percent(value: Optional[str | int | float]) -> Optional[float]:
    if value is None:
        return None
    try:
        percent = float(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid percentage: {value}")
    if percent < 0 or percent > 100:
        raise typer.BadParameter(f"Percentage must be between 0 and 100, got {value}")
    return percent
