# SPDX-License-Identifier: MIT

import datetime
from enum import Enum
from typing import Any

import pendulum

from cadence.model.layout import Timeline
from cadence.time import datetime_to_date_str, to_utc_midnight


def to_plain(value: Any) -> Any:
    """Convert a computed structure into YAML/JSON friendly builtins."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, pendulum.DateTime):
        return datetime_to_date_str(value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return datetime_to_date_str(to_utc_midnight(value))
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def timeline_to_dict(timeline: Timeline) -> dict[str, Any]:
    return to_plain(timeline)
