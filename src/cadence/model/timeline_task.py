# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import NotRequired, Optional, TypedDict

from cadence.model.entity_id import EntityId
from cadence.time import DateInput


class TaskStatus(StrEnum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    UNDER_REVIEW = "under_review"
    CLOSED = "closed"


class TaskSource(StrEnum):
    LINKED = "linked"
    MANUAL = "manual"


class TimelineTask(TypedDict):
    id: EntityId
    sequence: int
    title: str
    start: Optional[DateInput]
    end: Optional[DateInput]
    actual_percent: float
    planned_percent_today: NotRequired[Optional[float]]
    status: TaskStatus
    source: TaskSource
    code: NotRequired[Optional[str]]
    department: NotRequired[Optional[str]]
    description: NotRequired[Optional[str]]
