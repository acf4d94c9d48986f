# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import pendulum

from cadence.model.activity import Activity
from cadence.model.entity_id import EntityId
from cadence.model.priority import Level, LegacyPriority, PriorityCategory
from cadence.model.timeline_task import TaskStatus


class Challenge(TypedDict):
    id: EntityId
    code: str
    title: str
    description: NotRequired[Optional[str]]
    department: str
    status: TaskStatus
    effort: Level | str
    impact: Level | str
    activities: list[Activity]
    start_date: Optional[pendulum.DateTime]
    target_date: Optional[pendulum.DateTime]
    created: Optional[pendulum.DateTime]
    archived: bool
    priority_category: NotRequired[Optional[PriorityCategory]]
    priority_score: NotRequired[Optional[int]]
    priority: NotRequired[Optional[LegacyPriority]]
