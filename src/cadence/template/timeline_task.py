# SPDX-License-Identifier: MIT

from cadence.model.entity_id import generate_entity_id
from cadence.model.timeline_task import TaskSource, TaskStatus, TimelineTask


def get_manual_task_template() -> TimelineTask:
    return {
        "id": generate_entity_id(),
        "sequence": 0,
        "title": "",
        "start": None,
        "end": None,
        "actual_percent": 0,
        "planned_percent_today": 0,
        "status": TaskStatus.NEW,
        "source": TaskSource.MANUAL,
        "code": None,
        "department": None,
        "description": None,
    }
