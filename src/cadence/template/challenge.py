# SPDX-License-Identifier: MIT

from cadence.model.challenge import Challenge
from cadence.model.entity_id import generate_entity_id
from cadence.model.priority import Level
from cadence.model.timeline_task import TaskStatus
from cadence.time import now_utc


def get_challenge_template() -> Challenge:
    return {
        "id": generate_entity_id(),
        "code": "",
        "title": "",
        "description": None,
        "department": "",
        "status": TaskStatus.NEW,
        "effort": Level.MEDIUM,
        "impact": Level.MEDIUM,
        "activities": [],
        "start_date": None,
        "target_date": None,
        "created": now_utc(),
        "archived": False,
        "priority_category": None,
        "priority_score": None,
        "priority": None,
    }
