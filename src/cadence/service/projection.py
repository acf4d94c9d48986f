# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from cadence.model.challenge import Challenge
from cadence.model.priority import Level
from cadence.model.timeline_task import TaskSource, TaskStatus, TimelineTask
from cadence.service.priority import priority_of
from cadence.service.progress import compute_planned_progress, compute_progress
from cadence.template.challenge import get_challenge_template
from cadence.template.timeline_task import get_manual_task_template

CHALLENGE_CODE_PREFIX = "CH"
_CHALLENGE_CODE_PATTERN = re.compile(rf"^{CHALLENGE_CODE_PREFIX}(\d+)$")


def challenge_to_timeline_task(
    challenge: Challenge, today: pendulum.DateTime
) -> TimelineTask:
    """Read-only projection of a challenge onto a timeline row."""
    return {
        "id": challenge["id"],
        "sequence": 0,
        "title": challenge["title"],
        "start": challenge["start_date"],
        "end": challenge["target_date"],
        "actual_percent": compute_progress(challenge["activities"]),
        "planned_percent_today": compute_planned_progress(
            challenge["start_date"], challenge["target_date"], today
        ),
        "status": challenge["status"],
        "source": TaskSource.LINKED,
        "code": challenge["code"],
        "department": challenge["department"],
        "description": challenge.get("description"),
    }


def next_manual_sequence(manual_tasks: list[TimelineTask]) -> int:
    if not manual_tasks:
        return 1
    return manual_tasks[-1]["sequence"] + 1


def new_manual_task(
    manual_tasks: list[TimelineTask],
    title: str,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    actual_percent: float = 0,
    status: Optional[str] = None,
    department: Optional[str] = None,
    description: Optional[str] = None,
) -> TimelineTask:
    task = get_manual_task_template()
    task["sequence"] = next_manual_sequence(manual_tasks)
    task["title"] = title
    task["start"] = start
    task["end"] = end
    task["actual_percent"] = actual_percent
    task["department"] = department
    task["description"] = description
    if status is not None:
        task["status"] = TaskStatus(status)
    return task


def collect_timeline_tasks(
    challenges: list[Challenge],
    manual_tasks: list[TimelineTask],
    today: pendulum.DateTime,
) -> list[TimelineTask]:
    """Linked rows for every active challenge followed by the manual rows."""
    linked = [
        challenge_to_timeline_task(challenge, today)
        for challenge in challenges
        if not challenge["archived"]
    ]
    return linked + list(manual_tasks)


def apply_priority(challenge: Challenge) -> Challenge:
    """Cache the derived priority fields on the record."""
    result = priority_of(challenge)
    challenge["priority_category"] = result["category"]
    challenge["priority_score"] = result["score"]
    challenge["priority"] = result["legacy_label"]
    return challenge


def generate_next_challenge_code(challenges: list[Challenge]) -> str:
    highest = 0
    for challenge in challenges:
        match = _CHALLENGE_CODE_PATTERN.match(challenge.get("code") or "")
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{CHALLENGE_CODE_PREFIX}{highest + 1:02d}"


def new_challenge(
    challenges: list[Challenge],
    title: str,
    department: str,
    effort: Level,
    impact: Level,
    start_date: pendulum.DateTime,
    target_date: pendulum.DateTime,
    description: Optional[str] = None,
) -> Challenge:
    """New challenge with the next free code and its priority cached."""
    challenge = get_challenge_template()
    challenge["code"] = generate_next_challenge_code(challenges)
    challenge["title"] = title
    challenge["department"] = department
    challenge["effort"] = effort
    challenge["impact"] = impact
    challenge["start_date"] = start_date
    challenge["target_date"] = target_date
    challenge["description"] = description
    return apply_priority(challenge)
