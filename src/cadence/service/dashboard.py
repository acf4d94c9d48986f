# SPDX-License-Identifier: MIT

from collections.abc import Iterable

import pendulum

from cadence.model.challenge import Challenge
from cadence.model.dashboard import DepartmentAdherence, Kpis
from cadence.model.performance import PerformanceStatus
from cadence.model.priority import PriorityCategory
from cadence.model.timeline_task import TaskStatus
from cadence.service.performance import classify_performance
from cadence.service.priority import priority_of
from cadence.service.progress import (
    compute_planned_progress,
    compute_progress,
    round_half_up,
)
from cadence.time import parse_day, to_utc_midnight


def performance_of(challenge: Challenge, today: pendulum.DateTime) -> PerformanceStatus:
    actual = compute_progress(challenge["activities"])
    planned = compute_planned_progress(
        challenge["start_date"], challenge["target_date"], today
    )
    return classify_performance(actual, planned)


def filter_by_performance(
    challenges: list[Challenge],
    statuses: Iterable[PerformanceStatus],
    today: pendulum.DateTime,
) -> list[Challenge]:
    """Keep challenges in any of the given buckets; no buckets keeps everything."""
    wanted = set(statuses)
    if not wanted:
        return list(challenges)
    return [c for c in challenges if performance_of(c, today) in wanted]


def group_by_priority_category(
    challenges: list[Challenge],
) -> dict[PriorityCategory, list[Challenge]]:
    groups: dict[PriorityCategory, list[Challenge]] = {
        category: [] for category in PriorityCategory
    }
    for challenge in challenges:
        category = priority_of(challenge)["category"]
        groups[category].append(challenge)
    return groups


def is_challenge_overdue(challenge: Challenge, today: pendulum.DateTime) -> bool:
    target = parse_day(challenge["target_date"])
    if target is None:
        return False
    return target < to_utc_midnight(today) and challenge["status"] != TaskStatus.CLOSED


def calculate_kpis(challenges: list[Challenge], today: pendulum.DateTime) -> Kpis:
    kpis: Kpis = {
        "total": len(challenges),
        "overdue": 0,
        "avg_actual_progress": 0.0,
        "performance_distribution": {"on_track": 0, "behind": 0, "ahead": 0},
    }
    if not challenges:
        return kpis

    kpis["overdue"] = sum(1 for c in challenges if is_challenge_overdue(c, today))
    kpis["avg_actual_progress"] = sum(
        compute_progress(c["activities"]) for c in challenges
    ) / len(challenges)

    performances = [performance_of(c, today) for c in challenges]
    kpis["performance_distribution"] = {
        "on_track": performances.count(PerformanceStatus.ON_TRACK),
        "behind": performances.count(PerformanceStatus.BEHIND),
        "ahead": performances.count(PerformanceStatus.AHEAD),
    }

    return kpis


def timeline_adherence(
    challenges: list[Challenge], today: pendulum.DateTime
) -> list[DepartmentAdherence]:
    """
    Average actual against average planned progress per department.

    Departments are listed with the best average actual progress first.
    """
    by_department: dict[str, list[Challenge]] = {}
    for challenge in challenges:
        by_department.setdefault(challenge["department"], []).append(challenge)

    adherence: list[DepartmentAdherence] = []
    for name, department_challenges in by_department.items():
        count = len(department_challenges)
        total_actual = sum(compute_progress(c["activities"]) for c in department_challenges)
        total_planned = sum(
            compute_planned_progress(c["start_date"], c["target_date"], today)
            for c in department_challenges
        )
        adherence.append(
            {
                "name": name,
                "avg_actual": round_half_up(total_actual / count),
                "avg_planned": round_half_up(total_planned / count),
                "count": count,
            }
        )

    adherence.sort(key=lambda item: item["avg_actual"], reverse=True)
    return adherence
