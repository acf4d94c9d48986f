# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from cadence.color import PERFORMANCE_COLORS, PRIORITY_CATEGORY_COLORS, status_style
from cadence.model.challenge import Challenge
from cadence.model.priority import Level, PriorityResult
from cadence.service.dashboard import performance_of
from cadence.service.priority import priority_of
from cadence.service.progress import compute_planned_progress, compute_progress
from cadence.time import datetime_to_date_str_optional
from cadence.view.views.header import header


def challenges_view(
    report_name: str,
    challenges: list[Challenge],
    today: pendulum.DateTime,
) -> None:
    header(report_name, datetime_to_date_str_optional(today))

    challenges_table = Table(box=box.SIMPLE)
    for column in [
        "code",
        "title",
        "department",
        "status",
        "start",
        "target",
        "actual",
        "planned",
        "performance",
        "priority",
    ]:
        challenges_table.add_column(column)

    for challenge in challenges:
        performance = performance_of(challenge, today)
        priority = priority_of(challenge)
        status_color = status_style(challenge["status"])["terminal"]
        performance_color = PERFORMANCE_COLORS[performance]
        priority_color = PRIORITY_CATEGORY_COLORS[priority["category"]]

        challenges_table.add_row(
            challenge["code"],
            challenge["title"],
            challenge["department"],
            f"[{status_color}]{challenge['status']}[/{status_color}]",
            datetime_to_date_str_optional(challenge["start_date"]) or "",
            datetime_to_date_str_optional(challenge["target_date"]) or "",
            f"{compute_progress(challenge['activities'])}%",
            f"{compute_planned_progress(challenge['start_date'], challenge['target_date'], today)}%",
            f"[{performance_color}]{performance}[/{performance_color}]",
            f"[{priority_color}]{priority['category']}[/{priority_color}]",
        )

    console = Console()
    if not challenges:
        console.print("\n[dim]No challenges to display[/dim]\n")
        return
    console.print(challenges_table)


def single_challenge_view(challenge: Challenge) -> None:
    header("challenge")

    challenge_table = Table(box=box.SIMPLE)
    challenge_table.add_column("property")
    challenge_table.add_column("value")

    category = challenge.get("priority_category")
    category_text = ""
    if category is not None:
        color = PRIORITY_CATEGORY_COLORS[category]
        category_text = f"[{color}]{category}[/{color}]"

    challenge_table.add_row("id", challenge["id"])
    challenge_table.add_row("code", challenge["code"])
    challenge_table.add_row("title", challenge["title"])
    challenge_table.add_row("department", challenge["department"])
    challenge_table.add_row("effort", str(challenge["effort"]))
    challenge_table.add_row("impact", str(challenge["impact"]))
    challenge_table.add_row("priority", category_text)
    challenge_table.add_row(
        "start", datetime_to_date_str_optional(challenge["start_date"]) or ""
    )
    challenge_table.add_row(
        "target", datetime_to_date_str_optional(challenge["target_date"]) or ""
    )

    console = Console()
    console.print(challenge_table)


def priority_view(effort: Level, impact: Level, result: PriorityResult) -> None:
    header("priority")

    priority_table = Table(box=box.SIMPLE)
    priority_table.add_column("property")
    priority_table.add_column("value")

    color = PRIORITY_CATEGORY_COLORS[result["category"]]
    priority_table.add_row("effort", str(effort))
    priority_table.add_row("impact", str(impact))
    priority_table.add_row("category", f"[{color}]{result['category']}[/{color}]")
    priority_table.add_row("score", str(result["score"]))
    priority_table.add_row("legacy label", str(result["legacy_label"]))

    console = Console()
    console.print(priority_table)
