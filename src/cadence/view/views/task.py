# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from cadence.color import status_style
from cadence.model.timeline_task import TimelineTask
from cadence.time import datetime_to_date_str_optional, parse_day
from cadence.view.views.header import header


def single_manual_task_view(task: TimelineTask) -> None:
    header("manual task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    status_color = status_style(task["status"])["terminal"]
    task_table.add_row("id", task["id"])
    task_table.add_row("sequence", str(task["sequence"]))
    task_table.add_row("title", task["title"])
    task_table.add_row("department", task.get("department") or "")
    task_table.add_row(
        "start", datetime_to_date_str_optional(parse_day(task["start"])) or ""
    )
    task_table.add_row(
        "end", datetime_to_date_str_optional(parse_day(task["end"])) or ""
    )
    task_table.add_row("actual", f"{task['actual_percent']}%")
    task_table.add_row(
        "status", f"[{status_color}]{task['status']}[/{status_color}]"
    )

    console = Console()
    console.print(task_table)


def manual_tasks_view(tasks: list[TimelineTask]) -> None:
    header("manual tasks")

    tasks_table = Table(box=box.SIMPLE)
    for column in ["seq", "title", "department", "start", "end", "actual", "status"]:
        tasks_table.add_column(column)

    for task in tasks:
        tasks_table.add_row(
            str(task["sequence"]),
            task["title"],
            task.get("department") or "",
            datetime_to_date_str_optional(parse_day(task["start"])) or "",
            datetime_to_date_str_optional(parse_day(task["end"])) or "",
            f"{task['actual_percent']}%",
            str(task["status"]),
        )

    console = Console()
    console.print(tasks_table)
