# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from cadence.model.timeline_task import TaskStatus
from cadence.repository.portfolio import PORTFOLIO_REPO
from cadence.service.projection import new_manual_task
from cadence.terminal.custom_typer import AliasedTyperGroup
from cadence.terminal.parse import parse_date, parse_enum, parse_percent
from cadence.view.views.task import manual_tasks_view, single_manual_task_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    start: Annotated[
        pendulum.DateTime,
        typer.Option(
            "--start",
            "-s",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ],
    end: Annotated[
        pendulum.DateTime,
        typer.Option(
            "--end",
            "-e",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ],
    actual: Annotated[
        Optional[float],
        typer.Option("--actual", "-a", parser=parse_percent, help="0-100"),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", help="new, in_progress, under_review or closed"),
    ] = None,
    department: Annotated[Optional[str], typer.Option("--department", "-d")] = None,
    description: Annotated[Optional[str], typer.Option("--description")] = None,
) -> None:
    """Add a task that is not linked to a challenge."""
    if not title.strip():
        raise typer.BadParameter("title cannot be empty", param_hint="TITLE")
    if end < start:
        raise typer.BadParameter("end must not be before start", param_hint="--end")

    task_status = parse_enum(TaskStatus, status) if status is not None else None

    task = new_manual_task(
        PORTFOLIO_REPO.get_manual_tasks(),
        title=title.strip(),
        start=start,
        end=end,
        actual_percent=actual or 0,
        status=task_status,
        department=department,
        description=description,
    )
    PORTFOLIO_REPO.save_new_manual_task(task)

    single_manual_task_view(task)


@app.command("list, ls")
def list_tasks() -> None:
    """List manual tasks in creation order."""
    manual_tasks_view(PORTFOLIO_REPO.get_manual_tasks())
