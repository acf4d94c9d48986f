# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from cadence.model.performance import PerformanceStatus
from cadence.model.priority import Level
from cadence.repository.portfolio import PORTFOLIO_REPO
from cadence.service.dashboard import filter_by_performance
from cadence.service.priority import compute_priority
from cadence.service.projection import new_challenge
from cadence.terminal.custom_typer import AliasedTyperGroup
from cadence.terminal.parse import parse_date, parse_enum
from cadence.time import today_utc
from cadence.view.views.challenge import (
    challenges_view,
    priority_view,
    single_challenge_view,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_challenges(
    performance: Annotated[
        Optional[list[str]],
        typer.Option(
            "--performance",
            "-p",
            help="ahead, on_track or behind (repeatable)",
        ),
    ] = None,
    include_archived: Annotated[
        bool, typer.Option("--archived", help="include archived challenges")
    ] = False,
    today: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--today", parser=parse_date, help="reference day"),
    ] = None,
) -> None:
    """List challenges with their progress, performance and priority."""
    reference_day = today or today_utc()
    statuses = [parse_enum(PerformanceStatus, value) for value in performance or []]

    challenges = PORTFOLIO_REPO.get_challenges()
    if not include_archived:
        challenges = [c for c in challenges if not c["archived"]]
    challenges = filter_by_performance(challenges, statuses, reference_day)

    challenges_view("challenges", challenges, reference_day)


@app.command("priority, p", no_args_is_help=True)
def priority(effort: str, impact: str) -> None:
    """Look up the priority bucket for an effort and impact pair."""
    effort_level = parse_enum(Level, effort)
    impact_level = parse_enum(Level, impact)
    priority_view(effort_level, impact_level, compute_priority(effort_level, impact_level))


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    department: Annotated[str, typer.Option("--department", "-d")],
    start: Annotated[
        pendulum.DateTime,
        typer.Option(
            "--start",
            "-s",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ],
    target: Annotated[
        pendulum.DateTime,
        typer.Option(
            "--target",
            "-t",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ],
    effort: Annotated[str, typer.Option("--effort", help="low, medium or high")] = "medium",
    impact: Annotated[str, typer.Option("--impact", help="low, medium or high")] = "medium",
    description: Annotated[Optional[str], typer.Option("--description")] = None,
) -> None:
    """Add a challenge with the next free code."""
    if not title.strip():
        raise typer.BadParameter("title cannot be empty", param_hint="TITLE")
    if target < start:
        raise typer.BadParameter("target must not be before start", param_hint="--target")

    challenge = new_challenge(
        PORTFOLIO_REPO.get_challenges(),
        title=title.strip(),
        department=department,
        effort=parse_enum(Level, effort),
        impact=parse_enum(Level, impact),
        start_date=start,
        target_date=target,
        description=description,
    )
    PORTFOLIO_REPO.save_new_challenge(challenge)

    single_challenge_view(challenge)
