# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from cadence.repository.portfolio import PORTFOLIO_REPO
from cadence.service.dashboard import (
    calculate_kpis,
    group_by_priority_category,
    timeline_adherence,
)
from cadence.terminal.parse import parse_date
from cadence.time import datetime_to_date_str, today_utc
from cadence.view.views.dashboard import dashboard_view


def dashboard(
    today: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--today", parser=parse_date, help="reference day"),
    ] = None,
) -> None:
    """Key figures, timeline adherence and priority buckets."""
    reference_day = today or today_utc()
    challenges = [c for c in PORTFOLIO_REPO.get_challenges() if not c["archived"]]

    dashboard_view(
        datetime_to_date_str(reference_day),
        calculate_kpis(challenges, reference_day),
        timeline_adherence(challenges, reference_day),
        group_by_priority_category(challenges),
    )
