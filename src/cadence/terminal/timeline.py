# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from cadence.model.layout import Timeline
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.repository.portfolio import PORTFOLIO_REPO
from cadence.service.export import timeline_to_dict
from cadence.service.grid import zoom_in as next_zoom_in
from cadence.service.grid import zoom_out as next_zoom_out
from cadence.service.layout import build_timeline
from cadence.service.projection import collect_timeline_tasks
from cadence.terminal.custom_typer import AliasedTyperGroup
from cadence.terminal.parse import parse_date
from cadence.time import datetime_to_date_str, today_utc
from cadence.view.views.gantt import gantt_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

TodayOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--today",
        parser=parse_date,
        help="reference day, valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]
ZoomOption = Annotated[
    Optional[int],
    typer.Option("--zoom", "-z", min=1, help="day width in display units"),
]


def _current_timeline(zoom: Optional[int], today: pendulum.DateTime) -> Timeline:
    day_width = zoom if zoom is not None else CONFIGURATION_REPO.get_config()["default_zoom"]
    tasks = collect_timeline_tasks(
        PORTFOLIO_REPO.get_challenges(), PORTFOLIO_REPO.get_manual_tasks(), today
    )
    return build_timeline(tasks, day_width, today)


@app.command("show, s")
def show(zoom: ZoomOption = None, today: TodayOption = None) -> None:
    """Draw the portfolio as a gantt chart."""
    reference_day = today or today_utc()
    timeline = _current_timeline(zoom, reference_day)
    gantt_view(timeline, datetime_to_date_str(reference_day))


@app.command("export, e", no_args_is_help=True)
def export(
    path: Path,
    zoom: ZoomOption = None,
    today: TodayOption = None,
) -> None:
    """Write the computed grid and rows to a YAML file."""
    reference_day = today or today_utc()
    timeline = _current_timeline(zoom, reference_day)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump(timeline_to_dict(timeline), Dumper=Dumper, sort_keys=False))
    logger.info("exported %d rows to %s", len(timeline["placed"]), path)

    Console().print(
        f"Exported {len(timeline['placed'])} rows "
        f"({len(timeline['unplaceable'])} not placeable) to {path}"
    )


@app.command("zoom-in, zi")
def zoom_in() -> None:
    """Widen the default day width by one level."""
    config = CONFIGURATION_REPO.get_config()
    new_zoom = next_zoom_in(config["default_zoom"])
    CONFIGURATION_REPO.update_config(default_zoom=new_zoom)
    Console().print(f"zoom: {new_zoom}")


@app.command("zoom-out, zo")
def zoom_out() -> None:
    """Narrow the default day width by one level."""
    config = CONFIGURATION_REPO.get_config()
    new_zoom = next_zoom_out(config["default_zoom"])
    CONFIGURATION_REPO.update_config(default_zoom=new_zoom)
    Console().print(f"zoom: {new_zoom}")
