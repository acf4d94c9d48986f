# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from cadence.log import configure_logging
from cadence.terminal import challenge, configuration, task, timeline
from cadence.terminal.custom_typer import OrderedAliasedTyperGroup
from cadence.terminal.dashboard import dashboard
from cadence.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Cadence - Portfolio timeline and progress tracking in the CLI",
    no_args_is_help=True,
)
app.add_typer(timeline.app, name="timeline, tl")
app.add_typer(challenge.app, name="challenge, ch")
app.add_typer(task.app, name="task, t")
app.add_typer(configuration.app, name="config, c")
app.command(name="dashboard, d")(dashboard)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    ascii_bars: Annotated[
        bool,
        typer.Option("--ascii", help="Draw gantt bars with ASCII characters"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Log debug output"),
    ] = False,
) -> None:
    """
    Cadence - Portfolio timeline and progress tracking in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if ascii_bars:
        view_state.set_ascii_bars(True)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
