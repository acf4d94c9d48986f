# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from cadence import configuration
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("default_zoom", str(config["default_zoom"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set")
def set_config(
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    default_zoom: Annotated[
        Optional[int], typer.Option("--default-zoom", min=1)
    ] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
) -> None:
    """Change configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"log level must be one of {', '.join(LOG_LEVELS)}",
            param_hint="--log-level",
        )

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        default_zoom=default_zoom,
        data_path=data_path,
        log_level=log_level,
    )
    view()
