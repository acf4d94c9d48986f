# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from cadence.view.state import get_show_header


def header(report_name: str, today: Optional[str] = None) -> None:
    """Print the application header with the report name.

    Args:
        report_name: The name of the report
        today: Optional reference day the report was computed for
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]cadence[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[sandy_brown]{report_name}[/sandy_brown]", (0, 1)))
    if today is not None:
        print(Padding(f"[plum1]as of {today}[/plum1]", (0, 1)))
