# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from cadence.color import (
    EMPTY_BAR_COLOR,
    NON_WORKING_DAY_BACKGROUND,
    OVERDUE_TERMINAL_COLOR,
    PLANNED_MARKER_COLOR,
    TODAY_MARKER_COLOR,
    status_style,
)
from cadence.model.grid import Band, TimelineGrid
from cadence.model.layout import PlacedTask, Timeline
from cadence.model.timeline_task import TaskSource
from cadence.service.progress import round_half_up
from cadence.time import datetime_to_date_str
from cadence.view.state import get_ascii_bars
from cadence.view.views.header import header


def gantt_view(
    timeline: Timeline,
    today_label: str,
    left_column_width: int = 36,
) -> None:
    """
    Display the timeline as a gantt chart, one terminal column per day.

    Args:
        timeline: Output of build_timeline
        today_label: The reference day, shown in the header
        left_column_width: Width of the task title column (defaults to 36)
    """
    header("timeline", today_label)

    console = Console()
    grid = timeline["grid"]
    span = grid["span"]

    console.print(
        f"\n[bold]{datetime_to_date_str(span['start'])} to "
        f"{datetime_to_date_str(span['end'])}[/bold] "
        f"({span['total_days']} days, zoom {grid['day_width']})\n"
    )

    today_index = _today_index(grid)

    chart_elements: list[Text] = []
    chart_elements.append(
        _build_band_row("", grid["month_bands"], grid, left_column_width)
    )
    chart_elements.append(
        _build_band_row("week", grid["week_bands"], grid, left_column_width)
    )
    chart_elements.append(_build_day_row(grid, today_index, left_column_width))
    chart_elements.append(
        Text("─" * (left_column_width + span["total_days"]), style="dim")
    )

    if not timeline["placed"]:
        chart_elements.append(Text("No tasks to display", style="dim"))

    for placed in timeline["placed"]:
        chart_elements.append(
            _build_task_row(placed, grid, today_index, left_column_width)
        )

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))

    if timeline["unplaceable"]:
        console.print("[bold]Not shown[/bold]")
        for entry in timeline["unplaceable"]:
            task = entry["task"]
            console.print(f"  [dim]{task['title']}[/dim]  ({entry['reason']})")
        console.print()


def _today_index(grid: TimelineGrid) -> Optional[int]:
    if grid["today_offset"] is None:
        return None
    return grid["today_offset"] // grid["day_width"]


def _build_band_row(
    label: str, bands: list[Band], grid: TimelineGrid, left_column_width: int
) -> Text:
    row = Text(label.ljust(left_column_width), style="dim")
    if not bands:
        row.append(" " * grid["span"]["total_days"])
        return row
    for i, band in enumerate(bands):
        width = band["day_count"]
        text = band["label"][:width].center(width)
        row.append(text, style="bold" if i % 2 == 0 else "bold bright_black")
    return row


def _build_day_row(
    grid: TimelineGrid, today_index: Optional[int], left_column_width: int
) -> Text:
    row = Text("day".ljust(left_column_width), style="dim")
    for day in grid["days"]:
        style = "dim"
        if day["is_non_working"]:
            style += f" on {NON_WORKING_DAY_BACKGROUND}"
        if day["index"] == today_index:
            style = f"bold {TODAY_MARKER_COLOR}"
        row.append(str(day["date"].day % 10), style=style)
    return row


def _format_task_label(placed: PlacedTask, width: int) -> Text:
    task = placed["task"]
    if task["source"] == TaskSource.MANUAL:
        prefix = f"{task['sequence']:>3} "
    else:
        prefix = f"{(task.get('code') or ''):>5} "
    title = task["title"]
    available = width - len(prefix) - 1
    if len(title) > available:
        title = title[: max(available - 1, 0)] + "…"
    label = Text(prefix, style="dim")
    label.append(title.ljust(available) + " ")
    return label


def _build_task_row(
    placed: PlacedTask,
    grid: TimelineGrid,
    today_index: Optional[int],
    left_column_width: int,
) -> Text:
    task = placed["task"]
    style = status_style(task["status"])
    ascii_bars = get_ascii_bars()

    bar_start = placed["start_offset_days"]
    bar_end = bar_start + placed["duration_days"]
    filled_days = round_half_up(placed["fill_percent"] / 100 * placed["duration_days"])

    planned_index: Optional[int] = None
    if placed["planned_marker_percent"] is not None:
        planned_index = bar_start + min(
            int(placed["planned_marker_percent"] / 100 * placed["duration_days"]),
            placed["duration_days"] - 1,
        )

    fill_char = "#" if ascii_bars else "█"
    rest_char = "-" if ascii_bars else ("╌" if style["dashed"] else "░")

    row = _format_task_label(placed, left_column_width)
    for day in grid["days"]:
        i = day["index"]
        background = f" on {NON_WORKING_DAY_BACKGROUND}" if day["is_non_working"] else ""
        if bar_start <= i < bar_end:
            filled = i - bar_start < filled_days
            cell_style = style["terminal"] if filled else EMPTY_BAR_COLOR
            if placed["is_overdue"]:
                cell_style += " underline"
            if i == planned_index:
                row.append("|" if ascii_bars else "┃", style=f"bold {PLANNED_MARKER_COLOR}")
            else:
                row.append(fill_char if filled else rest_char, style=cell_style)
        elif i == today_index:
            row.append(":" if ascii_bars else "┊", style=TODAY_MARKER_COLOR + background)
        else:
            row.append(" ", style=background.strip())

    row.append(f" {round_half_up(placed['fill_percent'])}%", style=style["terminal"])
    if placed["is_overdue"]:
        row.append(" overdue", style=OVERDUE_TERMINAL_COLOR)
    return row

