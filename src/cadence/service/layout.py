# SPDX-License-Identifier: MIT

import logging
from typing import Optional, cast

import pendulum

from cadence.model.grid import TimelineGrid
from cadence.model.layout import (
    PlacedTask,
    Timeline,
    TaskPartition,
    UnplaceableReason,
    UnplaceableTask,
)
from cadence.model.timeline_task import TimelineTask
from cadence.service.grid import build_grid
from cadence.service.progress import clamp_percent
from cadence.time import days_between, parse_day, to_utc_midnight

logger = logging.getLogger(__name__)

ROW_HEIGHT = 44
# Gap left between the end of a bar and the next day column.
BAR_INSET = 2


def _unplaceable_reason(task: TimelineTask) -> Optional[UnplaceableReason]:
    start = parse_day(task["start"])
    end = parse_day(task["end"])
    if start is None:
        return UnplaceableReason.MISSING_START
    if end is None:
        return UnplaceableReason.MISSING_END
    if start > end:
        return UnplaceableReason.START_AFTER_END
    return None


def partition_tasks(tasks: list[TimelineTask]) -> TaskPartition:
    """
    Split tasks into those that can be drawn and those that cannot.

    Input order is preserved on both sides. A task cannot be drawn when a
    date is missing or unparseable, or when it starts after it ends.
    """
    placeable: list[TimelineTask] = []
    unplaceable: list[UnplaceableTask] = []
    for task in tasks:
        reason = _unplaceable_reason(task)
        if reason is None:
            placeable.append(task)
        else:
            logger.debug("skipping task %s: %s", task["id"], reason)
            unplaceable.append({"task": task, "reason": reason})
    return {"placeable": placeable, "unplaceable": unplaceable}


def sort_by_start(tasks: list[TimelineTask]) -> list[TimelineTask]:
    # sorted() is stable, ties keep their input order
    return sorted(
        tasks, key=lambda task: cast(pendulum.DateTime, parse_day(task["start"]))
    )


def is_overdue(task: TimelineTask, today: pendulum.DateTime) -> bool:
    end = parse_day(task["end"])
    if end is None:
        return False
    return to_utc_midnight(today) > end and task["actual_percent"] < 100


def _planned_marker(task: TimelineTask) -> Optional[float]:
    planned = task.get("planned_percent_today")
    if planned is None or planned <= 0:
        return None
    return clamp_percent(planned)


def place_task(
    task: TimelineTask, row: int, grid: TimelineGrid, today: pendulum.DateTime
) -> PlacedTask:
    # Only placeable tasks reach this point, both dates parse
    start = cast(pendulum.DateTime, parse_day(task["start"]))
    end = cast(pendulum.DateTime, parse_day(task["end"]))
    day_width = grid["day_width"]

    start_offset_days = days_between(grid["span"]["start"], start)
    duration_days = days_between(start, end) + 1

    return {
        "task": task,
        "row": row,
        "row_offset": row * ROW_HEIGHT,
        "start_offset_days": start_offset_days,
        "duration_days": duration_days,
        "pixel_offset": start_offset_days * day_width,
        "pixel_width": duration_days * day_width - BAR_INSET,
        "is_overdue": is_overdue(task, today),
        "fill_percent": clamp_percent(task["actual_percent"]),
        "planned_marker_percent": _planned_marker(task),
    }


def _place_all(
    placeable: list[TimelineTask], grid: TimelineGrid, today: pendulum.DateTime
) -> list[PlacedTask]:
    return [
        place_task(task, row, grid, today)
        for row, task in enumerate(sort_by_start(placeable))
    ]


def layout_tasks(
    tasks: list[TimelineTask], grid: TimelineGrid, today: pendulum.DateTime
) -> list[PlacedTask]:
    """
    Place each drawable task on its own row, ordered by start date.

    Tasks are never packed into shared rows, so row N of the bar chart always
    lines up with row N of the task list beside it.
    """
    return _place_all(partition_tasks(tasks)["placeable"], grid, today)


def build_timeline(
    tasks: list[TimelineTask], day_width: int, today: pendulum.DateTime
) -> Timeline:
    partition = partition_tasks(tasks)
    grid = build_grid(tasks, day_width, today)
    placed = _place_all(partition["placeable"], grid, today)
    logger.debug(
        "timeline: %d placed, %d unplaceable, %d days",
        len(placed),
        len(partition["unplaceable"]),
        grid["span"]["total_days"],
    )
    return {
        "grid": grid,
        "placed": placed,
        "unplaceable": partition["unplaceable"],
    }
