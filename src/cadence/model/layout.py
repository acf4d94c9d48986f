# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

from cadence.model.grid import TimelineGrid
from cadence.model.timeline_task import TimelineTask


class UnplaceableReason(StrEnum):
    MISSING_START = "missing_start"
    MISSING_END = "missing_end"
    START_AFTER_END = "start_after_end"


class UnplaceableTask(TypedDict):
    task: TimelineTask
    reason: UnplaceableReason


class TaskPartition(TypedDict):
    placeable: list[TimelineTask]
    unplaceable: list[UnplaceableTask]


class PlacedTask(TypedDict):
    task: TimelineTask
    row: int
    row_offset: int
    start_offset_days: int
    duration_days: int
    pixel_offset: int
    pixel_width: int
    is_overdue: bool
    fill_percent: float
    planned_marker_percent: Optional[float]


class Timeline(TypedDict):
    grid: TimelineGrid
    placed: list[PlacedTask]
    unplaceable: list[UnplaceableTask]
