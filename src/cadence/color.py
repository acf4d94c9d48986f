# SPDX-License-Identifier: MIT

from typing import TypedDict

from cadence.model.performance import PerformanceStatus
from cadence.model.priority import PriorityCategory
from cadence.model.timeline_task import TaskStatus


class StatusStyle(TypedDict):
    hex: str
    terminal: str
    dashed: bool


STATUS_STYLES: dict[TaskStatus, StatusStyle] = {
    TaskStatus.NEW: {"hex": "#7A8595", "terminal": "grey58", "dashed": False},
    TaskStatus.IN_PROGRESS: {
        "hex": "#FF8C32",
        "terminal": "dark_orange",
        "dashed": False,
    },
    TaskStatus.UNDER_REVIEW: {
        "hex": "#A58BD3",
        "terminal": "medium_purple2",
        "dashed": True,
    },
    TaskStatus.CLOSED: {"hex": "#18C37E", "terminal": "spring_green3", "dashed": False},
}

PRIORITY_CATEGORY_COLORS: dict[PriorityCategory, str] = {
    PriorityCategory.QUICK_WINS: "green",
    PriorityCategory.MAJOR_PROJECTS: "blue",
    PriorityCategory.SMALL_QUICK_WINS: "yellow",
    PriorityCategory.NOT_WORTH_IT: "bright_black",
}

PERFORMANCE_COLORS: dict[PerformanceStatus, str] = {
    PerformanceStatus.AHEAD: "green",
    PerformanceStatus.ON_TRACK: "cyan",
    PerformanceStatus.BEHIND: "red",
}

# Gantt chart elements
OVERDUE_TERMINAL_COLOR = "red"
TODAY_MARKER_COLOR = "magenta"
PLANNED_MARKER_COLOR = "plum1"
NON_WORKING_DAY_BACKGROUND = "grey23"
EMPTY_BAR_COLOR = "grey35"


def status_style(status: TaskStatus) -> StatusStyle:
    """Style for a task status, defaulting to the style of a new task."""
    return STATUS_STYLES.get(status, STATUS_STYLES[TaskStatus.NEW])
