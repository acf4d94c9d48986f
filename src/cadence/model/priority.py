# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict


class Level(StrEnum):
    """Effort and impact share the same three-step scale."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PriorityCategory(StrEnum):
    QUICK_WINS = "quick_wins"
    MAJOR_PROJECTS = "major_projects"
    SMALL_QUICK_WINS = "small_quick_wins"
    NOT_WORTH_IT = "not_worth_it"


class LegacyPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PriorityInput(TypedDict):
    # Values off the scale are allowed and map to the fallback bucket
    effort: Level | str
    impact: Level | str


class PriorityResult(TypedDict):
    category: PriorityCategory
    score: int
    legacy_label: LegacyPriority
