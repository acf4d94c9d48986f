# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from cadence.model.priority import (
    LegacyPriority,
    Level,
    PriorityCategory,
    PriorityInput,
    PriorityResult,
)

logger = logging.getLogger(__name__)

_QUICK_WINS: PriorityResult = {
    "category": PriorityCategory.QUICK_WINS,
    "score": 4,
    "legacy_label": LegacyPriority.HIGH,
}
_MAJOR_PROJECTS: PriorityResult = {
    "category": PriorityCategory.MAJOR_PROJECTS,
    "score": 3,
    "legacy_label": LegacyPriority.HIGH,
}
_SMALL_QUICK_WINS: PriorityResult = {
    "category": PriorityCategory.SMALL_QUICK_WINS,
    "score": 2,
    "legacy_label": LegacyPriority.MEDIUM,
}
_NOT_WORTH_IT: PriorityResult = {
    "category": PriorityCategory.NOT_WORTH_IT,
    "score": 1,
    "legacy_label": LegacyPriority.LOW,
}

# Indexed as PRIORITY_MATRIX[impact][effort]; impact is the primary axis.
PRIORITY_MATRIX: dict[Level, dict[Level, PriorityResult]] = {
    Level.HIGH: {
        Level.LOW: _QUICK_WINS,
        Level.MEDIUM: _MAJOR_PROJECTS,
        Level.HIGH: _MAJOR_PROJECTS,
    },
    Level.MEDIUM: {
        Level.LOW: _QUICK_WINS,
        Level.MEDIUM: _SMALL_QUICK_WINS,
        Level.HIGH: _NOT_WORTH_IT,
    },
    Level.LOW: {
        Level.LOW: _SMALL_QUICK_WINS,
        Level.MEDIUM: _NOT_WORTH_IT,
        Level.HIGH: _NOT_WORTH_IT,
    },
}

FALLBACK_PRIORITY = _SMALL_QUICK_WINS


def _to_level(value: object) -> Optional[Level]:
    try:
        return Level(value)
    except ValueError:
        return None


def compute_priority(effort: object, impact: object) -> PriorityResult:
    """
    Look up the priority bucket for an (effort, impact) pair.

    Values outside the three-level scale fall back to a small quick win.
    """
    effort_level = _to_level(effort)
    impact_level = _to_level(impact)
    if effort_level is None or impact_level is None:
        logger.debug(
            "priority fallback for effort=%r impact=%r", effort, impact
        )
        return deepcopy(FALLBACK_PRIORITY)
    return deepcopy(PRIORITY_MATRIX[impact_level][effort_level])


def priority_of(record: PriorityInput) -> PriorityResult:
    """Priority of anything carrying effort and impact, such as a challenge."""
    return compute_priority(record["effort"], record["impact"])
