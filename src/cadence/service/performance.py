# SPDX-License-Identifier: MIT

from cadence.model.performance import PerformanceStatus

# Percentage points either side of planned progress still counted as on track.
BEHIND_TOLERANCE = 2
AHEAD_TOLERANCE = 10


def classify_performance(actual: float, planned: float) -> PerformanceStatus:
    if actual < planned - BEHIND_TOLERANCE:
        return PerformanceStatus.BEHIND
    if actual > planned + AHEAD_TOLERANCE:
        return PerformanceStatus.AHEAD
    return PerformanceStatus.ON_TRACK
