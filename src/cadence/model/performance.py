# SPDX-License-Identifier: MIT

from enum import StrEnum


class PerformanceStatus(StrEnum):
    BEHIND = "behind"
    ON_TRACK = "on_track"
    AHEAD = "ahead"
