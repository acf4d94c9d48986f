# SPDX-License-Identifier: MIT

from typing import TypedDict


class PerformanceDistribution(TypedDict):
    on_track: int
    behind: int
    ahead: int


class Kpis(TypedDict):
    total: int
    overdue: int
    avg_actual_progress: float
    performance_distribution: PerformanceDistribution


class DepartmentAdherence(TypedDict):
    name: str
    avg_actual: int
    avg_planned: int
    count: int
