# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from cadence.color import PERFORMANCE_COLORS, PRIORITY_CATEGORY_COLORS
from cadence.model.challenge import Challenge
from cadence.model.dashboard import DepartmentAdherence, Kpis
from cadence.model.performance import PerformanceStatus
from cadence.model.priority import PriorityCategory
from cadence.view.views.header import header


def dashboard_view(
    today_label: str,
    kpis: Kpis,
    adherence: list[DepartmentAdherence],
    priority_groups: dict[PriorityCategory, list[Challenge]],
) -> None:
    """Summary cards, timeline adherence per department and priority buckets."""
    header("dashboard", today_label)
    console = Console()

    kpi_table = Table(box=box.SIMPLE, title="Key figures")
    kpi_table.add_column("figure")
    kpi_table.add_column("value", justify="right")
    kpi_table.add_row("challenges", str(kpis["total"]))
    kpi_table.add_row("overdue", str(kpis["overdue"]))
    kpi_table.add_row("average progress", f"{kpis['avg_actual_progress']:.1f}%")
    distribution = kpis["performance_distribution"]
    for status, count in (
        (PerformanceStatus.AHEAD, distribution["ahead"]),
        (PerformanceStatus.ON_TRACK, distribution["on_track"]),
        (PerformanceStatus.BEHIND, distribution["behind"]),
    ):
        color = PERFORMANCE_COLORS[status]
        kpi_table.add_row(f"[{color}]{status}[/{color}]", str(count))
    console.print(kpi_table)

    adherence_table = Table(box=box.SIMPLE, title="Timeline adherence")
    adherence_table.add_column("department")
    adherence_table.add_column("challenges", justify="right")
    adherence_table.add_column("actual", justify="right")
    adherence_table.add_column("planned", justify="right")
    for department in adherence:
        actual_color = (
            "red" if department["avg_actual"] < department["avg_planned"] else "green"
        )
        adherence_table.add_row(
            department["name"],
            str(department["count"]),
            f"[{actual_color}]{department['avg_actual']}%[/{actual_color}]",
            f"{department['avg_planned']}%",
        )
    if adherence:
        console.print(adherence_table)

    priority_table = Table(box=box.SIMPLE, title="Priority")
    priority_table.add_column("category")
    priority_table.add_column("challenges")
    for category, challenges in priority_groups.items():
        color = PRIORITY_CATEGORY_COLORS[category]
        priority_table.add_row(
            f"[{color}]{category}[/{color}]",
            ", ".join(challenge["code"] or challenge["title"] for challenge in challenges),
        )
    console.print(priority_table)
