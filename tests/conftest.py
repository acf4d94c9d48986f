from pathlib import Path
from typing import Any, Callable, Iterator, Optional

import pendulum
import pytest

from cadence import configuration
from cadence.initialize import initialize
from cadence.model.activity import Activity
from cadence.model.challenge import Challenge
from cadence.model.priority import Level
from cadence.model.timeline_task import TaskSource, TaskStatus, TimelineTask
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.repository.portfolio import PORTFOLIO_REPO
from cadence.time import utc_day


@pytest.fixture
def today() -> pendulum.DateTime:
    return utc_day(2024, 1, 15)


@pytest.fixture
def make_task() -> Callable[..., TimelineTask]:
    """Factory for timeline rows with sensible defaults."""

    def _make_task(
        id: str,
        start: Any,
        end: Any,
        actual_percent: float = 0,
        planned_percent_today: Optional[float] = None,
        status: TaskStatus = TaskStatus.IN_PROGRESS,
        source: TaskSource = TaskSource.MANUAL,
        sequence: int = 0,
    ) -> TimelineTask:
        return {
            "id": id,
            "sequence": sequence,
            "title": f"Task {id}",
            "start": start,
            "end": end,
            "actual_percent": actual_percent,
            "planned_percent_today": planned_percent_today,
            "status": status,
            "source": source,
        }

    return _make_task


def activities(*weights_done: tuple[int, bool]) -> list[Activity]:
    return [
        {"description": f"step {i}", "weight": weight, "is_completed": done}
        for i, (weight, done) in enumerate(weights_done)
    ]


@pytest.fixture
def challenges() -> list[Challenge]:
    """
    Four challenges as of 2024-01-15:

    CH01 60% actual / 50% planned (on track), CH02 20% / 100% (behind, overdue),
    CH03 100% / 100% (on track, closed), CH04 100% / 10% (ahead).
    """
    return [
        {
            "id": "c1",
            "code": "CH01",
            "title": "Reduce onboarding time",
            "department": "Operations",
            "status": TaskStatus.IN_PROGRESS,
            "effort": Level.LOW,
            "impact": Level.HIGH,
            "activities": activities((3, True), (2, False)),
            "start_date": utc_day(2024, 1, 10),
            "target_date": utc_day(2024, 1, 20),
            "created": utc_day(2024, 1, 2),
            "archived": False,
        },
        {
            "id": "c2",
            "code": "CH02",
            "title": "Consolidate vendors",
            "department": "Operations",
            "status": TaskStatus.NEW,
            "effort": Level.MEDIUM,
            "impact": Level.MEDIUM,
            "activities": activities((1, True), (4, False)),
            "start_date": utc_day(2024, 1, 1),
            "target_date": utc_day(2024, 1, 11),
            "created": utc_day(2024, 1, 1),
            "archived": False,
        },
        {
            "id": "c3",
            "code": "CH03",
            "title": "Retire legacy reporting",
            "department": "Technology",
            "status": TaskStatus.CLOSED,
            "effort": Level.HIGH,
            "impact": Level.LOW,
            "activities": activities((2, True), (2, True)),
            "start_date": utc_day(2024, 1, 1),
            "target_date": utc_day(2024, 1, 5),
            "created": utc_day(2024, 1, 1),
            "archived": False,
        },
        {
            "id": "c4",
            "code": "CH04",
            "title": "Automate access reviews",
            "department": "Technology",
            "status": TaskStatus.UNDER_REVIEW,
            "effort": Level.LOW,
            "impact": Level.MEDIUM,
            "activities": activities((5, True)),
            "start_date": utc_day(2024, 1, 14),
            "target_date": utc_day(2024, 1, 24),
            "created": utc_day(2024, 1, 3),
            "archived": False,
        },
    ]


@pytest.fixture
def app_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration and data files at a temporary directory."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(
        configuration, "DATA_PORTFOLIO_PATH", data_dir / "portfolio.yaml"
    )
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(PORTFOLIO_REPO, "_portfolio", None)
    monkeypatch.setattr(PORTFOLIO_REPO, "is_dirty", False)

    initialize()
    yield data_dir
