from pathlib import Path

import pytest
from typer.testing import CliRunner
from yaml import safe_load

from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.repository.portfolio import PORTFOLIO_REPO
from cadence.terminal.app import app

PORTFOLIO_YAML = """\
challenges:
  - id: c1
    code: CH01
    title: Reduce onboarding time
    department: Operations
    status: in_progress
    effort: low
    impact: high
    start_date: 2024-01-10
    target_date: 2024-01-20
    activities:
      - description: map the current process
        weight: 3
        is_completed: true
      - description: pilot
        weight: 2
        is_completed: false
  - id: c2
    code: CH02
    title: Old initiative
    department: Operations
    status: closed
    effort: high
    impact: low
    start_date: 2023-01-01
    target_date: 2023-02-01
    archived: true
manual_tasks:
  - id: m1
    sequence: 1
    title: Kickoff
    start: 2024-01-05
    end: 2024-01-08
    status: closed
    actual_percent: 100
  - id: m2
    sequence: 2
    title: Steering committee
    start: 2024-02-01
    end: 2024-02-03
    status: new
"""

runner = CliRunner()


@pytest.fixture
def portfolio(app_paths: Path) -> Path:
    path = app_paths / "portfolio.yaml"
    path.write_text(PORTFOLIO_YAML)
    return path


def invoke(*args: str):
    return runner.invoke(app, ["--no-header", *args], env={"COLUMNS": "200"})


def test_challenge_list_skips_archived(portfolio: Path) -> None:
    result = invoke("challenge", "list", "--today", "2024-01-15")
    assert result.exit_code == 0, result.output
    assert "CH01" in result.output
    assert "CH02" not in result.output
    assert "60%" in result.output


def test_challenge_list_filters_by_performance(portfolio: Path) -> None:
    result = invoke("ch", "ls", "--performance", "behind", "--today", "2024-01-15")
    assert result.exit_code == 0, result.output
    assert "CH01" not in result.output


def test_challenge_list_rejects_unknown_performance(portfolio: Path) -> None:
    result = invoke("challenge", "list", "--performance", "sideways")
    assert result.exit_code != 0


def test_priority_lookup(app_paths: Path) -> None:
    result = invoke("challenge", "priority", "low", "medium")
    assert result.exit_code == 0, result.output
    assert "quick_wins" in result.output


def test_challenge_add(portfolio: Path) -> None:
    result = invoke(
        "challenge",
        "add",
        "Shorten release cycle",
        "--department",
        "Technology",
        "--start",
        "2024-02-01",
        "--target",
        "2024-04-01",
        "--effort",
        "high",
        "--impact",
        "high",
    )
    assert result.exit_code == 0, result.output

    added = PORTFOLIO_REPO.get_challenges()[-1]
    assert added["code"] == "CH03"
    assert added["priority_category"] == "major_projects"
    assert PORTFOLIO_REPO.is_dirty


def test_task_add(portfolio: Path) -> None:
    result = invoke(
        "task", "add", "Retrospective", "--start", "2024-02-05", "--end", "2024-02-06"
    )
    assert result.exit_code == 0, result.output

    tasks = PORTFOLIO_REPO.get_manual_tasks()
    assert [task["title"] for task in tasks][-1] == "Retrospective"
    assert tasks[-1]["sequence"] == 3


def test_task_add_rejects_end_before_start(portfolio: Path) -> None:
    result = invoke(
        "t", "a", "Backwards", "--start", "2024-02-06", "--end", "2024-02-05"
    )
    assert result.exit_code == 2
    assert len(PORTFOLIO_REPO.get_manual_tasks()) == 2


def test_task_add_rejects_unparseable_date(portfolio: Path) -> None:
    result = invoke("task", "add", "Someday", "--start", "soon", "--end", "t")
    assert result.exit_code == 2


def test_timeline_show(portfolio: Path) -> None:
    result = invoke("timeline", "show", "--today", "2024-01-15")
    assert result.exit_code == 0, result.output
    assert "January 2024" in result.output
    assert "Kickoff" in result.output
    assert "Reduce onboarding time" in result.output
    assert "Old initiative" not in result.output


def test_timeline_export(portfolio: Path, tmp_path: Path) -> None:
    out = tmp_path / "export" / "timeline.yaml"
    result = invoke("tl", "export", str(out), "--today", "2024-01-15", "--zoom", "14")
    assert result.exit_code == 0, result.output

    exported = safe_load(out.read_text())
    assert exported["grid"]["span"] == {
        "start": "2024-01-04",
        "end": "2024-02-04",
        "total_days": 32,
    }
    assert exported["grid"]["day_width"] == 14
    assert [band["label"] for band in exported["grid"]["month_bands"]] == [
        "January 2024",
        "February 2024",
    ]
    assert [row["task"]["id"] for row in exported["placed"]] == ["m1", "c1", "m2"]
    assert exported["placed"][1]["task"]["source"] == "linked"
    assert exported["placed"][1]["planned_marker_percent"] == 50
    assert exported["unplaceable"] == []


def test_zoom_in_and_out_update_configuration(app_paths: Path) -> None:
    assert invoke("timeline", "zoom-in").exit_code == 0
    assert CONFIGURATION_REPO.get_config()["default_zoom"] == 22
    assert invoke("timeline", "zi").exit_code == 0
    assert CONFIGURATION_REPO.get_config()["default_zoom"] == 22
    assert invoke("timeline", "zoom-out").exit_code == 0
    assert invoke("timeline", "zo").exit_code == 0
    assert CONFIGURATION_REPO.get_config()["default_zoom"] == 14


def test_dashboard(portfolio: Path) -> None:
    result = invoke("dashboard", "--today", "2024-01-15")
    assert result.exit_code == 0, result.output
    assert "Key figures" in result.output
    assert "Timeline adherence" in result.output
    assert "Operations" in result.output


def test_config_set(app_paths: Path) -> None:
    result = invoke("config", "set", "--default-zoom", "22", "--log-level", "info")
    assert result.exit_code == 0, result.output
    config = CONFIGURATION_REPO.get_config()
    assert config["default_zoom"] == 22
    assert config["log_level"] == "INFO"


def test_config_set_rejects_unknown_log_level(app_paths: Path) -> None:
    result = invoke("config", "set", "--log-level", "loud")
    assert result.exit_code == 2
