# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from enum import StrEnum
from typing import Any, Optional, TypedDict, TypeVar, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from cadence import configuration, time
from cadence.model.challenge import Challenge
from cadence.model.entity_id import EntityId
from cadence.model.priority import LegacyPriority, Level, PriorityCategory
from cadence.model.timeline_task import TaskSource, TaskStatus, TimelineTask

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)


class Portfolio(TypedDict):
    challenges: list[Challenge]
    manual_tasks: list[TimelineTask]


def get_portfolio_template() -> dict[str, Any]:
    return {"challenges": [], "manual_tasks": []}


def _to_number(value: Any, default: Optional[float]) -> Optional[float]:
    """Numeric value of a YAML scalar, or the default for blanks and junk."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug("ignoring non-numeric value %r", value)
        return default


def _to_enum(enum_type: type[E], value: Any, default: Optional[E]) -> Optional[E]:
    if value is None:
        return default
    try:
        return enum_type(value)
    except ValueError:
        logger.debug("unknown %s %r, using %s", enum_type.__name__, value, default)
        return default


def _to_level(value: Any) -> Level | str:
    """Known levels become Level; anything else is kept as written."""
    if value is None:
        return Level.MEDIUM
    level = _to_enum(Level, value, None)
    # priority lookup falls back for off-scale values
    return level if level is not None else str(value)


class PortfolioRepository:
    def __init__(self) -> None:
        self._portfolio: Optional[Portfolio] = None
        self.is_dirty = False

    @property
    def portfolio(self) -> Portfolio:
        if self._portfolio is None:
            self.__load_data()
        if self._portfolio is None:
            raise ValueError()
        return self._portfolio

    def __load_data(self) -> None:
        raw = load(configuration.DATA_PORTFOLIO_PATH.read_text(), Loader=Loader)
        if raw is None:
            raw = get_portfolio_template()
        if not isinstance(raw, dict):
            raise ValueError(
                f"portfolio file is not a mapping: {configuration.DATA_PORTFOLIO_PATH}"
            )

        self._portfolio = {
            "challenges": [
                self.__convert_challenge_for_deserialization(challenge)
                for challenge in raw.get("challenges") or []
            ],
            "manual_tasks": [
                self.__convert_task_for_deserialization(task)
                for task in raw.get("manual_tasks") or []
            ],
        }

    def __save_data(self, portfolio: Portfolio) -> None:
        serializable_portfolio = {
            "challenges": [
                self.__convert_challenge_for_serialization(deepcopy(challenge))
                for challenge in portfolio["challenges"]
            ],
            "manual_tasks": [
                self.__convert_task_for_serialization(deepcopy(task))
                for task in portfolio["manual_tasks"]
            ],
        }
        configuration.DATA_PORTFOLIO_PATH.write_text(
            dump(serializable_portfolio, Dumper=Dumper, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._portfolio is not None and self.is_dirty:
            self.__save_data(self._portfolio)
            self.is_dirty = False
            return True
        return False

    def __convert_challenge_for_serialization(
        self, challenge: Challenge
    ) -> dict[str, Any]:
        serializable_challenge = cast(dict[str, Any], challenge)
        for key in ("start_date", "target_date", "created"):
            serializable_challenge[key] = time.datetime_to_iso_str_optional(
                serializable_challenge.get(key)
            )
        for key in (
            "status",
            "effort",
            "impact",
            "priority_category",
            "priority",
        ):
            if serializable_challenge.get(key) is not None:
                serializable_challenge[key] = str(serializable_challenge[key])
        return serializable_challenge

    def __convert_challenge_for_deserialization(
        self, challenge: dict[str, Any]
    ) -> Challenge:
        if "id" not in challenge:
            raise ValueError(f"challenge without id: {challenge!r}")
        challenge = deepcopy(challenge)
        for key in ("start_date", "target_date", "created"):
            challenge[key] = time.parse_day(challenge.get(key))
        challenge["status"] = _to_enum(
            TaskStatus, challenge.get("status"), TaskStatus.NEW
        )
        challenge["effort"] = _to_level(challenge.get("effort"))
        challenge["impact"] = _to_level(challenge.get("impact"))
        for key in ("code", "title", "department"):
            challenge[key] = str(challenge.get(key) or "")
        challenge["archived"] = bool(challenge.get("archived", False))
        challenge["activities"] = [
            {
                "description": activity.get("description", ""),
                "weight": _to_number(activity.get("weight"), 0),
                "is_completed": bool(activity.get("is_completed", False)),
            }
            for activity in challenge.get("activities") or []
        ]
        challenge["priority_category"] = _to_enum(
            PriorityCategory, challenge.get("priority_category"), None
        )
        challenge["priority"] = _to_enum(LegacyPriority, challenge.get("priority"), None)
        return cast(Challenge, challenge)

    def __convert_task_for_serialization(self, task: TimelineTask) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        for key in ("start", "end"):
            day = time.parse_day(serializable_task.get(key))
            # Unparseable values are written back untouched
            if day is not None:
                serializable_task[key] = time.datetime_to_date_str(day)
        serializable_task["status"] = str(serializable_task["status"])
        serializable_task["source"] = str(serializable_task["source"])
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> TimelineTask:
        if "id" not in task:
            raise ValueError(f"manual task without id: {task!r}")
        task = deepcopy(task)
        # Dates are kept as written; the layout step decides what it can draw
        task.setdefault("start", None)
        task.setdefault("end", None)
        task.setdefault("title", "")
        task["sequence"] = int(_to_number(task.get("sequence"), 0) or 0)
        task["actual_percent"] = _to_number(task.get("actual_percent"), 0)
        task["planned_percent_today"] = _to_number(
            task.get("planned_percent_today"), None
        )
        task["status"] = _to_enum(TaskStatus, task.get("status"), TaskStatus.NEW)
        task["source"] = TaskSource.MANUAL
        return cast(TimelineTask, task)

    def get_challenges(self) -> list[Challenge]:
        return deepcopy(self.portfolio["challenges"])

    def get_challenge(self, id: EntityId) -> Challenge:
        for challenge in self.portfolio["challenges"]:
            if challenge["id"] == id:
                return deepcopy(challenge)
        raise ValueError(f"No challenge found with id: {id}")

    def save_new_challenge(self, challenge: Challenge) -> EntityId:
        self.is_dirty = True
        self.portfolio["challenges"].append(deepcopy(challenge))
        return challenge["id"]

    def get_manual_tasks(self) -> list[TimelineTask]:
        tasks = deepcopy(self.portfolio["manual_tasks"])
        tasks.sort(key=lambda task: task["sequence"])
        return tasks

    def save_new_manual_task(self, task: TimelineTask) -> EntityId:
        self.is_dirty = True
        self.portfolio["manual_tasks"].append(deepcopy(task))
        return task["id"]


PORTFOLIO_REPO = PortfolioRepository()
