# SPDX-License-Identifier: MIT

from typing import TypedDict


class Activity(TypedDict):
    description: str
    weight: float
    is_completed: bool
