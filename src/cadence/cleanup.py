# SPDX-License-Identifier: MIT

import atexit

from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.repository.portfolio import PORTFOLIO_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    PORTFOLIO_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
