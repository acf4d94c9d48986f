# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from cadence import configuration
from cadence.log import configure_logging
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.repository.portfolio import get_portfolio_template
from cadence.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    configure_logging(config["log_level"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_PORTFOLIO_PATH.is_file():
        configuration.DATA_PORTFOLIO_PATH.touch()
        configuration.DATA_PORTFOLIO_PATH.write_text(
            dump(get_portfolio_template(), Dumper=Dumper)
        )
