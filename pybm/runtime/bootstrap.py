# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for pybm.

This module handles the one-time setup that happens before any document is
read. The bootstrap sequence is:
  1. Validate the environment (Python version)
  2. Settle the log level: command line first, then config, then INFO
  3. Re-level the loggers that modules created at import time
  4. Log startup info, to the configured log file as well when there is one

Every command goes through this before doing anything else.
"""

from pathlib import Path
from typing import Optional

from pybm.config.schema import GlobalConfig
from pybm.logging.logger import get_logger, set_log_level
from pybm.runtime.environment import check_minimum_python, get_system_info

DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(cli_level: Optional[str], config: Optional[GlobalConfig]) -> str:
    """The log level to use: an explicit CLI flag wins over the config file."""
    if cli_level is not None:
        return cli_level.upper()
    if config is not None:
        return config.log_level
    return DEFAULT_LOG_LEVEL


def bootstrap(config: Optional[GlobalConfig], cli_level: Optional[str] = None) -> str:
    """
    Run the bootstrap sequence and return the effective log level.

    Raises:
        RuntimeError: If the interpreter is too old.
    """
    check_minimum_python()

    level = resolve_log_level(cli_level, config)
    set_log_level("pybm", level)

    log_file = None
    if config is not None and config.log_file is not None:
        log_file = Path(config.log_file)

    logger = get_logger("pybm.runtime", log_level=level, log_file=log_file)

    system_info = get_system_info()
    logger.debug(
        "pybm bootstrap complete",
        extra={
            "python_version": system_info.python_version,
            "implementation": system_info.implementation,
            "platform": system_info.platform,
            "log_level": level,
        },
    )
    return level
