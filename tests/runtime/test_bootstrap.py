# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for the environment check and the bootstrap sequence."""

import logging
import sys

import pytest

from pybm.config.schema import GlobalConfig
from pybm.runtime import environment
from pybm.runtime.bootstrap import DEFAULT_LOG_LEVEL, bootstrap, resolve_log_level


@pytest.fixture(autouse=True)
def _restore_levels() -> None:
    yield  # type: ignore[misc]
    bootstrap(None)


class TestResolveLogLevel:
    def test_cli_flag_wins(self) -> None:
        config = GlobalConfig(config_version="1.0.0", log_level="ERROR")
        assert resolve_log_level("debug", config) == "DEBUG"

    def test_config_used_without_flag(self) -> None:
        config = GlobalConfig(config_version="1.0.0", log_level="WARNING")
        assert resolve_log_level(None, config) == "WARNING"

    def test_default(self) -> None:
        assert resolve_log_level(None, None) == DEFAULT_LOG_LEVEL


class TestBootstrap:
    def test_returns_effective_level(self) -> None:
        assert bootstrap(None, "WARNING") == "WARNING"

    def test_relevels_existing_loggers(self) -> None:
        from pybm.execution import host

        bootstrap(None, "DEBUG")
        assert host.logger.level == logging.DEBUG

        bootstrap(None, "ERROR")
        assert host.logger.level == logging.ERROR

    def test_old_python_is_rejected(self) -> None:
        with pytest.raises(RuntimeError, match="requires Python >= 3.11, found 3.8.10"):
            environment.check_minimum_python((3, 8, 10))

    def test_current_python_is_accepted(self) -> None:
        environment.check_minimum_python()
        environment.check_minimum_python((3, 11))


class TestSystemInfo:
    def test_fields_are_populated(self) -> None:
        info = environment.get_system_info()
        assert info.python_version.count(".") == 2
        assert info.implementation
        assert info.platform
        assert info.executable == sys.executable
