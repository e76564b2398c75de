# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Configuration errors.

Both kinds carry the offending file when there is one, so the CLI can log
it next to the message. Options given on the command line have no file.
"""

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Base for every configuration failure. The CLI maps it to CONFIG_ERROR."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigLoadError(ConfigError):
    """The file is missing, unreadable, or not a YAML mapping."""


class ConfigValidationError(ConfigError):
    """
    The values don't fit the schema: a missing `config_version`, an unknown
    key, a zero sample count, a negative timeout.
    """
