# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Environment checks for the interpreter running pybm.

The interpreters that execute generated scripts are a separate matter:
they only need to run a standard-library script and are probed by the
execution host. This module is about pybm's own process.
"""

import platform
import sys
from typing import NamedTuple, Optional

MINIMUM_PYTHON = (3, 11)


class SystemInfo(NamedTuple):
    """What `pybm info` and the bootstrap log about the host process."""

    python_version: str
    implementation: str
    platform: str
    executable: str


def check_minimum_python(version: Optional[tuple[int, ...]] = None) -> None:
    """
    Reject interpreters older than MINIMUM_PYTHON.

    `version` defaults to the running interpreter's.

    Raises:
        RuntimeError: If the version is too old.
    """
    if version is None:
        version = tuple(sys.version_info[:2])
    if tuple(version[:2]) < MINIMUM_PYTHON:
        wanted = ".".join(str(part) for part in MINIMUM_PYTHON)
        found = ".".join(str(part) for part in version)
        raise RuntimeError(f"pybm requires Python >= {wanted}, found {found}")


def get_system_info() -> SystemInfo:
    return SystemInfo(
        python_version=platform.python_version(),
        implementation=platform.python_implementation(),
        platform=platform.platform(terse=True),
        executable=sys.executable,
    )
