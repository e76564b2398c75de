# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Exceptions raised while running generated scripts."""


class ExecutionError(Exception):
    """Base for all execution host errors."""


class RuntimeNotFoundError(ExecutionError):
    """The interpreter executable could not be found or did not report a version."""
