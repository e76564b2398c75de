# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Data models for the execution host."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunResult:
    """
    What came back from running one generated script with one interpreter.

    Report lines are not stored here: they were streamed to the sink while
    the script ran. `lines` only counts them. The script's stderr is passed
    straight through to ours, so tracebacks reach the user unchanged.
    """

    runtime: str
    exit_code: int
    elapsed_seconds: float
    lines: int = 0
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.exit_code == 0 and not self.timed_out
