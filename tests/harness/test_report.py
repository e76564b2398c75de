# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for result line formatting."""

import pytest

from pybm.harness.report import format_duration, format_result
from pybm.harness.stats import Stats

BLUE = "\x1b[38;5;39;1m"
RED = "\x1b[38;5;204;1m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("micros", "expected"),
        [
            (0, "0μs"),
            (999, "999μs"),
            (1_000, "1.00ms"),
            (1_500, "1.50ms"),
            (999_999, "1000.00ms"),
            (1_000_000, "1.00s"),
            (2_345_678, "2.35s"),
        ],
    )
    def test_units(self, micros: int, expected: str) -> None:
        assert format_duration(micros) == expected


class TestFormatResult:
    def test_success_line(self) -> None:
        line = format_result("sort", Stats(mean=1500, std=20, outliers=3))
        assert line == f"{BLUE}sort{RESET} | {BOLD}1.50ms{RESET} (std. 20μs o. 3%)"

    def test_failure_line(self) -> None:
        line = format_result("div", ZeroDivisionError("division by zero"))
        assert line == f"{RED}div{RESET} |\nZeroDivisionError: division by zero"

    def test_failure_puts_error_on_next_line(self) -> None:
        first, second = format_result("x", KeyError("k")).split("\n")
        assert first.endswith("|")
        assert second.startswith("KeyError")


class TestMarkdownResult:
    def test_success_row(self) -> None:
        row = format_result("sort", Stats(mean=1500, std=20, outliers=3), markdown=True)
        assert row == "| sort | 1.50ms (std. 20μs o. 3%) |"

    def test_failure_row(self) -> None:
        row = format_result("div", ZeroDivisionError("division by zero"), markdown=True)
        assert row == "| div | ZeroDivisionError: division by zero |"

    def test_pipes_and_newlines_are_escaped(self) -> None:
        row = format_result("a|b", ValueError("line one\nline two"), markdown=True)
        assert row == "| a\\|b | ValueError: line one line two |"
