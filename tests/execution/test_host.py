# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the execution host.

Every test runs real subprocesses with the interpreter that runs pytest,
so they work anywhere the suite itself runs.
"""

import sys
from pathlib import Path

import pytest

from pybm.execution.exceptions import RuntimeNotFoundError
from pybm.execution.host import first_available, run_script, runtime_version

_MISSING = "pybm-no-such-interpreter"


def _script(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "script.py"
    path.write_text(body, encoding="utf-8")
    return path


class TestRuntimeVersion:
    def test_reports_current_interpreter(self) -> None:
        expected = ".".join(str(part) for part in sys.version_info[:3])
        assert runtime_version(sys.executable) == expected

    def test_result_is_cached(self) -> None:
        assert runtime_version(sys.executable) is runtime_version(sys.executable)

    def test_missing_runtime_raises(self) -> None:
        with pytest.raises(RuntimeNotFoundError):
            runtime_version(_MISSING)


class TestFirstAvailable:
    def test_skips_missing_runtimes(self) -> None:
        assert first_available([_MISSING, sys.executable]) == sys.executable

    def test_none_when_nothing_answers(self) -> None:
        assert first_available([_MISSING]) is None


class TestRunScript:
    def test_streams_lines_to_sink(self, tmp_path: Path) -> None:
        script = _script(tmp_path, "print('one')\nprint('two μs')\n")
        seen: list[str] = []

        result = run_script(sys.executable, script, seen.append)

        assert seen == ["one", "two μs"]
        assert result.success
        assert result.lines == 2
        assert result.runtime == sys.executable

    def test_non_zero_exit(self, tmp_path: Path) -> None:
        script = _script(tmp_path, "print('partial')\nraise SystemExit(3)\n")
        seen: list[str] = []

        result = run_script(sys.executable, script, seen.append)

        assert seen == ["partial"]
        assert result.exit_code == 3
        assert not result.success
        assert not result.timed_out

    def test_timeout_kills_the_script(self, tmp_path: Path) -> None:
        script = _script(
            tmp_path,
            "import time\nprint('started', flush=True)\ntime.sleep(30)\nprint('never')\n",
        )
        seen: list[str] = []

        result = run_script(sys.executable, script, seen.append, timeout_seconds=1.0)

        assert seen == ["started"]
        assert result.timed_out
        assert not result.success
        assert result.elapsed_seconds < 30

    def test_missing_runtime_raises(self, tmp_path: Path) -> None:
        script = _script(tmp_path, "print('x')\n")
        with pytest.raises(RuntimeNotFoundError):
            run_script(_MISSING, script, lambda line: None)
