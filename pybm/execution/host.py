# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Execution host: runs generated scripts with a Python interpreter.

This is the only place pybm starts processes. It does two things:

  - ask an interpreter for its version (`<runtime> --version`)
  - run a generated script (`<runtime> <script>`) and stream every line it
    prints to a sink while it runs

No shell=True, no eval(). The script is trusted exactly as much as the
document it came from. Runs are sequential: the caller waits for one
script to exit before starting the next.
"""

import os
import re
import subprocess
import threading
import time
from pathlib import Path
from typing import Callable, Iterable, Optional

from pybm.execution.exceptions import RuntimeNotFoundError
from pybm.execution.models import RunResult
from pybm.logging.logger import get_logger

logger = get_logger(__name__)

_SEMVER = re.compile(r"\d+\.\d+\.\d+")
_VERSION_TIMEOUT_SECONDS = 10

_version_cache: dict[str, str] = {}


def runtime_version(runtime: str) -> str:
    """
    Return the version an interpreter reports, e.g. "3.12.4".

    Falls back to the raw `--version` output when it has no X.Y.Z in it.
    Results are cached per runtime name for the lifetime of the process.

    Raises:
        RuntimeNotFoundError: If the executable is missing, hangs, or exits non-zero.
    """
    if runtime in _version_cache:
        return _version_cache[runtime]

    try:
        result = subprocess.run(
            [runtime, "--version"],
            capture_output=True,
            text=True,
            timeout=_VERSION_TIMEOUT_SECONDS,
        )
    except FileNotFoundError as err:
        raise RuntimeNotFoundError(f"{runtime} not found") from err
    except subprocess.TimeoutExpired as err:
        raise RuntimeNotFoundError(f"{runtime} --version timed out") from err

    if result.returncode != 0:
        raise RuntimeNotFoundError(
            f"{runtime} --version exited with code {result.returncode}"
        )

    # Older interpreters print the version on stderr.
    output = (result.stdout + result.stderr).strip()
    found = _SEMVER.search(output)
    version = found.group(0) if found else output

    _version_cache[runtime] = version
    return version


def first_available(runtimes: Iterable[str]) -> Optional[str]:
    """The first runtime in `runtimes` that answers `--version`, or None."""
    for runtime in runtimes:
        try:
            runtime_version(runtime)
        except RuntimeNotFoundError:
            logger.debug("Runtime not available", extra={"runtime": runtime})
            continue
        return runtime
    return None


def _build_script_env() -> dict[str, str]:
    """
    Environment for generated scripts.

    We inherit the parent environment and only pin the output encoding, so
    the μ in result lines survives a pipe on every platform.
    """
    env = dict(os.environ)
    env["PYTHONIOENCODING"] = "utf-8"
    return env


def run_script(
    runtime: str,
    script: Path,
    sink: Callable[[str], None],
    timeout_seconds: Optional[float] = None,
) -> RunResult:
    """
    Run a generated script and stream its output.

    Every stdout line is handed to `sink` (without its newline) as soon as
    the script prints it. stderr is inherited. When `timeout_seconds` is
    set and the script is still running after that long, it is killed and
    the result is marked as timed out.

    If the caller is interrupted (KeyboardInterrupt) the script is killed
    before the exception propagates.

    Raises:
        RuntimeNotFoundError: If the interpreter executable does not exist.
    """
    start = time.monotonic()

    try:
        proc = subprocess.Popen(
            [runtime, str(script)],
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            env=_build_script_env(),
        )
    except FileNotFoundError as err:
        raise RuntimeNotFoundError(f"{runtime} not found") from err

    expired = threading.Event()

    def _expire() -> None:
        expired.set()
        proc.kill()

    timer = None
    if timeout_seconds is not None:
        timer = threading.Timer(timeout_seconds, _expire)
        timer.daemon = True
        timer.start()

    lines = 0
    try:
        for line in proc.stdout:
            sink(line.rstrip("\r\n"))
            lines += 1
        exit_code = proc.wait()
    except BaseException:
        proc.kill()
        proc.wait()
        raise
    finally:
        if timer is not None:
            timer.cancel()
        if proc.stdout is not None:
            proc.stdout.close()

    elapsed = time.monotonic() - start

    if expired.is_set():
        logger.warning(
            "Generated script timed out",
            extra={
                "runtime": runtime,
                "script": str(script),
                "timeout_seconds": timeout_seconds,
            },
        )
    else:
        logger.debug(
            "Generated script finished",
            extra={
                "runtime": runtime,
                "script": str(script),
                "exit_code": exit_code,
                "elapsed_seconds": round(elapsed, 3),
            },
        )

    return RunResult(
        runtime=runtime,
        exit_code=exit_code,
        elapsed_seconds=elapsed,
        lines=lines,
        timed_out=expired.is_set(),
    )
