# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the pybm CLI.

Each function here corresponds to one CLI subcommand and returns an exit
code. Diagnostics go through the structured logger (stderr); the report
itself (banners, result lines, code listings) is written to stdout.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pybm.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS, USER_ERROR, VALIDATION_ERROR
from pybm.config.exceptions import ConfigError
from pybm.config.loader import apply_overrides, load_config
from pybm.config.schema import BenchConfig, PybmConfig
from pybm.logging.logger import get_logger
from pybm.runtime.bootstrap import bootstrap


def _emit(line: str) -> None:
    """Write one report line to stdout."""
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def _load_and_bootstrap(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, Optional[PybmConfig], logging.Logger]:
    """
    The shared setup that every command needs: load config, run bootstrap.

    Returns a tuple of (exit_code, config, logger). If exit_code is not SUCCESS,
    the caller should return it immediately; setup already logged the failure.
    """
    logger = get_logger(f"pybm.cli.{command_name}", log_level=args.log_level or "INFO")

    config = None
    if args.config is not None:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "config_path": str(err.path), "error": str(err)},
            )
            return CONFIG_ERROR, None, logger

    try:
        bootstrap(config.global_config if config is not None else None, args.log_level)
    except RuntimeError as err:
        logger.error("Environment check failed", extra={"error": str(err)})
        return RUNTIME_ERROR, config, logger

    if config is None:
        logger.debug(
            "No config provided, running with defaults",
            extra={"command": command_name},
        )

    return SUCCESS, config, logger


def _bench_options(
    args: argparse.Namespace,
    config: Optional[PybmConfig],
) -> BenchConfig:
    """Configured benchmark options with command-line flags laid on top."""
    base = config.bench if config is not None else BenchConfig()
    return apply_overrides(
        base,
        samples=getattr(args, "samples", None),
        iterations=getattr(args, "iterations", None),
        runtimes=getattr(args, "runtimes", None),
        keep=getattr(args, "keep", None),
        markdown=getattr(args, "markdown", None),
        timeout_seconds=getattr(args, "timeout_seconds", None),
    )


def _banner(path: str, runtime: str, version: str, bench: BenchConfig) -> list[str]:
    if bench.markdown:
        return [
            f"### *{path}*, {runtime}@{version}",
            f"iter:{bench.iterations} samples:{bench.samples}",
        ]
    return [f">{path} {runtime}@{version} iter:{bench.iterations} samples:{bench.samples}"]


def _select_runtimes(
    explicit: Optional[list[str]],
    bench: BenchConfig,
    logger: logging.Logger,
) -> Optional[list[str]]:
    """
    Decide which interpreters run the benchmarks.

    Runtimes named on the command line must all be available. Otherwise the
    first available runtime from the configured list is used. Returns None
    when nothing usable was found (already logged).
    """
    from pybm.execution.exceptions import RuntimeNotFoundError
    from pybm.execution.host import first_available, runtime_version

    if explicit:
        for runtime in explicit:
            try:
                runtime_version(runtime)
            except RuntimeNotFoundError as err:
                logger.error("Runtime not found", extra={"runtime": runtime, "error": str(err)})
                return None
        return list(explicit)

    runtime = first_available(bench.runtimes)
    if runtime is None:
        logger.error(
            "No runtime available",
            extra={"tried": bench.runtimes},
        )
        return None
    return [runtime]


def _read_and_parse(path: Path, logger: logging.Logger):
    """
    Read and parse one document.

    Returns (exit_code, text, items). A document that can't be read or
    doesn't parse is skipped by the caller; the other documents still run.
    """
    from pybm.document.exceptions import ParseError
    from pybm.document.parser import parse
    from pybm.utils.filesystem import safe_read

    try:
        text = safe_read(path)
    except OSError as err:
        logger.error("Cannot read document", extra={"path": str(path), "error": str(err)})
        return USER_ERROR, None, None

    try:
        items = parse(text)
    except ParseError as err:
        logger.error(
            "Document failed to parse",
            extra={"path": str(path), "error": str(err), "line": err.line},
        )
        return VALIDATION_ERROR, None, None

    return SUCCESS, text, items


def _print_listing(path: str, items, markdown: bool) -> None:
    from pybm.document.listing import format_listing
    from pybm.document.parser import snippets

    for snippet in snippets(items):
        _emit(format_listing(path, snippet, markdown=markdown))


def _benchmark_document(
    path: Path,
    bench: BenchConfig,
    runtimes: list[str],
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    """Generate the script for one document and run it once per runtime."""
    from pybm.execution.artifact import GeneratedScript, script_path_for
    from pybm.execution.exceptions import RuntimeNotFoundError
    from pybm.execution.host import run_script, runtime_version
    from pybm.harness.wrapper import build_script
    from pybm.utils.hashing import compute_sha256_text

    exit_code, text, items = _read_and_parse(path, logger)
    if exit_code != SUCCESS:
        return exit_code

    if args.print_code:
        _print_listing(str(path), items, bench.markdown)

    script_text = build_script(
        items,
        bench.samples,
        bench.iterations,
        source=str(path),
        digest=compute_sha256_text(text),
        markdown=bench.markdown,
    )
    script_path = script_path_for(path)

    if args.dry_run:
        logger.info(
            "Dry run, generated script not executed",
            extra={"path": str(path), "script": str(script_path), "runtimes": runtimes},
        )
        return SUCCESS

    status = SUCCESS
    with GeneratedScript(script_path, script_text, keep=bench.keep) as script:
        for runtime in runtimes:
            for line in _banner(str(path), runtime, runtime_version(runtime), bench):
                _emit(line)

            try:
                result = run_script(runtime, script, _emit, bench.timeout_seconds)
            except RuntimeNotFoundError as err:
                logger.error("Runtime failed to start", extra={"runtime": runtime, "error": str(err)})
                status = RUNTIME_ERROR
                continue

            if not result.success:
                logger.error(
                    "Generated script failed",
                    extra={
                        "path": str(path),
                        "runtime": runtime,
                        "exit_code": result.exit_code,
                        "timed_out": result.timed_out,
                    },
                )
                status = RUNTIME_ERROR

    return status


def handle_run(args: argparse.Namespace) -> int:
    """
    Benchmark every snippet of every document.

    Documents run one after another, and each document once per runtime.
    A document that fails to read or parse is logged and skipped.
    """
    exit_code, config, logger = _load_and_bootstrap(args, "run")
    if exit_code != SUCCESS:
        return exit_code

    try:
        bench = _bench_options(args, config)
    except ConfigError as err:
        logger.error("Invalid benchmark options", extra={"error": str(err)})
        return CONFIG_ERROR

    try:
        runtimes = _select_runtimes(args.runtimes, bench, logger)
        if runtimes is None:
            return RUNTIME_ERROR

        logger.debug(
            "Starting benchmark run",
            extra={
                "documents": len(args.paths),
                "runtimes": runtimes,
                "samples": bench.samples,
                "iterations": bench.iterations,
                "dry_run": args.dry_run,
            },
        )

        status = SUCCESS
        for path in args.paths:
            status = max(status, _benchmark_document(Path(path), bench, runtimes, args, logger))
        return status

    except Exception as err:
        logger.error("Benchmark run failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_code(args: argparse.Namespace) -> int:
    """Print the code every snippet measures, without running anything."""
    exit_code, config, logger = _load_and_bootstrap(args, "code")
    if exit_code != SUCCESS:
        return exit_code

    markdown = args.markdown
    if markdown is None:
        markdown = config.bench.markdown if config is not None else False

    status = SUCCESS
    for path in args.paths:
        code, _, items = _read_and_parse(Path(path), logger)
        if code != SUCCESS:
            status = max(status, code)
            continue
        _print_listing(path, items, markdown)
    return status


def handle_info(args: argparse.Namespace) -> int:
    """Display environment information and which runtimes answer."""
    exit_code, config, logger = _load_and_bootstrap(args, "info")
    if exit_code != SUCCESS:
        return exit_code

    from pybm import __version__
    from pybm.execution.exceptions import RuntimeNotFoundError
    from pybm.execution.host import runtime_version
    from pybm.runtime.environment import get_system_info

    bench = config.bench if config is not None else BenchConfig()
    runtimes: dict[str, Optional[str]] = {}
    for runtime in bench.runtimes:
        try:
            runtimes[runtime] = runtime_version(runtime)
        except RuntimeNotFoundError:
            runtimes[runtime] = None

    system_info = get_system_info()
    logger.info(
        "System information",
        extra={
            "pybm_version": __version__,
            "python_version": system_info.python_version,
            "implementation": system_info.implementation,
            "platform": system_info.platform,
            "executable": system_info.executable,
            "runtimes": runtimes,
            "config": args.config,
        },
    )
    return SUCCESS
