# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for pybm.

This is the single root command; every operation is a subcommand of `pybm`.
The global options (--config, --log-level, --dry-run) are inherited by every
subcommand through argparse's parent parser mechanism.

Usage:
    pybm run bench.py
    pybm run bench.py other.py --samples 200 --iterations 10 --runtime pypy3
    pybm code bench.py --md
    pybm info
"""

import argparse
import sys

from pybm import __version__
from pybm.cli.commands import handle_code, handle_info, handle_run
from pybm.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    These options get inherited by every subcommand. We use a separate parent
    parser (with add_help=False) so that help text doesn't collide between the
    parent and the subcommand parsers.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (default: config file, else INFO).",
    )
    parent.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        dest="dry_run",
        help="Parse and generate, but do not run anything.",
    )
    return parent


def _add_document_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Annotated document(s) to benchmark.",
    )
    parser.add_argument(
        "--md",
        action="store_true",
        default=None,
        dest="markdown",
        help="Print banners, results and code listings as markdown.",
    )


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    """
    Register all subcommands with their handler functions.

    Each subcommand gets the global options from the parent parser and sets
    its handler function via set_defaults(func=...).
    """
    commands = [
        ("run", "Benchmark every snippet of the given documents.", handle_run),
        ("code", "Print the code each snippet measures.", handle_code),
        ("info", "Display environment information and available runtimes.", handle_info),
    ]

    for name, help_text, handler in commands:
        parser = subparsers.add_parser(name, parents=[parent], help=help_text)
        parser.set_defaults(func=handler)

    run_parser = subparsers.choices["run"]
    _add_document_arguments(run_parser)
    run_parser.add_argument(
        "-s",
        "--samples",
        type=int,
        default=None,
        help="Number of measured trials per snippet (default: 1000).",
    )
    run_parser.add_argument(
        "-i",
        "--iterations",
        type=int,
        default=None,
        help="Executions of the snippet inside one trial (default: 1).",
    )
    run_parser.add_argument(
        "--runtime",
        action="append",
        default=None,
        dest="runtimes",
        metavar="RUNTIME",
        help="Interpreter to run the benchmark with. Repeat for several.",
    )
    run_parser.add_argument(
        "--keep",
        action="store_true",
        default=None,
        help="Keep the generated script(s) next to the documents.",
    )
    run_parser.add_argument(
        "--code",
        action="store_true",
        default=False,
        dest="print_code",
        help="Print the measured code before running.",
    )
    run_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        dest="timeout_seconds",
        help="Kill a generated script after this many seconds.",
    )

    _add_document_arguments(subparsers.choices["code"])


def main() -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

    The flow is straightforward:
      1. Build the argument parser with global options and all subcommands
      2. Parse the command line
      3. Call the handler function for the chosen subcommand
      4. Exit with the handler's return code

    If no subcommand is given, we show help and exit with USER_ERROR.
    """
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="pybm",
        description="pybm: benchmark the named snippets of annotated Python documents.",
        parents=[parent],
    )
    root_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=__version__,
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)

    args = root_parser.parse_args()

    if not hasattr(args, "func") or args.func is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
