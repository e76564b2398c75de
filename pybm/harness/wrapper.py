# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark script generator.

Turns parsed document items into one self-contained Python script:

    heading:   provenance and the samples/iterations configuration
    futures:   `from __future__` imports lifted out of the document's content
    helpers:   the runtime library (statistics, colors, units, logging)
    items:     Content verbatim, each Snippet wrapped by `wrap`

Every snippet block is its own try/except. If the body raises during any
trial, the remaining trials of that snippet are skipped and the error is
reported in place of statistics; the blocks after it still run. That holds
for SystemExit too. Only KeyboardInterrupt ends the script.
"""

import re
import textwrap
from importlib.resources import files
from typing import Iterable, Optional

from pybm import __version__
from pybm.document.models import Content, Item, Snippet

# The snippet body sits inside try -> for -> while.
_BODY_INDENT = " " * 12

_FUTURE_IMPORT = re.compile(r"^from __future__ import [^\n]*\n?", re.MULTILINE)

_SNIPPET_TEMPLATE = """\
try:
    _pybm_results = [0.0] * {samples}
    for _pybm_sample in range({samples}):
        _pybm_iteration = {iterations}
        _pybm_start = _pybm_clock()
        while _pybm_iteration:
            _pybm_iteration -= 1
{body}
        _pybm_results[_pybm_sample] = (_pybm_clock() - _pybm_start) * 1000
    _pybm_log({name}, _pybm_reduce(_pybm_results))
except KeyboardInterrupt:
    raise
except BaseException as _pybm_error:
    _pybm_log({name}, _pybm_error)
"""


def _check_counts(samples: int, iterations: int) -> None:
    if samples < 1:
        raise ValueError(f"samples must be >= 1, got {samples}")
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")


def wrap(snippet: Snippet, samples: int, iterations: int) -> str:
    """
    Wrap one snippet into a timed block.

    The block records `samples` trials. Each trial runs the snippet body
    `iterations` times between two perf_counter stamps and stores the
    elapsed time in milliseconds. The name is emitted as a string literal,
    so any name is safe to use.

    Raises:
        ValueError: If samples or iterations is below 1.
    """
    _check_counts(samples, iterations)

    code = snippet.code if snippet.code.strip() else "pass"

    return _SNIPPET_TEMPLATE.format(
        samples=samples,
        iterations=iterations,
        body=textwrap.indent(code, _BODY_INDENT),
        name=repr(snippet.name),
    )


def heading(
    iterations: int,
    samples: int,
    source: Optional[str] = None,
    digest: Optional[str] = None,
) -> str:
    """Comment banner that opens every generated script."""
    lines = [
        f"# auto-generated using pybm {__version__}",
        "#",
        f"# samples: {samples}",
        f"# iterations: {iterations}",
    ]
    if source is not None:
        lines.append(f"# source: {source}")
    if digest is not None:
        lines.append(f"# sha256: {digest}")
    return "\n".join(lines) + "\n"


def helpers() -> str:
    """Source of the runtime helper library, emitted once per script."""
    return (files(__package__) / "runtime.py").read_text(encoding="utf-8")


def _lift_future_imports(items: Iterable[Item]) -> tuple[list[str], list[Item]]:
    """
    Pull `from __future__` lines out of Content items.

    They must precede every other statement, and the helpers are emitted
    before the first Content item. Snippet code is left alone.
    """
    futures: list[str] = []
    remaining: list[Item] = []
    for item in items:
        if isinstance(item, Content) and _FUTURE_IMPORT.search(item.text):
            futures.extend(line.strip() for line in _FUTURE_IMPORT.findall(item.text))
            item = Content(_FUTURE_IMPORT.sub("", item.text))
        remaining.append(item)
    return futures, remaining


def build_script(
    items: Iterable[Item],
    samples: int,
    iterations: int,
    source: Optional[str] = None,
    digest: Optional[str] = None,
    markdown: bool = False,
) -> str:
    """
    Assemble the complete script for one document.

    Items keep their document order. Content goes in untouched, so prose
    has to be valid Python (comments, docstrings) and helper code runs
    where it stands, before the snippets that follow it. The one exception
    is `from __future__` imports, which move to the top of the script.

    With `markdown` the script reports a `| id | result |` table instead
    of coloured lines.

    Raises:
        ValueError: If samples or iterations is below 1.
    """
    _check_counts(samples, iterations)

    futures, items = _lift_future_imports(items)

    parts = [heading(iterations, samples, source=source, digest=digest)]
    if futures:
        parts.append("\n".join(futures))
    parts.append(helpers())
    if markdown:
        parts.append("_PYBM_MARKDOWN = True")

    for item in items:
        if isinstance(item, Content):
            parts.append(item.text)
        elif isinstance(item, Snippet):
            parts.append(wrap(item, samples, iterations))
        else:
            raise TypeError(f"Unknown item type: {type(item).__name__}")

    return "\n\n".join(part.rstrip("\n") for part in parts) + "\n"
