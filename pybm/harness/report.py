# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Result line formatting.

Generated scripts print their own result lines with the helpers embedded
from pybm.harness.runtime. These wrappers expose the same formatting to
in-process callers and tests.
"""

from typing import Union

from pybm.harness.runtime import _pybm_format, _pybm_unit
from pybm.harness.stats import Stats


def format_duration(micros: float) -> str:
    """Scale a microsecond count to μs, ms or s."""
    return _pybm_unit(micros)


def format_result(
    name: str,
    result: Union[Stats, BaseException],
    markdown: bool = False,
) -> str:
    """
    One report line: statistics on success, the error on the next line on failure.

    In markdown mode both become a `| name | result |` table row without colours.
    """
    if isinstance(result, Stats):
        return _pybm_format(name, result.as_dict(), markdown)
    return _pybm_format(name, result, markdown)
