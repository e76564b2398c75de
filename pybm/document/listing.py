# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Measured-code listing.

Shows exactly what each snippet will time, framed by a header naming the
document and the snippet. Plain mode pads the header with dots to a fixed
width; markdown mode emits a fenced python block.
"""

from pybm.document.models import Snippet

LISTING_WIDTH = 32
_PATH_TAIL = 10


def _location(path: str, name: str) -> str:
    if len(path) > _PATH_TAIL:
        path = "..." + path[-_PATH_TAIL:]
    return f"{path}@{name}"


def listing_header(path: str, snippet: Snippet, markdown: bool = False) -> str:
    location = _location(path, snippet.name)
    if markdown:
        return f"*{location}*\n```python"
    return "." * (LISTING_WIDTH - len(location)) + location


def listing_footer(markdown: bool = False) -> str:
    return "```" if markdown else "." * LISTING_WIDTH


def format_listing(path: str, snippet: Snippet, markdown: bool = False) -> str:
    """Header, the snippet's code, footer. One block per snippet."""
    return "\n".join([
        listing_header(path, snippet, markdown),
        snippet.code,
        listing_footer(markdown),
    ])
