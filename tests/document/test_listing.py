# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for the measured-code listing."""

from pybm.document.listing import LISTING_WIDTH, format_listing, listing_footer, listing_header
from pybm.document.models import Snippet


class TestPlainListing:
    def test_header_is_padded_to_width(self) -> None:
        header = listing_header("b.py", Snippet("sort", "x"))
        assert header.endswith("b.py@sort")
        assert len(header) == LISTING_WIDTH
        assert set(header[: -len("b.py@sort")]) == {"."}

    def test_long_paths_keep_their_tail(self) -> None:
        header = listing_header("benchmarks/lists/bench.py", Snippet("s", "x"))
        assert header.endswith("...s/bench.py@s")

    def test_footer(self) -> None:
        assert listing_footer() == "." * LISTING_WIDTH

    def test_listing_contains_code(self) -> None:
        text = format_listing("b.py", Snippet("sort", "data.sort()"))
        assert text.splitlines()[1] == "data.sort()"


class TestMarkdownListing:
    def test_fenced_block(self) -> None:
        text = format_listing("b.py", Snippet("sort", "data.sort()"), markdown=True)
        assert text.splitlines() == ["*b.py@sort*", "```python", "data.sort()", "```"]
