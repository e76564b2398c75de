# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for annotated documents.

Two layers live here:
  - tokens: what the grammar recognizes (a declaration or a content span)
  - items: what the parser hands to the script generator

Items are frozen dataclasses. The parser is the only place that builds
them; after that they only get read.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A `#@bench` marker. `name` is already trimmed and may be empty."""

    name: str
    line: int = 0


@dataclass(frozen=True)
class ContentToken:
    """A run of non-declaration lines, exactly as it appears in the document."""

    text: str
    line: int = 0


Token = Union[Declaration, ContentToken]


@dataclass(frozen=True)
class Content:
    """Prose or helper code that goes into the generated script verbatim."""

    text: str


@dataclass(frozen=True)
class Snippet:
    """A named fragment of code that becomes one timed benchmark."""

    name: str
    code: str = ""


Item = Union[Content, Snippet]
