# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Document parser: tokens in, ordered items out.

The fold keeps one ordered list that becomes the result, plus a reference
to the snippet that is currently collecting code:

  - a named declaration opens a new snippet, which becomes active
  - an empty declaration appends an empty Content item and leaves no
    snippet active, so the previous snippet is closed but kept
  - content is appended to the active snippet's code if there is one,
    otherwise it becomes a new Content item

Content is stripped of surrounding whitespace in both cases. The parser
is a pure function: same text in, same items out.
"""

from dataclasses import dataclass, field
from typing import Iterable

from pybm.document.models import Content, ContentToken, Declaration, Item, Snippet, Token
from pybm.document.tokenizer import tokenize
from pybm.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass
class _OpenSnippet:
    """A snippet that is still collecting code. Parts are only ever appended."""

    name: str
    parts: list[str] = field(default_factory=list)

    def close(self) -> Snippet:
        return Snippet(name=self.name, code="".join(self.parts))


def fold(tokens: Iterable[Token]) -> list[Item]:
    """
    Fold a token stream into the ordered item list.

    The active snippet is written out when the next declaration arrives
    (or the tokens run out); nothing else can be appended while it is
    open, so its position in the list is the position of its declaration.
    """
    items: list[Item] = []
    active: _OpenSnippet | None = None

    for token in tokens:
        if isinstance(token, Declaration):
            if active is not None:
                items.append(active.close())
                active = None
            if token.name:
                active = _OpenSnippet(token.name)
            else:
                items.append(Content(""))
        elif isinstance(token, ContentToken):
            text = token.text.strip()
            if active is not None:
                active.parts.append(text)
            else:
                items.append(Content(text))
        else:
            raise TypeError(f"Unknown token type: {type(token).__name__}")

    if active is not None:
        items.append(active.close())

    return items


def parse(document: str) -> list[Item]:
    """
    Parse a document into its ordered Content / Snippet items.

    Raises:
        ParseError: If the document does not match the grammar. No partial
            item list is produced.
    """
    items = fold(tokenize(document))

    logger.debug(
        "Document parsed",
        extra={
            "items": len(items),
            "snippets": sum(1 for item in items if isinstance(item, Snippet)),
        },
    )
    return items


def snippets(items: Iterable[Item]) -> list[Snippet]:
    """The snippets of an item list, in document order."""
    return [item for item in items if isinstance(item, Snippet)]
