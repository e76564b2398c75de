# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Document tokenizer.

The grammar (grammar.lark) recognizes two kinds of spans: declarations,
which open a named snippet, and content, which is everything else. This
module runs the lark parser over a document and turns the resulting tree
into a flat list of Declaration / ContentToken values in document order.

Tokenization is all-or-nothing. Any grammar mismatch is reported as a
single ParseError; there is no line-level recovery.
"""

from importlib.resources import files

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from pybm.document.exceptions import ParseError
from pybm.document.models import ContentToken, Declaration, Token
from pybm.logging.logger import get_logger

logger = get_logger(__name__)

# Characters stripped from both ends of a declaration's value to get the name.
NAME_TRIM = "{} \n\r"

_document_grammar = (files(__package__) / "grammar.lark").read_text(encoding="utf-8")

_cached_lark = None


def _get_cached_lark() -> Lark:
    """Get or create the compiled document parser. Compiling the grammar is the slow part."""
    global _cached_lark
    if _cached_lark is None:
        _cached_lark = Lark(
            _document_grammar,
            parser="lalr",
            lexer="contextual",
            propagate_positions=True,
        )
    return _cached_lark


class _TokenBuilder(Transformer):
    """Collapse the parse tree into Declaration and ContentToken values."""

    def start(self, children: list[Token]) -> list[Token]:
        return list(children)

    def value(self, children):
        return children[0]

    def declaration(self, children) -> Declaration:
        marker = children[0]
        # A marker without a value is an empty declaration.
        raw = str(children[1]) if len(children) > 1 else ""
        return Declaration(name=raw.strip(NAME_TRIM), line=marker.line)

    def content(self, children) -> ContentToken:
        span = children[0]
        return ContentToken(text=str(span), line=span.line)


def tokenize(document: str) -> list[Token]:
    """
    Split a document into declaration and content tokens.

    The document is given a trailing newline if it lacks one, so the last
    line is treated like every other line.

    Raises:
        ParseError: If the document does not match the grammar.
    """
    if document and not document.endswith("\n"):
        document += "\n"

    try:
        tree = _get_cached_lark().parse(document)
    except UnexpectedInput as err:
        raise ParseError(
            "Document does not match the benchmark grammar",
            line=getattr(err, "line", None),
            column=getattr(err, "column", None),
        ) from err

    try:
        tokens = _TokenBuilder().transform(tree)
    except VisitError as err:
        if err.orig_exc:
            raise err.orig_exc from None
        raise

    logger.debug("Document tokenized", extra={"tokens": len(tokens)})
    return tokens
