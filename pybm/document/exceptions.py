# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Exceptions raised while reading benchmark documents."""

from typing import Optional


class DocumentError(Exception):
    """Base for all document errors."""


class ParseError(DocumentError):
    """
    The document does not match the grammar.

    Parsing is all-or-nothing: when this is raised no item list exists for
    the document. Line and column point at the offending character when the
    grammar could locate it.
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
