# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical value types shared by the scanner and the parser."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SourceLine:
    """One physical line of FlowML source.

    Attributes:
        text: The line content without its line terminator.
        line_number: 1-based position of the line in the document.
    """

    text: str
    line_number: int


class TokenKind(enum.Enum):
    """All token kinds known to the FlowML scanner."""

    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"
    IDENTIFIER = "Identifier"
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"
    # Reserved, never produced.
    QUOTE = "Quote"


@dataclass(frozen=True)
class Token:
    """A lexical token with the line it was scanned from.

    Attributes:
        kind: The kind of token.
        value: The raw text of the token (the unquoted content for string literals).
        line_number: 1-based line number of the source line.
    """

    kind: TokenKind
    value: str
    line_number: int
