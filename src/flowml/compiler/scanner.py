# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for FlowML source lines.

Scanning works one physical line at a time. A call expression's tokens are
therefore always tagged with the line they were found on, and no token ever
spans a line break.
"""

import string
from collections.abc import Iterable

from flowml.compiler.errors import ErrorKind, LexerError
from flowml.model.tokens import SourceLine, Token, TokenKind

# ###############
# Public Interface
# ###############


def tokenize(line: SourceLine) -> list[Token]:
    """Tokenize a single source line.

    Commas between parameters are accepted and skipped; they produce no token.

    Args:
        line: The line to scan.

    Returns:
        The tokens of the line in source order.

    Raises:
        LexerError: On an unrecognized character, on non-whitespace text after
            a closing parenthesis, or on an unterminated string literal.
    """
    return _Scanner(line).tokenize()


def tokenize_lines(lines: Iterable[SourceLine]) -> list[Token]:
    """Tokenize every line and concatenate the results in line order."""
    tokens: list[Token] = []
    for line in lines:
        tokens.extend(tokenize(line))
    return tokens


# ################
# Implementation
# ################

_WHITESPACE = frozenset(" \t\n")
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_SEPARATOR = ","


class _Scanner:
    """Single-line scanner state."""

    def __init__(self, line: SourceLine) -> None:
        self._text = line.text
        self._line = line.line_number
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner over the whole line."""
        while not self._at_end():
            self._scan_token()
        return self._tokens

    # ------------------------------------------------------------------
    # Character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of line."""
        if self._pos < len(self._text):
            return self._text[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def _consume_run(self, allowed: frozenset[str]) -> str:
        """Consume the maximal run of characters from *allowed*."""
        start = self._pos
        while not self._at_end() and self._current() in allowed:
            self._advance()
        return self._text[start : self._pos]

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._current()
        if ch == "(":
            self._emit(TokenKind.OPEN_PAREN, self._advance())
        elif ch == ")":
            self._emit(TokenKind.CLOSE_PAREN, self._advance())
            self._check_trailing()
        elif ch in _WHITESPACE or ch == _SEPARATOR:
            self._advance()
        elif ch in _DIGITS:
            self._emit(TokenKind.NUMBER_LITERAL, self._consume_run(_DIGITS))
        elif ch in _LETTERS:
            self._emit(TokenKind.IDENTIFIER, self._consume_run(_LETTERS))
        elif ch == '"':
            self._scan_string()
        else:
            raise LexerError(ErrorKind.UNEXPECTED_TOKEN, f"Unexpected token: {ch!r}", self._line, ch)

    def _check_trailing(self) -> None:
        """Require that nothing but whitespace follows a closing parenthesis."""
        while not self._at_end():
            ch = self._advance()
            if ch not in _WHITESPACE:
                raise LexerError(
                    ErrorKind.UNEXPECTED_TOKEN,
                    f"Unexpected token {ch!r} after ')'",
                    self._line,
                    ch,
                )

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal. Escape sequences are not interpreted."""
        self._advance()  # opening "
        start = self._pos
        while not self._at_end() and self._current() != '"':
            self._advance()
        if self._at_end():
            raise LexerError(ErrorKind.UNEXPECTED_TOKEN, "Unterminated string literal", self._line, '"')
        value = self._text[start : self._pos]
        self._advance()  # closing "
        self._emit(TokenKind.STRING_LITERAL, value)

    def _emit(self, kind: TokenKind, value: str) -> None:
        self._tokens.append(Token(kind, value, self._line))
