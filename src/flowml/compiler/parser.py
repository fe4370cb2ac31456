# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for FlowML token streams.

Converts the flat token stream of a whole document into an ordered list of
validated call expressions.
"""

from collections.abc import Iterable, Sequence

from flowml.compiler.errors import ErrorKind, ParseError
from flowml.compiler.scanner import tokenize_lines
from flowml.model.expressions import CallExpr, CallName
from flowml.model.tokens import SourceLine, Token, TokenKind

# ###############
# Public Interface
# ###############


def parse(tokens: Sequence[Token]) -> list[CallExpr]:
    """Parse a token stream into call expressions.

    Tokens that are not identifiers are skipped at statement boundaries.

    Args:
        tokens: Tokens of the whole document in source order.

    Returns:
        The call expressions in source order.

    Raises:
        ParseError: On an unknown call name, a missing parenthesis, an
            unsupported parameter token, a truncated parameter list, or a
            parameter list that does not match the call's signature.
    """
    return _Parser(tokens).parse()


def parse_lines(lines: Iterable[SourceLine]) -> list[CallExpr]:
    """Tokenize and parse a whole document.

    Raises:
        LexerError: If any line fails to scan.
        ParseError: If the token stream is invalid.
    """
    return parse(tokenize_lines(lines))


# ################
# Implementation
# ################

_CALL_NAMES: dict[str, CallName] = {name.value: name for name in CallName}

_PARAMETER_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.NUMBER_LITERAL, TokenKind.STRING_LITERAL, TokenKind.IDENTIFIER}
)

_NODE_SIGNATURE: tuple[TokenKind, ...] = (TokenKind.IDENTIFIER, TokenKind.STRING_LITERAL)

_SIGNATURES: dict[CallName, tuple[TokenKind, ...]] = {
    CallName.ENTITY: _NODE_SIGNATURE,
    CallName.DATABASE: _NODE_SIGNATURE,
    CallName.QUEUE: _NODE_SIGNATURE,
    CallName.DECISION: _NODE_SIGNATURE,
    CallName.REL: (TokenKind.IDENTIFIER, TokenKind.STRING_LITERAL, TokenKind.IDENTIFIER),
}

_ORDINALS = ("first", "second", "third")


class _Parser:
    """Cursor over an immutable token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> list[CallExpr]:
        """Parse the full token stream."""
        expressions: list[CallExpr] = []
        while not self._at_end():
            tok = self._advance()
            if tok.kind == TokenKind.IDENTIFIER:
                expressions.append(self._parse_call(tok))
        return expressions

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _current(self) -> Token | None:
        """Return the current (un-consumed) token, or None when exhausted."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    # ------------------------------------------------------------------
    # Call expressions
    # ------------------------------------------------------------------

    def _parse_call(self, name_tok: Token) -> CallExpr:
        """Parse: Name ( param* )"""
        name = _CALL_NAMES.get(name_tok.value)
        if name is None:
            raise ParseError(
                ErrorKind.UNKNOWN_CALL_EXPRESSION,
                f"Unexpected {name_tok.value} call expression",
                name_tok.line_number,
                name_tok.value,
            )

        tok = self._current()
        if tok is None or tok.kind != TokenKind.OPEN_PAREN:
            line = name_tok.line_number if tok is None else tok.line_number
            raise ParseError(
                ErrorKind.EXPECTED_OPEN_PAREN,
                f"Expected '(' after {name_tok.value} identifier",
                line,
                None if tok is None else tok.value,
            )
        self._advance()

        parameters = self._parse_parameters(name_tok)
        self._expect_close_paren(name_tok)

        expr = CallExpr(name=name, line_number=name_tok.line_number, parameters=parameters)
        _validate_parameters(expr)
        return expr

    def _parse_parameters(self, name_tok: Token) -> list[Token]:
        """Collect parameter tokens up to (not including) the closing parenthesis."""
        parameters: list[Token] = []
        while True:
            tok = self._current()
            if tok is None:
                raise ParseError(
                    ErrorKind.UNTERMINATED_CALL_EXPRESSION,
                    f"Missing ')' to close {name_tok.value} call expression",
                    name_tok.line_number,
                    name_tok.value,
                )
            if tok.kind == TokenKind.CLOSE_PAREN:
                return parameters
            if tok.kind not in _PARAMETER_KINDS:
                raise ParseError(
                    ErrorKind.UNEXPECTED_PARAMETER_TOKEN,
                    f"Unexpected {tok.kind.value} token in {name_tok.value} parameter list",
                    tok.line_number,
                    tok.value,
                )
            parameters.append(self._advance())

    def _expect_close_paren(self, name_tok: Token) -> None:
        tok = self._current()
        if tok is None or tok.kind != TokenKind.CLOSE_PAREN:
            raise ParseError(
                ErrorKind.EXPECTED_CLOSE_PAREN,
                f"Expected ')' after {name_tok.value} parameters",
                name_tok.line_number if tok is None else tok.line_number,
                None if tok is None else tok.value,
            )
        self._advance()


def _validate_parameters(expr: CallExpr) -> None:
    """Check the parameter count and kinds against the call's signature."""
    expected = _SIGNATURES[expr.name]
    name = expr.name.value
    if len(expr.parameters) != len(expected):
        raise ParseError(
            ErrorKind.INVALID_PARAMETERS,
            f"{name} call expression expected {len(expected)} parameters, got {len(expr.parameters)}",
            expr.line_number,
            name,
        )
    for index, (param, kind) in enumerate(zip(expr.parameters, expected)):
        if param.kind != kind:
            raise ParseError(
                ErrorKind.INVALID_PARAMETERS,
                f"{name} call expression {_ORDINALS[index]} parameter expected {kind.value}, got {param.kind.value}",
                expr.line_number,
                param.value,
            )
