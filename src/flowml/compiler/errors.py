# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostics raised by the FlowML scanner and parser.

Every diagnostic is fatal: the pipeline stops at the first one and reports it.
"""

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """Closed set of failure kinds produced by the compiler pipeline."""

    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNKNOWN_CALL_EXPRESSION = "UnknownCallExpression"
    EXPECTED_OPEN_PAREN = "ExpectedOpenParen"
    EXPECTED_CLOSE_PAREN = "ExpectedCloseParen"
    UNEXPECTED_PARAMETER_TOKEN = "UnexpectedParameterToken"
    UNTERMINATED_CALL_EXPRESSION = "UnterminatedCallExpression"
    INVALID_PARAMETERS = "InvalidParameters"


class FlowmlError(Exception):
    """Base class for fatal source diagnostics.

    Attributes:
        kind: The failure kind.
        line: 1-based line number the failure is attributed to.
        text: The offending character or name, if any.
    """

    def __init__(self, kind: ErrorKind, message: str, line: int, text: str | None = None) -> None:
        super().__init__(f"Line {line}: {message}")
        self.kind = kind
        self.line = line
        self.text = text


class LexerError(FlowmlError):
    """Raised when the scanner meets a character it cannot tokenize."""


class ParseError(FlowmlError):
    """Raised when the token stream violates the call-expression grammar."""
