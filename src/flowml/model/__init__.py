# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value types for FlowML: source lines, tokens, and call expressions."""

from flowml.model.expressions import NODE_CALLS, CallExpr, CallName
from flowml.model.tokens import SourceLine, Token, TokenKind

__all__ = [
    "CallExpr",
    "CallName",
    "NODE_CALLS",
    "SourceLine",
    "Token",
    "TokenKind",
]
