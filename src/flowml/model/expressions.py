# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Call-expression nodes produced by the FlowML parser."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from flowml.model.tokens import Token

# ###############
# Public Interface
# ###############


class CallName(Enum):
    """The fixed vocabulary of call expressions."""

    ENTITY = "Entity"
    DATABASE = "Database"
    REL = "Rel"
    QUEUE = "Queue"
    DECISION = "Decision"


NODE_CALLS: frozenset[CallName] = frozenset(
    {CallName.ENTITY, CallName.DATABASE, CallName.QUEUE, CallName.DECISION}
)


class CallExpr(BaseModel):
    """A validated ``Name(param, ...)`` statement.

    Attributes:
        name: The call name.
        line_number: Line of the leading identifier.
        parameters: Parameter tokens in source order.
    """

    model_config = ConfigDict(frozen=True)

    name: CallName
    line_number: int
    parameters: list[Token] = _Field(default_factory=list)

    @property
    def is_node(self) -> bool:
        """Return True for statements that declare a node rather than an edge."""
        return self.name in NODE_CALLS
