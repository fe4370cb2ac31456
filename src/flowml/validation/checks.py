# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for parsed FlowML documents.

The generator renders relations to undeclared nodes and repeated declarations
as-is, since Mermaid accepts both. These checks point them out without
blocking generation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from flowml.model.expressions import CallExpr, CallName

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal consistency issue.

    Attributes:
        message: Human-readable description of the warning.
        line: Line of the statement the warning refers to.
    """

    message: str
    line: int


@dataclass
class ValidationResult:
    """Result of running consistency checks.

    Attributes:
        warnings: Issues found, in statement order.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """Return True if no warnings were found."""
        return len(self.warnings) == 0


def validate(expressions: Iterable[CallExpr]) -> ValidationResult:
    """Run all consistency checks on a parsed document.

    Checks performed:

    1. **Duplicate declarations**: a node id declared by more than one
       ``Entity``/``Database``/``Queue``/``Decision`` statement.
    2. **Undeclared endpoints**: a ``Rel`` whose source or target id is not
       declared by any node statement anywhere in the document.

    Args:
        expressions: Parsed call expressions in source order.

    Returns:
        A :class:`ValidationResult` with any warnings found.
    """
    exprs = list(expressions)
    warnings: list[ValidationWarning] = []
    warnings.extend(_check_duplicate_declarations(exprs))
    warnings.extend(_check_undeclared_endpoints(exprs))
    warnings.sort(key=lambda w: w.line)
    return ValidationResult(warnings=warnings)


# ################
# Implementation
# ################


def _check_duplicate_declarations(exprs: list[CallExpr]) -> list[ValidationWarning]:
    first_seen: dict[str, int] = {}
    warnings: list[ValidationWarning] = []
    for expr in exprs:
        if not expr.is_node:
            continue
        node_id = expr.parameters[0].value
        if node_id in first_seen:
            warnings.append(
                ValidationWarning(
                    message=(
                        f"Line {expr.line_number}: node '{node_id}' is already declared on line {first_seen[node_id]}"
                    ),
                    line=expr.line_number,
                )
            )
        else:
            first_seen[node_id] = expr.line_number
    return warnings


def _check_undeclared_endpoints(exprs: list[CallExpr]) -> list[ValidationWarning]:
    declared = {expr.parameters[0].value for expr in exprs if expr.is_node}
    warnings: list[ValidationWarning] = []
    for expr in exprs:
        if expr.name != CallName.REL:
            continue
        for endpoint in (expr.parameters[0].value, expr.parameters[2].value):
            if endpoint not in declared:
                warnings.append(
                    ValidationWarning(
                        message=f"Line {expr.line_number}: relation refers to undeclared node '{endpoint}'",
                        line=expr.line_number,
                    )
                )
    return warnings
