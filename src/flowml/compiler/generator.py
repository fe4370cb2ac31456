# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mermaid flowchart generation from parsed call expressions."""

from collections.abc import Iterable

from flowml.model.expressions import CallExpr, CallName

# ###############
# Public Interface
# ###############


def generate(expressions: Iterable[CallExpr]) -> list[str]:
    """Render one flowchart line per call expression, in input order.

    Node shapes follow the call name: ``Entity`` is a rectangle, ``Database``
    a cylinder, ``Queue`` a subroutine box and ``Decision`` a rhombus. ``Rel``
    becomes a labelled arrow. Expressions without a template are dropped.
    """
    lines: list[str] = []
    for expr in expressions:
        template = _TEMPLATES.get(expr.name)
        if template is None:
            continue
        lines.append(template.format(*(param.value for param in expr.parameters)))
    return lines


# ################
# Implementation
# ################

_TEMPLATES: dict[CallName, str] = {
    CallName.ENTITY: "{0}[{1}]",
    CallName.DATABASE: "{0}[({1})]",
    CallName.QUEUE: "{0}[[{1}]]",
    CallName.DECISION: "{0}{{{1}}}",
    CallName.REL: "{0}-->|{1}|{2}",
}
