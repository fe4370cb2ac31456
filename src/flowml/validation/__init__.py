# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for FlowML documents (undeclared and duplicate nodes)."""

from flowml.validation.checks import ValidationResult, ValidationWarning, validate

__all__ = [
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
