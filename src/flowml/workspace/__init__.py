# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for FlowML."""

from flowml.workspace.config import (
    CONFIG_NAME,
    ConfigError,
    ProjectConfig,
    find_project_config,
    load_project_config,
)

__all__ = [
    "CONFIG_NAME",
    "ConfigError",
    "ProjectConfig",
    "find_project_config",
    "load_project_config",
]
