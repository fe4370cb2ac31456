# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the optional FlowML project configuration."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# ###############
# Public Interface
# ###############

CONFIG_NAME = ".flowml.yaml"


class ConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


class ProjectConfig(BaseModel):
    """Output settings for a directory of FlowML sources.

    Attributes:
        output_suffix: File suffix used for generated documents.
        output_directory: Directory, relative to the source file's directory,
            that receives generated documents. ``None`` writes next to the source.
        fenced: Whether to wrap the flowchart in a Markdown ``mermaid`` fence.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output_suffix: str = Field(alias="output-suffix", default=".md")
    output_directory: str | None = Field(alias="output-directory", default=None)
    fenced: bool = True

    @field_validator("output_suffix")
    @classmethod
    def check_output_suffix(cls, value: str) -> str:
        if not value.startswith(".") or value == "." or "/" in value or "\\" in value:
            raise ValueError(f"output-suffix must start with '.' and contain no path separators, got {value!r}")
        return value


def load_project_config(path: Path) -> ProjectConfig:
    """Load and validate a project configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.flowml.yaml`` file.

    Returns:
        A validated ProjectConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML, or
            does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_project_config(directory: Path) -> ProjectConfig:
    """Load ``.flowml.yaml`` from *directory*, or return the defaults if absent."""
    path = directory / CONFIG_NAME
    if not path.exists():
        return ProjectConfig()
    return load_project_config(path)
