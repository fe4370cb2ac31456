# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end FlowML build: read a source file, transpile it, write the document.

The whole document is transpiled in memory before anything is written, so a
source that fails to scan or parse never leaves a partial output file behind.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from flowml.compiler.document import read_source, write_document
from flowml.compiler.generator import generate
from flowml.compiler.parser import parse_lines
from flowml.model.tokens import SourceLine
from flowml.workspace.config import ProjectConfig

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when a source cannot be read or a document cannot be written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def transpile(lines: Iterable[SourceLine]) -> list[str]:
    """Run scanner, parser, and generator over a document.

    Raises:
        LexerError: If any line fails to scan.
        ParseError: If the token stream is invalid.
    """
    return generate(parse_lines(lines))


def transpile_file(source: Path, output: Path, fenced: bool = True) -> list[str]:
    """Transpile *source* and write the resulting document to *output*.

    Args:
        source: Path of the FlowML source file.
        output: Destination path of the generated document.
        fenced: Whether to wrap the flowchart in a Markdown fence.

    Returns:
        The generated flowchart lines (without the envelope).

    Raises:
        CompilerError: If the output path is the source itself, the source
            cannot be read, or the output cannot be written.
        LexerError: If any line fails to scan.
        ParseError: If the token stream is invalid.
    """
    if output.resolve() == source.resolve():
        raise CompilerError(f"Output file '{output}' would overwrite the source file")

    try:
        lines = read_source(source)
    except OSError as exc:
        raise CompilerError(f"Cannot read source file '{source}': {exc}") from exc

    generated = transpile(lines)

    try:
        write_document(generated, output, fenced=fenced)
    except OSError as exc:
        raise CompilerError(f"Cannot write output file '{output}': {exc}") from exc
    return generated


def default_output_path(source: Path, config: ProjectConfig) -> Path:
    """Return where the document for *source* goes under *config*.

    Relative output directories are resolved against the source's directory,
    including when the configuration file was loaded from somewhere else.
    """
    target = source.with_suffix(config.output_suffix)
    if config.output_directory is None:
        return target
    return source.parent / config.output_directory / target.name
