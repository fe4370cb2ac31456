# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading FlowML sources and writing Mermaid documents.

Sources are UTF-8 text with one statement per line. Generated documents are
wrapped in a Markdown ``mermaid`` fence by default so they render directly on
code hosting sites; unfenced output is a plain ``.mmd`` file.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from flowml.model.tokens import SourceLine

# ###############
# Public Interface
# ###############

FLOWCHART_HEADER = "flowchart LR"
FENCE_OPEN = "```mermaid"
FENCE_CLOSE = "```"


def split_source(text: str) -> list[SourceLine]:
    """Split source text into numbered lines (1-based, terminators removed)."""
    return [SourceLine(text=line, line_number=number) for number, line in enumerate(text.splitlines(), start=1)]


def read_source(path: Path) -> list[SourceLine]:
    """Read a FlowML source file into numbered lines.

    Raises:
        OSError: If the file cannot be read.
    """
    with path.open(encoding="utf-8") as handle:
        return split_source(handle.read())


def render_document(lines: Iterable[str], fenced: bool = True) -> str:
    """Wrap generated flowchart lines in the document envelope."""
    out: list[str] = []
    if fenced:
        out.append(FENCE_OPEN)
    out.append(FLOWCHART_HEADER)
    out.extend(lines)
    if fenced:
        out.append(FENCE_CLOSE)
    return "\n".join(out) + "\n"


def write_document(lines: Iterable[str], path: Path, fenced: bool = True) -> None:
    """Write a rendered document to *path*, creating parent directories as needed."""
    text = render_document(lines, fenced=fenced)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        handle.write(text)
