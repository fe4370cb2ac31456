# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for FlowML: scanning, parsing, and flowchart generation."""

from flowml.compiler.build import CompilerError, default_output_path, transpile, transpile_file
from flowml.compiler.document import read_source, render_document, split_source, write_document
from flowml.compiler.errors import ErrorKind, FlowmlError, LexerError, ParseError
from flowml.compiler.generator import generate
from flowml.compiler.parser import parse, parse_lines
from flowml.compiler.scanner import tokenize, tokenize_lines

__all__ = [
    "tokenize",
    "tokenize_lines",
    "parse",
    "parse_lines",
    "generate",
    "transpile",
    "transpile_file",
    "default_output_path",
    "split_source",
    "read_source",
    "render_document",
    "write_document",
    "ErrorKind",
    "FlowmlError",
    "LexerError",
    "ParseError",
    "CompilerError",
]
