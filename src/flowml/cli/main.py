# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the FlowML command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from flowml.compiler.build import CompilerError, default_output_path, transpile_file
from flowml.compiler.document import read_source
from flowml.compiler.errors import FlowmlError
from flowml.compiler.parser import parse_lines
from flowml.validation.checks import validate
from flowml.workspace.config import (
    CONFIG_NAME,
    ConfigError,
    ProjectConfig,
    find_project_config,
    load_project_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the FlowML CLI."""
    parser = argparse.ArgumentParser(
        prog="flowml",
        description="FlowML: transpile diagram notation to Mermaid flowcharts",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Transpile a FlowML file to a Mermaid document",
        description="Transpile a FlowML source file and write the Mermaid flowchart document.",
    )
    build_parser.add_argument("source", help="FlowML source file")
    build_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: the source path with the configured suffix)",
    )
    build_parser.add_argument(
        "--config",
        default=None,
        help=f"Project configuration file (default: {CONFIG_NAME} next to the source, if present)",
    )
    build_parser.add_argument(
        "--no-fence",
        action="store_true",
        help="Write a bare Mermaid file without the Markdown fence",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a FlowML file for errors and inconsistencies",
        description="Parse a FlowML source file and report undeclared or duplicate nodes.",
    )
    check_parser.add_argument("source", help="FlowML source file")

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the diagram preview",
        description="Launch a web page that renders the FlowML file as a flowchart.",
    )
    serve_parser.add_argument("source", help="FlowML source file")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "build":
        return _cmd_build(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _error(message: str) -> None:
    print(f"{chalk.red('Error:')} {message}", file=sys.stderr)


def _load_config(args: argparse.Namespace, source: Path) -> ProjectConfig:
    if args.config is not None:
        return load_project_config(Path(args.config))
    return find_project_config(source.parent)


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    source = Path(args.source).resolve()

    if not source.is_file():
        _error(f"source file '{source}' does not exist.")
        return 1

    try:
        config = _load_config(args, source)
    except ConfigError as exc:
        _error(str(exc))
        return 1

    output = Path(args.output).resolve() if args.output else default_output_path(source, config)
    fenced = config.fenced and not args.no_fence

    try:
        lines = transpile_file(source, output, fenced=fenced)
    except (CompilerError, FlowmlError) as exc:
        _error(str(exc))
        return 1

    print(chalk.green(f"Wrote {len(lines)} flowchart line(s) to '{output}'."))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    source = Path(args.source).resolve()

    try:
        expressions = parse_lines(read_source(source))
    except OSError as exc:
        _error(f"cannot read source file '{source}': {exc}")
        return 1
    except FlowmlError as exc:
        _error(str(exc))
        return 1

    result = validate(expressions)
    for warning in result.warnings:
        print(f"{chalk.yellow('Warning:')} {warning.message}")

    if result.is_clean:
        print(chalk.green(f"Checked {len(expressions)} statement(s). No issues found."))
    else:
        print(f"Checked {len(expressions)} statement(s). {len(result.warnings)} warning(s).")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    source = Path(args.source).resolve()

    if not source.is_file():
        _error(f"source file '{source}' does not exist.")
        return 1

    from flowml.webui.app import create_app

    print(f"Serving preview of '{source.name}' at http://{args.host}:{args.port}/")
    app = create_app(source=source)
    app.run(host=args.host, port=args.port, debug=False)
    return 0
