# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based preview page for a FlowML source file."""

from pathlib import Path

import dash
from dash import Input, Output, html

from flowml.compiler.build import transpile
from flowml.compiler.document import read_source, render_document
from flowml.compiler.errors import FlowmlError

# ###############
# Public Interface
# ###############

MERMAID_SCRIPT = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js"

# Mermaid's own startOnLoad scan runs before Dash has rendered the layout, so
# the diagram is drawn from a clientside callback once the preview is mounted.
RENDER_MERMAID_JS = """
function(children) {
    var node = document.getElementById("diagram");
    if (!window.mermaid || !node) {
        return window.dash_clientside.no_update;
    }
    window.mermaid.initialize({startOnLoad: false});
    window.mermaid.run({nodes: [node]});
    return "rendered";
}
"""


def create_app(source: Path) -> dash.Dash:
    """Create the preview application for *source*.

    The layout is rebuilt on every page load so edits to the source file show
    up after a browser refresh.
    """
    app = dash.Dash(
        __name__,
        title="FlowML Preview",
        external_scripts=[MERMAID_SCRIPT],
    )
    app.layout = lambda: _build_layout(source)
    app.clientside_callback(
        RENDER_MERMAID_JS,
        Output("render-status", "children"),
        Input("preview", "children"),
    )
    return app


# ################
# Implementation
# ################


def _build_layout(source: Path) -> html.Div:
    """Build the page for the current content of *source*."""
    try:
        lines = transpile(read_source(source))
    except (OSError, FlowmlError) as exc:
        body = html.Pre(f"Error: {exc}", id="diagnostic", style={"color": "#b00020"})
    else:
        text = render_document(lines, fenced=False)
        body = html.Div(
            [
                html.Div(text, className="mermaid", id="diagram"),
                html.Details([html.Summary("Mermaid source"), html.Pre(text, id="mermaid-source")]),
            ]
        )
    return html.Div(
        [
            html.H1("FlowML Preview"),
            html.P(f"Source: {source}"),
            html.Hr(),
            html.Div(body, id="preview"),
            html.Div(id="render-status", hidden=True),
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )
