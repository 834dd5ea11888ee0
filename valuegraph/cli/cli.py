"""
CLI entry point for valuegraph.

Builds a graph of substring relationships between the values of a flat
key/value document and renders it as an interactive HTML page.
Uses Typer for the command line and Rich for tabular output.

Usage:
    valuegraph visualize --input values.yaml
    valuegraph visualize -i values.yaml --no-open --output graph.html
    valuegraph visualize -i values.yaml --stdout > graph.html
    valuegraph graph -i values.yaml --indent 2
    valuegraph relations -i values.yaml --all
    valuegraph classify "hello world" hello
"""

from __future__ import annotations

import sys
from contextlib import nullcontext
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from valuegraph.adapters.document import load_values
from valuegraph.adapters.render import FileSink, MemorySink
from valuegraph.common.exceptions import ValueGraphError
from valuegraph.common.logging import RunLogger, configure_logging
from valuegraph.modules import classify, classify_pairs
from valuegraph.services import ValueGraphSettings, load_graph, run_visualization

app = typer.Typer(
    name="valuegraph",
    help="valuegraph CLI - Visualize substring relationships between values",
    no_args_is_help=True,
)

InputOption = Annotated[
    Path,
    typer.Option("-i", "--input", help="Key/value document (YAML or JSON) to parse"),
]
KeepOrderOption = Annotated[
    bool,
    typer.Option("--keep-order", help="Number nodes in document order instead of sorted"),
]


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _load_settings(**overrides: Any) -> ValueGraphSettings:
    """Load settings from the environment, applying non-None CLI overrides."""
    try:
        return ValueGraphSettings(
            **{k: v for k, v in overrides.items() if v is not None}
        )
    except ValidationError as e:
        raise _fail(f"invalid settings: {e}") from e


# =============================================================================
# Visualize Command
# =============================================================================


@app.command("visualize")
def visualize(
    input_path: InputOption,
    template: Annotated[
        Path | None, typer.Option("--template", help="HTML template with placeholder")
    ] = None,
    output: Annotated[
        Path | None, typer.Option("-o", "--output", help="Write the page to this file")
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for the generated temp file"),
    ] = None,
    no_open: Annotated[
        bool, typer.Option("--no-open", help="Do not open the page in a browser")
    ] = False,
    stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print the page instead of writing a file"),
    ] = False,
    keep_order: KeepOrderOption = False,
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Print detailed progress")
    ] = False,
) -> None:
    """Render the relationship graph to HTML and open it."""
    if stdout and output:
        raise _fail("--stdout and --output cannot be combined")

    settings = _load_settings(
        template_path=str(template) if template else None,
        output_dir=str(output_dir) if output_dir else None,
        open_browser=False if (no_open or stdout) else None,
        preserve_order=True if keep_order else None,
        log_level="INFO" if verbose else None,
    )
    configure_logging(settings.log_level)

    if stdout:
        sink = MemorySink()
    else:
        sink = FileSink(output) if output else None

    run_log = RunLogger(settings.log_dir) if settings.log_dir else nullcontext()
    try:
        with run_log as run_logger:
            result = run_visualization(
                input_path, settings=settings, sink=sink, run_logger=run_logger
            )
    except ValueGraphError as e:
        raise _fail(str(e)) from e

    if verbose:
        typer.echo(
            f"Graph: {result.stats['nodes']} nodes, {result.stats['links']} links",
            err=stdout,
        )
    if stdout:
        typer.echo(sink.data.decode("utf-8"), nl=False)
    elif not result.opened:
        typer.echo(f"HTML output written to {result.location}", err=True)


# =============================================================================
# Graph Command
# =============================================================================


@app.command("graph")
def graph(
    input_path: InputOption,
    keep_order: KeepOrderOption = False,
    indent: Annotated[
        int | None, typer.Option("--indent", min=0, help="Indent the JSON output")
    ] = None,
) -> None:
    """Print the relationship graph as JSON."""
    try:
        result = load_graph(input_path, preserve_order=keep_order)
        typer.echo(result.to_json(indent=indent))
    except ValueGraphError as e:
        raise _fail(str(e)) from e


# =============================================================================
# Relations Command
# =============================================================================


@app.command("relations")
def relations(
    input_path: InputOption,
    keep_order: KeepOrderOption = False,
    show_all: Annotated[
        bool, typer.Option("--all", help="Include pairs that produce no link")
    ] = False,
) -> None:
    """Show the relation of every ordered key pair."""
    try:
        values = load_values(input_path)
    except ValueGraphError as e:
        raise _fail(str(e)) from e

    table = Table(title=f"Relations in {input_path.name}")
    table.add_column("Left", style="cyan")
    table.add_column("Relation")
    table.add_column("Right", style="cyan")
    table.add_column("Link", justify="center")

    shown = 0
    for key_a, key_b, relation in classify_pairs(values, preserve_order=keep_order):
        if not (show_all or relation.produces_link):
            continue
        table.add_row(key_a, relation.value, key_b, "yes" if relation.produces_link else "")
        shown += 1

    console = Console()
    if shown:
        console.print(table)
    else:
        console.print("No relations found.")


# =============================================================================
# Classify Command
# =============================================================================


@app.command("classify")
def classify_values(
    value_a: Annotated[str, typer.Argument(help="Left value")],
    value_b: Annotated[str, typer.Argument(help="Right value")],
) -> None:
    """Classify the relation between two values."""
    typer.echo(classify(value_a, value_b).value)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> int:
    """Main entry point."""
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
