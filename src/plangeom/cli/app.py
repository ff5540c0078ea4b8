"""CLI application entry point for plangeom.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from plangeom import __version__
from plangeom.cli.output import (
    console,
    print_check,
    print_error,
    print_face_table,
    print_graph_info,
    print_header,
    print_ring,
    print_set_operation_result,
    print_step,
    print_vertex_list,
)
from plangeom.config import ClipConfig, LoggingConfig, get_default_settings
from plangeom.core import (
    area_of_selection,
    denormalize,
    face_for_id,
    face_is_closed,
    normalize,
    set_operation,
    splitting_vertices_for_edge_id,
    vertices_for_face_id,
)
from plangeom.domain import Graph, SetOperationError, SetOperationKind
from plangeom.exceptions import GraphLoadError, PlangeomError
from plangeom.io import GraphReader, GraphWriter, read_ring
from plangeom.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="plangeom",
    help="Planar geometry engine for floorplan editing.",
    add_completion=False,
    no_args_is_help=True,
)

# Exit code for a set operation that ran but was rejected
EXIT_REJECTED = 2


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]plangeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect geometry graphs and run boolean operations on face rings."""
    settings = get_default_settings().model_copy(
        update={"logging": LoggingConfig(log_file=log_file, log_level=log_level)},
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"settings": settings, "logger": logger, "quiet": quiet}


def _load_graph(graph_path: Path, quiet: bool) -> Graph:
    if not quiet:
        print_step("Loading graph")
    try:
        graph = GraphReader(graph_path).load()
    except FileNotFoundError:
        print_error(
            f"Input file not found: {graph_path}",
            details=f"The file '{graph_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    except GraphLoadError as e:
        print_error(f"Could not load graph: {e.reason}")
        raise typer.Exit(code=1)

    if not quiet:
        print_graph_info(str(graph_path), graph)
    return graph


@app.command()
def setop(
    ctx: typer.Context,
    kind: Annotated[
        str,
        typer.Argument(help="Operation (union|intersection|difference)", show_default=False),
    ],
    ring_a: Annotated[
        Path,
        typer.Argument(help="JSON file with the subject ring", show_default=False),
    ],
    ring_b: Annotated[
        Path,
        typer.Argument(help="JSON file with the clip ring", show_default=False),
    ],
    clip_scale: Annotated[
        float,
        typer.Option("--clip-scale", help="Integer grid scale for clipping", min=1.0),
    ] = 100.0,
    offset: Annotated[
        float,
        typer.Option("--offset", help="Miter offset applied around clipping (scaled units)"),
    ] = 0.01,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the result as JSON"),
    ] = None,
) -> None:
    """Run a boolean set operation on two rings.

    Example:
        plangeom setop union kitchen.json dining.json -o merged.json
    """
    quiet = ctx.obj["quiet"]
    logger = ctx.obj["logger"]

    try:
        operation = SetOperationKind(kind.lower())
    except ValueError:
        print_error(
            f"Invalid operation: {kind}",
            details="Valid values: union, intersection, difference",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        config = ClipConfig(clip_scale=clip_scale, offset=offset)
        first = read_ring(ring_a)
        second = read_ring(ring_b)
        result = set_operation(operation, first, second, config)
        if output is not None:
            GraphWriter().write_result(result, output)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except PlangeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValueError as e:
        print_error(f"Invalid clip settings: {e}")
        raise typer.Exit(code=1)

    logger.info("Set operation complete", kind=operation.value, result=type(result).__name__)

    if not quiet:
        print_set_operation_result(operation.value, result)
        if output is not None:
            console.print(f"  written to {output}")

    if isinstance(result, SetOperationError):
        raise typer.Exit(code=EXIT_REJECTED)


@app.command()
def inspect(
    ctx: typer.Context,
    graph_path: Annotated[
        Path,
        typer.Argument(help="Normalized graph JSON file", show_default=False),
    ],
    face: Annotated[
        str | None,
        typer.Option("--face", "-f", help="Show the vertex loop of a single face"),
    ] = None,
) -> None:
    """List the faces of a graph with their vertex loops and areas."""
    quiet = ctx.obj["quiet"]
    graph = _load_graph(graph_path, quiet)
    if graph.is_empty():
        console.print("  Graph is empty")
        return

    try:
        if face is not None:
            if face_for_id(face, graph) is None:
                print_error(f"Face not found: {face}")
                raise typer.Exit(code=1)
            print_ring(vertices_for_face_id(face, graph), title=f"Face {face}")
            return

        rows = []
        for f in graph.faces:
            loop = vertices_for_face_id(f.id, graph)
            rows.append((f.id, len(f.edge_refs), loop, area_of_selection(loop)))
    except PlangeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_step("Faces")
    if rows:
        print_face_table(rows)
    else:
        console.print("  No faces")


@app.command()
def splits(
    ctx: typer.Context,
    graph_path: Annotated[
        Path,
        typer.Argument(help="Normalized graph JSON file", show_default=False),
    ],
    edge_id: Annotated[
        str,
        typer.Argument(help="Edge to test", show_default=False),
    ],
    spacing: Annotated[
        float,
        typer.Option("--spacing", "-s", help="Grid spacing; tolerance is spacing / 20", min=0.0),
    ] = 1.0,
) -> None:
    """List the vertices that would split an edge."""
    quiet = ctx.obj["quiet"]
    graph = _load_graph(graph_path, quiet)

    try:
        vertices = splitting_vertices_for_edge_id(edge_id, graph, spacing)
    except PlangeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_step(f"Splitting vertices for edge {edge_id}")
    print_vertex_list(vertices, empty_message="No vertices lie on this edge")


@app.command()
def check(
    ctx: typer.Context,
    graph_path: Annotated[
        Path,
        typer.Argument(help="Normalized graph JSON file", show_default=False),
    ],
) -> None:
    """Check face closure and the normalize/denormalize round trip."""
    quiet = ctx.obj["quiet"]
    logger = ctx.obj["logger"]
    graph = _load_graph(graph_path, quiet)

    if not quiet:
        print_step("Checking")

    failures = 0
    try:
        for f in graph.faces:
            closed = face_is_closed(f.id, graph)
            failures += not closed
            print_check(f"face {f.id} is closed", closed)

        round_trip = normalize(denormalize(graph))
    except PlangeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    same = round_trip == graph
    failures += not same
    print_check(
        "normalize(denormalize(graph)) matches graph",
        same,
        details=None if same else "graph contains duplicate ids or unreferenced data",
    )

    logger.info("Graph checked", graph=str(graph_path), failures=failures)
    if failures:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
