"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from plangeom.domain import (
    Graph,
    PointLike,
    SetOperationEmpty,
    SetOperationError,
    SetOperationResult,
)

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]plangeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def _format_point(point: PointLike) -> str:
    return f"({point.x:g}, {point.y:g})"


def print_graph_info(graph_path: str, graph: Graph) -> None:
    """Print a one-line summary of a loaded graph.

    Args:
        graph_path: Path the graph was loaded from
        graph: The loaded graph
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(graph_path)
    if graph.id is not None:
        line.append(f" ({graph.id})")
    console.print(line)
    console.print(
        f"  {len(graph.vertices):,} vertices {SYM_DOT} {len(graph.edges):,} edges "
        f"{SYM_DOT} {len(graph.faces):,} faces"
    )


def print_ring(ring: Sequence[PointLike], title: str = "Ring") -> None:
    """Print the points of a ring as a table.

    Args:
        ring: Points in ring order
        title: Table title
    """
    table = Table(title=title, title_justify="left", show_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("id")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for i, point in enumerate(ring):
        table.add_row(str(i), str(getattr(point, "id", None) or ""), f"{point.x:g}", f"{point.y:g}")
    console.print(table)


def print_set_operation_result(kind: str, result: SetOperationResult) -> None:
    """Print the outcome of a set operation.

    Args:
        kind: Operation name
        result: Outcome of the operation
    """
    if isinstance(result, SetOperationError):
        console.print(f"\n[bold yellow]{SYM_ERR} {kind} rejected:[/bold yellow] {result.message}")
        return
    if isinstance(result, SetOperationEmpty):
        console.print(f"\n[bold green]{SYM_OK} {kind}[/bold green] {SYM_DOT} empty result")
        return

    console.print(
        f"\n[bold green]{SYM_OK} {kind}[/bold green] {SYM_DOT} {len(result.ring)} points"
    )
    print_ring(result.ring, title="Result")


def print_face_table(rows: Sequence[tuple[str, int, Sequence[PointLike], float]]) -> None:
    """Print one row per face.

    Args:
        rows: (face id, edge count, vertex loop, area) tuples
    """
    table = Table(show_edge=False)
    table.add_column("face")
    table.add_column("edges", justify="right")
    table.add_column("vertices")
    table.add_column("area", justify="right")
    for face_id, edge_count, vertices, area in rows:
        loop = " → ".join(str(getattr(v, "id", None) or _format_point(v)) for v in vertices)
        table.add_row(face_id, str(edge_count), loop, f"{abs(area):,.2f}")
    console.print(table)


def print_vertex_list(vertices: Sequence[PointLike], empty_message: str) -> None:
    """Print vertices one per line, or a message if there are none."""
    if not vertices:
        console.print(f"  {empty_message}")
        return
    for vertex in vertices:
        console.print(f"  {getattr(vertex, 'id', '')} {_format_point(vertex)}")


def print_check(label: str, ok: bool, details: str | None = None) -> None:
    """Print the outcome of a single consistency check."""
    if ok:
        console.print(f"  [green]{SYM_OK}[/green] {label}")
    else:
        console.print(f"  [red]{SYM_ERR}[/red] {label}")
        if details:
            console.print(f"    {details}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Messages may quote pydantic errors or paths containing brackets
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
