"""Rich console output helpers for the CLI."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shapekit.core.segments import Segment

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success / yes
SYM_ERR = "✗"  # Error / no
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Shapekit[/bold] v{version}")
    console.print("─" * 44)


def print_shape(description: str, winding_rule: str) -> None:
    """Print the shape being queried.

    Args:
        description: Human-readable shape description
        winding_rule: Name of the outline's winding rule
    """
    line = Text(f"{SYM_STEP} ")
    line.append(description)
    line.append(f" {SYM_DOT} {winding_rule}", style="dim")
    console.print(line)


def print_segments(segments: list[Segment], flattened: bool) -> None:
    """Print a segment list as a table.

    Args:
        segments: Segments in stream order
        flattened: Whether curves were flattened
    """
    title = "Flattened segments" if flattened else "Segments"
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Coordinates")
    for i, segment in enumerate(segments):
        coords = " ".join(f"{c:.6g}" for c in segment.coords)
        table.add_row(str(i), segment.type.name, coords)
    console.print(table)
    console.print(f"  {len(segments)} segments")


def print_answer(label: str, value: bool) -> None:
    """Print a yes/no answer.

    Args:
        label: Name of the predicate
        value: Predicate result
    """
    if value:
        console.print(f"  {label}: [green]{SYM_OK} yes[/green]")
    else:
        console.print(f"  {label}: [red]{SYM_ERR} no[/red]")


def print_classification(outcome: str) -> None:
    """Print a three-way containment outcome.

    Args:
        outcome: One of "inside", "outside", "boundary"
    """
    styles = {"inside": "green", "outside": "red", "boundary": "yellow"}
    style = styles.get(outcome, "white")
    console.print(f"  classification: [{style}]{outcome}[/{style}]")


def print_error(message: str, details: str | None = None) -> None:
    """Print an error message.

    Args:
        message: Main error message
        details: Optional additional details
    """
    console.print(f"\n[red]{SYM_ERR}[/red] [bold red]Error:[/bold red] {message}")
    if details:
        console.print(f"  [dim]{details}[/dim]")
