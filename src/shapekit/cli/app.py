"""CLI application entry point for shapekit.

This module provides the command-line interface using Typer. Shapes are
given as a kind followed by their defining numbers:

    line X1 Y1 X2 Y2
    quad X1 Y1 CX CY X2 Y2
    cubic X1 Y1 C1X C1Y C2X C2Y X2 Y2
    rect X Y WIDTH HEIGHT
    ellipse X Y WIDTH HEIGHT
    circle CX CY RADIUS

Negative numbers must follow a ``--`` separator.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from shapekit import __version__
from shapekit.cli.output import (
    console,
    print_answer,
    print_classification,
    print_error,
    print_header,
    print_segments,
    print_shape,
)
from shapekit.config import FlatteningConfig, LoggingConfig, ShapekitSettings
from shapekit.core.crossing import Containment, classify_rect
from shapekit.core.flattening import FlatteningIterator
from shapekit.core.segments import WindingRule, iter_segments
from shapekit.domain import Circle, CubicCurve, Ellipse, Line, QuadCurve, Rectangle
from shapekit.exceptions import ShapekitError
from shapekit.utils import QueryLogger, configure_logging

SHAPE_ARITY: dict[str, tuple[type, int]] = {
    "line": (Line, 4),
    "quad": (QuadCurve, 6),
    "cubic": (CubicCurve, 8),
    "rect": (Rectangle, 4),
    "ellipse": (Ellipse, 4),
    "circle": (Circle, 3),
}

app = typer.Typer(
    name="shapekit",
    help="Inspect shape outlines: segment streams, flattening and hit testing.",
    add_completion=False,
    no_args_is_help=True,
)


def build_shape(kind: str, values: list[float]) -> Any:
    """Create a shape from its kind name and defining numbers.

    Args:
        kind: One of the SHAPE_ARITY keys
        values: Defining numbers, in constructor order

    Returns:
        The shape instance

    Raises:
        ValueError: If the kind is unknown or the number count is wrong
    """
    entry = SHAPE_ARITY.get(kind.lower())
    if entry is None:
        raise ValueError(f"Unknown shape kind '{kind}'")
    shape_type, arity = entry
    if len(values) != arity:
        raise ValueError(f"'{kind}' takes {arity} numbers, got {len(values)}")
    return shape_type(*values)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapekit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
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
    """Inspect shape outlines from the command line."""
    settings = ShapekitSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    query_logger = None
    if settings.logging.log_file is not None:
        query_logger = QueryLogger(configure_logging(settings.logging))
    ctx.obj = {"settings": settings, "logger": query_logger}


def _resolve(kind: str, values: list[float]) -> Any:
    try:
        return build_shape(kind, values)
    except ValueError as e:
        print_error(str(e), details="Shapes: " + ", ".join(SHAPE_ARITY))
        raise typer.Exit(code=1)


ShapeArg = Annotated[
    str,
    typer.Argument(help="Shape kind (line|quad|cubic|rect|ellipse|circle)", show_default=False),
]
ValuesArg = Annotated[
    list[float],
    typer.Argument(help="Numbers defining the shape", show_default=False),
]


@app.command()
def segments(
    ctx: typer.Context,
    shape: ShapeArg,
    values: ValuesArg,
    flatness: Annotated[
        float | None,
        typer.Option(
            "--flatness",
            "-f",
            help="Flatten curves to this tolerance",
        ),
    ] = None,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-l",
            help="Maximum subdivision depth per curve segment",
        ),
    ] = 16,
) -> None:
    """Print the outline of a shape as a segment stream."""
    target = _resolve(shape, values)
    query_logger: QueryLogger | None = ctx.obj["logger"]

    try:
        stream = target.segment_stream()
        rule = stream.winding_rule()
        if flatness is not None:
            config = FlatteningConfig(flatness=flatness, subdivision_limit=limit)
            stream = FlatteningIterator.from_config(stream, config)
        emitted = list(iter_segments(stream))
    except (ShapekitError, ValueError) as e:
        if query_logger:
            query_logger.log_error(shape, e)
        print_error(f"Could not walk outline: {e}")
        raise typer.Exit(code=1)

    print_header(__version__)
    print_shape(repr(target), rule.value)
    print_segments(emitted, flattened=flatness is not None)
    if query_logger:
        query_logger.log_stream(shape, len(emitted), flattened=flatness is not None)


@app.command()
def contains(
    ctx: typer.Context,
    shape: ShapeArg,
    values: ValuesArg,
    point: Annotated[
        tuple[float, float],
        typer.Option(
            "--point",
            "-p",
            help="Query point X Y",
        ),
    ],
) -> None:
    """Report whether a point lies inside a shape."""
    target = _resolve(shape, values)
    query_logger: QueryLogger | None = ctx.obj["logger"]

    inside = target.contains(*point)
    print_header(__version__)
    print_shape(repr(target), target.segment_stream().winding_rule().value)
    console.print(f"  point ({point[0]:g}, {point[1]:g}) is {'inside' if inside else 'outside'}")
    if query_logger:
        query_logger.log_query(shape, "contains", "inside" if inside else "outside")


@app.command()
def intersects(
    ctx: typer.Context,
    shape: ShapeArg,
    values: ValuesArg,
    rect: Annotated[
        tuple[float, float, float, float],
        typer.Option(
            "--rect",
            "-r",
            help="Query rectangle X Y WIDTH HEIGHT",
        ),
    ],
) -> None:
    """Classify a rectangle against a shape's outline."""
    target = _resolve(shape, values)
    query_logger: QueryLogger | None = ctx.obj["logger"]
    settings: ShapekitSettings = ctx.obj["settings"]

    # Bare curves are closed by their chord and filled even-odd
    rule = WindingRule.EVEN_ODD if isinstance(target, (QuadCurve, CubicCurve)) else None
    outcome = classify_rect(target, *rect, rule=rule, config=settings.crossing)
    print_header(__version__)
    print_shape(repr(target), target.segment_stream().winding_rule().value)
    print_classification(outcome.value)
    print_answer("contains", outcome is Containment.INSIDE)
    print_answer("intersects", outcome is not Containment.OUTSIDE)
    if query_logger:
        query_logger.log_query(shape, "intersects", outcome.value)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
