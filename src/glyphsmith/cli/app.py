"""CLI application entry point for glyphsmith.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated, get_args

import typer
from pydantic import ValidationError

from glyphsmith import __version__
from glyphsmith.cli.output import (
    SYM_DOT,
    SYM_OK,
    console,
    print_error,
    print_header,
    print_sketch_info,
    print_step,
    print_styles,
    print_success,
)
from glyphsmith.config import GlyphsmithSettings, LoggingConfig, LogLevel, RenderConfig
from glyphsmith.core import GlyphStylizer
from glyphsmith.domain import Sketch, StyleKind
from glyphsmith.exceptions import GlyphSaveError, GlyphsmithError, SketchLoadError
from glyphsmith.io import GlyphWriter, SketchReader
from glyphsmith.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphsmith",
    help="Turn hand-drawn glyph sketches into stylized SVG glyphs.",
    add_completion=False,
    no_args_is_help=True,
)

STYLE_NAMES = "|".join(style.value for style in StyleKind)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphsmith[/bold blue] v{__version__}")
        raise typer.Exit()


def list_styles_callback(value: bool) -> None:
    """Print available styles and exit."""
    if value:
        print_styles()
        raise typer.Exit()


@app.command()
def stylize(
    sketch_file: Annotated[
        Path,
        typer.Argument(
            help="Path to sketch JSON file",
            show_default=False,
        ),
    ],
    style: Annotated[
        str,
        typer.Option(
            "--style",
            "-s",
            help=f"Glyph style ({STYLE_NAMES})",
        ),
    ] = StyleKind.FLOWING.value,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-{style}.svg)",
        ),
    ] = None,
    stroke_color: Annotated[
        str,
        typer.Option(
            "--stroke-color",
            help="Stroke paint for glyph paths",
        ),
    ] = "currentColor",
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show how each stroke simplifies without writing a glyph",
        ),
    ] = False,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _list_styles: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--list-styles",
            help="List available styles and exit",
            callback=list_styles_callback,
            is_eager=True,
        ),
    ] = None,
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
    """Stylize a hand-drawn glyph sketch into an SVG glyph.

    Every stroke is simplified and redrawn with the chosen style's geometric
    rule; the result is a 100x100 SVG glyph.

    Example:
        glyphsmith ka.json --style runic

    This will create ka-runic.svg next to the sketch.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not sketch_file.exists():
        print_error(
            f"Input file not found: {sketch_file}",
            details=f"The file '{sketch_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not sketch_file.is_file():
        print_error(
            f"Input path is not a file: {sketch_file}",
            details="Please provide a path to a sketch JSON file.",
        )
        raise typer.Exit(code=1)

    # Validate style argument
    try:
        style_kind = StyleKind(style.lower())
    except ValueError:
        print_error(
            f"Invalid style: {style}",
            details=f"Valid values: {', '.join(s.value for s in StyleKind)}",
        )
        raise typer.Exit(code=1)

    # Validate log level argument
    log_levels = get_args(LogLevel)
    if log_level.upper() not in log_levels:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(log_levels)}",
        )
        raise typer.Exit(code=1)

    # Create settings from CLI arguments
    try:
        settings = GlyphsmithSettings(
            render=RenderConfig(stroke_color=stroke_color),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level.upper() if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        first = e.errors()[0]
        print_error(
            "Invalid options",
            details=f"{'.'.join(str(part) for part in first['loc'])}: {first['msg']}",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except OSError as e:
        print_error(f"Could not open log file: {e}")
        raise typer.Exit(code=1)

    stylizer = GlyphStylizer(settings, logger=logger)

    try:
        if not quiet:
            print_step("Loading sketch")

        sketch = SketchReader(sketch_file).load()

        if not quiet:
            print_sketch_info(
                sketch_path=str(sketch_file),
                stroke_count=len(sketch),
                point_count=sketch.point_count,
            )

        if dry_run:
            _handle_dry_run(stylizer, sketch, style_kind, quiet)
            raise typer.Exit(code=0)

        if not quiet:
            print_step(f"Stylizing ({style_kind.value})")

        result = stylizer.stylize(sketch, style_kind)

        if verbose:
            for idx, path_data in enumerate(result.document.paths):
                console.print(f"  {idx} {SYM_DOT} {path_data}", markup=False)

        output_path = output or GlyphWriter.get_output_path(sketch_file, style_kind)
        GlyphWriter(stroke_color=settings.render.stroke_color).write(result.document, output_path)

        if not quiet:
            print_success(
                output_path=str(output_path),
                total_time_s=result.stats.duration_seconds,
                rendered=result.stats.rendered_count,
                skipped=result.stats.skipped_count,
                reduction=result.stats.reduction,
            )

    except SketchLoadError as e:
        print_error(f"Could not load sketch: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphSaveError as e:
        print_error(f"Could not save glyph: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphsmithError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_dry_run(
    stylizer: GlyphStylizer, sketch: Sketch, style: StyleKind, quiet: bool
) -> None:
    """Handle --dry-run mode.

    Args:
        stylizer: Configured stylizer
        sketch: Loaded sketch
        style: Style whose tolerance to apply
        quiet: Suppress output
    """
    previews = stylizer.preview(sketch, style)
    if quiet:
        return

    console.print("\n[bold]Analysis[/bold]\n")
    console.print(f"  Style                 {style.value}")
    console.print(f"  Tolerance             {style.tolerance:g}")
    console.print(f"  Stroke width          {style.stroke_width}")
    console.print(f"  Drawable strokes      {sum(1 for p in previews if not p.degenerate)}")

    if previews:
        console.print("\n[bold]Strokes[/bold]")
        for preview in previews:
            if preview.degenerate:
                console.print(f"  {preview.index}: {preview.input_points} point(s), skipped")
            else:
                console.print(
                    f"  {preview.index}: {preview.input_points} -> "
                    f"{preview.simplified_points} points"
                )

    console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] - no files written")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
