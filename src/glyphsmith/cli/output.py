"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
with formatted messages and summaries.
"""

from rich.console import Console
from rich.text import Text

from glyphsmith.domain import StyleKind

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
    console.print(f"\n[bold]Glyphsmith[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_sketch_info(sketch_path: str, stroke_count: int, point_count: int) -> None:
    """Print sketch information.

    Args:
        sketch_path: Path to the sketch file
        stroke_count: Number of strokes in the sketch
        point_count: Total sampled points across strokes
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(sketch_path)
    console.print(line)
    console.print(f"  {stroke_count} strokes {SYM_DOT} {point_count:,} points")


def print_styles() -> None:
    """Print the available styles with their parameters."""
    console.print("\n[bold]Styles[/bold]\n")
    for style in StyleKind:
        console.print(
            f"  {style.value:<10} tolerance {style.tolerance:>4.0f} "
            f"{SYM_DOT} stroke width {style.stroke_width}"
        )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    rendered: int,
    skipped: int,
    reduction: float,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total stylization time in seconds
        rendered: Number of strokes rendered as paths
        skipped: Number of degenerate strokes dropped
        reduction: Fraction of points removed by simplification
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(
        f"  {rendered} paths {SYM_DOT} {skipped} skipped {SYM_DOT} "
        f"{reduction:.0%} points simplified away"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
