"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
with formatted step, summary and error messages.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from svg2librepcb.domain import BoundingBox, LibraryBundle

console = Console()
error_console = Console(stderr=True)

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
    console.print(f"\n[bold]svg2librepcb[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_input_info(svg_path: str, path_count: int, segment_count: int) -> None:
    """Print information about the converted input.

    Args:
        svg_path: Path to the SVG file
        path_count: Number of path elements found
        segment_count: Number of flattened segments
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(svg_path)
    console.print(line)
    console.print(f"  {path_count:,} paths {SYM_DOT} {segment_count:,} segments")


def print_geometry_info(polygon_count: int, vertex_count: int, bbox: BoundingBox) -> None:
    """Print normalized geometry summary.

    Args:
        polygon_count: Number of polygons
        vertex_count: Total number of vertices
        bbox: Bounding box in millimetres
    """
    console.print(f"  {polygon_count:,} polygons {SYM_DOT} {vertex_count:,} vertices")
    console.print(
        f"  {bbox.width:.3f} × {bbox.height:.3f} mm "
        f"{SYM_DOT} x {bbox.min_x:.3f}..{bbox.max_x:.3f} "
        f"{SYM_DOT} y {bbox.min_y:.3f}..{bbox.max_y:.3f}"
    )


def print_elements(bundle: LibraryBundle, verbose: bool) -> None:
    """Print the generated elements and their UUIDs.

    Args:
        bundle: Generated element bundle
        verbose: Also list footprint layers
    """
    console.print(f"  Package    {bundle.package.uuid}")
    if verbose:
        for footprint in bundle.package.footprints:
            console.print(f"    {SYM_DOT} {footprint.name} ({footprint.variant.layer_name})")
    console.print(f"  Symbol     {bundle.symbol.uuid}")
    console.print(f"  Component  {bundle.component.uuid}")
    console.print(f"  Device     {bundle.device.uuid}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_dir: Path, written: list[Path], total_time_s: float) -> None:
    """Print success message with summary.

    Args:
        output_dir: Library directory
        written: Paths of written element documents
        total_time_s: Total conversion time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(str(output_dir), style="bold")
    console.print(line)
    console.print(f"  {len(written)} elements written")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message to stderr.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    error_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        error_console.print(f"  {escape(details)}")
