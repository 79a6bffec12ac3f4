"""CLI application entry point for svg2librepcb.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from svg2librepcb import __version__
from svg2librepcb.cli.output import (
    console,
    print_elements,
    print_error,
    print_geometry_info,
    print_header,
    print_input_info,
    print_step,
    print_success,
)
from svg2librepcb.config import build_settings
from svg2librepcb.core import LibraryConverter
from svg2librepcb.exceptions import (
    ConfigurationError,
    InvalidIdentityError,
    LibraryIOError,
    ParseError,
    Svg2LibrePcbError,
)
from svg2librepcb.io import SvgReader

# Create the Typer app
app = typer.Typer(
    name="svg2librepcb",
    help="Convert SVG path artwork into LibrePCB package, symbol, component and device.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svg2librepcb[/bold blue] v{__version__}")
        raise typer.Exit()


def _parse_error_details(error: ParseError) -> str:
    """Show the offending part of the path data with a caret under it."""
    start = max(0, error.position - 20)
    snippet = error.data[start : error.position + 20]
    return f"{snippet}\n  {' ' * (error.position - start)}^"


@app.command()
def convert(
    svgfile: Annotated[
        Path,
        typer.Argument(help="The SVG file to load", show_default=False),
    ],
    outpath: Annotated[
        Path,
        typer.Option("--outpath", help="Output library directory", rich_help_panel="Directories"),
    ],
    name: Annotated[
        str,
        typer.Option("--name", help="Resulting element name", rich_help_panel="Metadata"),
    ],
    author: Annotated[
        str,
        typer.Option("--author", help="Resulting element author", rich_help_panel="Metadata"),
    ],
    description: Annotated[
        str,
        typer.Option(help="Resulting element description", rich_help_panel="Metadata"),
    ] = "",
    version: Annotated[
        str,
        typer.Option("--version", help="Resulting element version", rich_help_panel="Metadata"),
    ] = "0.1.0",
    keywords: Annotated[
        str,
        typer.Option(help="Resulting element keywords", rich_help_panel="Metadata"),
    ] = "",
    uuid_pkg: Annotated[
        str | None,
        typer.Option("--uuid-pkg", help="Package UUID [default: random]", rich_help_panel="UUIDs"),
    ] = None,
    uuid_pkgcat: Annotated[
        str | None,
        typer.Option(
            "--uuid-pkgcat", help="Package category UUID [default: random]", rich_help_panel="UUIDs"
        ),
    ] = None,
    uuid_sym: Annotated[
        str | None,
        typer.Option("--uuid-sym", help="Symbol UUID [default: random]", rich_help_panel="UUIDs"),
    ] = None,
    uuid_cmp: Annotated[
        str | None,
        typer.Option("--uuid-cmp", help="Component UUID [default: random]", rich_help_panel="UUIDs"),
    ] = None,
    uuid_cmpcat: Annotated[
        str | None,
        typer.Option(
            "--uuid-cmpcat",
            help="Component category UUID [default: random]",
            rich_help_panel="UUIDs",
        ),
    ] = None,
    uuid_dev: Annotated[
        str | None,
        typer.Option("--uuid-dev", help="Device UUID [default: random]", rich_help_panel="UUIDs"),
    ] = None,
    layer_copper: Annotated[
        bool,
        typer.Option(help="Generate copper layer footprint", rich_help_panel="Layers"),
    ] = True,
    layer_placement: Annotated[
        bool,
        typer.Option(help="Generate placement layer footprint", rich_help_panel="Layers"),
    ] = True,
    layer_stopmask: Annotated[
        bool,
        typer.Option(help="Generate stop mask layer footprint", rich_help_panel="Layers"),
    ] = True,
    flattening_tolerance: Annotated[
        float,
        typer.Option(help="Flattening tolerance in mm", rich_help_panel="Parameters"),
    ] = 0.15,
    align: Annotated[
        str,
        typer.Option(
            help="Align geometry (none|center|top-left|bottom-left)",
            rich_help_panel="Parameters",
        ),
    ] = "none",
    strict_winding: Annotated[
        bool,
        typer.Option(
            "--strict-winding",
            help="Reject self-intersecting polygons",
            rich_help_panel="Parameters",
        ),
    ] = False,
    _ids: Annotated[  # noqa: ARG001
        list[str] | None,
        typer.Option("--id", hidden=True, help="Passed in by Inkscape, ignored"),
    ] = None,
    echo_svg: Annotated[
        bool,
        typer.Option(
            "--echo-svg",
            help="Print the original SVG to stdout (for Inkscape); implies --quiet",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
    _show_version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--show-version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert the paths of an SVG file into LibrePCB library elements.

    Every <path> element is flattened into polygons. A package with one
    footprint per selected layer, a symbol, a component and a device are
    written into the output library directory.

    Example:
        svg2librepcb logo.svg --outpath MyLibrary.lplib --name Logo --author Me
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    quiet = quiet or echo_svg

    try:
        settings = build_settings(
            name=name,
            author=author,
            version=version,
            description=description,
            keywords=keywords,
            flattening_tolerance=flattening_tolerance,
            align=align.lower(),
            strict_winding=strict_winding,
            layer_copper=layer_copper,
            layer_placement=layer_placement,
            layer_stopmask=layer_stopmask,
            uuid_pkg=uuid_pkg,
            uuid_pkgcat=uuid_pkgcat,
            uuid_sym=uuid_sym,
            uuid_cmp=uuid_cmp,
            uuid_cmpcat=uuid_cmpcat,
            uuid_dev=uuid_dev,
            log_file=log_file,
            log_level=log_level,
        )

        if not settings.layers.selected():
            raise ConfigurationError("layers", "select at least one of copper, placement, stopmask")

        if not quiet:
            print_header(__version__)
            print_step("Converting")

        converter = LibraryConverter(settings, quiet=quiet)
        result, written = converter.convert_file(svgfile, outpath)

        if not quiet:
            print_input_info(str(svgfile), result.path_count, result.segment_count)
            print_step("Geometry")
            print_geometry_info(len(result.polygons), result.vertex_count, result.bounding_box)
            print_step("Elements")
            print_elements(result.bundle, verbose=verbose)
            print_success(outpath, written, converter.stats.duration_seconds)

        # Echo original SVG on stdout for compatibility with Inkscape.
        if echo_svg:
            typer.echo(SvgReader(svgfile).read_text())

    except ParseError as e:
        print_error(str(e), details=_parse_error_details(e))
        raise typer.Exit(code=1)
    except InvalidIdentityError as e:
        print_error(str(e), details="UUIDs must look like 01234567-89ab-cdef-0123-456789abcdef")
        raise typer.Exit(code=1)
    except LibraryIOError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Svg2LibrePcbError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
