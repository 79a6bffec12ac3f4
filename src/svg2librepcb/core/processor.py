"""Conversion orchestration for the svg2librepcb pipeline.

This module runs the full conversion for one SVG document:
parse -> flatten -> assemble -> normalize -> allocate UUIDs -> build.

Key components:
- convert_paths: Pure pipeline from path data strings to a LibraryBundle
- LibraryConverter: Orchestrator class adding logging, statistics and file I/O
"""

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from svg2librepcb.config import ConversionSettings
from svg2librepcb.core.assembler import assemble_polygons
from svg2librepcb.core.builder import build_library
from svg2librepcb.core.flattener import flatten_path, validate_tolerance
from svg2librepcb.core.identity import IdentityAllocator
from svg2librepcb.core.normalizer import compute_bounding_box, normalize
from svg2librepcb.core.parser import parse_path
from svg2librepcb.domain import BoundingBox, ElementMetadata, IdentitySlot, LibraryBundle, Polygon
from svg2librepcb.exceptions import GeometryError, Svg2LibrePcbError
from svg2librepcb.io import LibraryWriter, SvgReader
from svg2librepcb.utils import ConversionLogger, ConversionStats, configure_logging

# (path index, segment count, polygon count)
PathCallback = Callable[[int, int, int], None]


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion.

    Attributes:
        bundle: The generated library elements
        polygons: Normalized polygons shared by all footprints and the symbol
        bounding_box: Bounding box of the normalized polygons
        path_count: Number of path elements converted
        segment_count: Number of flattened segments over all paths
    """

    bundle: LibraryBundle
    polygons: tuple[Polygon, ...]
    bounding_box: BoundingBox
    path_count: int
    segment_count: int

    @property
    def vertex_count(self) -> int:
        return sum(len(polygon.vertices) for polygon in self.polygons)


def convert_paths(
    path_data: Sequence[str],
    settings: ConversionSettings,
    allocator: IdentityAllocator | None = None,
    path_callback: PathCallback | None = None,
) -> ConversionResult:
    """Convert path data strings into library elements.

    Any error aborts the conversion before elements are built.

    Args:
        path_data: One ``d`` string per SVG path element, in document order
        settings: Conversion settings
        allocator: UUID allocator (created from settings.uuids if None)
        path_callback: Called after each path is flattened and assembled

    Returns:
        ConversionResult with the element bundle and geometry summary

    Raises:
        ParseError: If a path string is malformed
        GeometryError: If a sub-path is degenerate or nothing drawable was found
        ConfigurationError: If tolerance, layers or metadata are invalid
        InvalidIdentityError: If a supplied UUID is malformed
    """
    geometry = settings.geometry
    tolerance = geometry.source_tolerance()
    validate_tolerance(tolerance)
    if allocator is None:
        allocator = IdentityAllocator(settings.uuids.as_slot_map())

    polygons: list[Polygon] = []
    segment_count = 0
    for index, data in enumerate(path_data):
        commands = parse_path(data)
        segments = flatten_path(commands, tolerance, geometry.max_subdivision_depth)
        path_polygons = assemble_polygons(
            segments, geometry.point_epsilon, geometry.strict_winding
        )
        segment_count += len(segments)
        polygons.extend(path_polygons)
        if path_callback is not None:
            path_callback(index, len(segments), len(path_polygons))

    if not polygons:
        raise GeometryError("No closed paths found in input")

    normalized = normalize(polygons, geometry.align, geometry.scale)
    metadata = ElementMetadata(**settings.metadata.model_dump())
    bundle = build_library(normalized, settings.layers.selected(), allocator, metadata)

    return ConversionResult(
        bundle=bundle,
        polygons=tuple(normalized),
        bounding_box=compute_bounding_box(normalized),
        path_count=len(path_data),
        segment_count=segment_count,
    )


class LibraryConverter:
    """Orchestrates SVG to LibrePCB conversion.

    Manages the complete workflow:
    1. Read path data from the SVG file
    2. Convert it into library elements
    3. Write the elements into the library directory
    4. Log progress and collect statistics

    Example:
        settings = build_settings(name="Logo", author="Me")
        converter = LibraryConverter(settings)
        result, written = converter.convert_file(
            svg_path=Path("logo.svg"),
            output_dir=Path("MyLibrary.lplib"),
        )
    """

    def __init__(self, settings: ConversionSettings, quiet: bool = False) -> None:
        """Initialize converter with configuration.

        Args:
            settings: Conversion settings
            quiet: Suppress console log output except errors
        """
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        self.conversion_logger = ConversionLogger(self.logger)

    def convert(self, path_data: Sequence[str], source: str = "<paths>") -> ConversionResult:
        """Convert path data, logging each pipeline stage.

        Raises:
            Svg2LibrePcbError: Any pipeline error, after it has been logged
        """
        stats = self.conversion_logger.stats
        stats.start_time = time.time()
        self.logger.info("Conversion started", source=source, paths=len(path_data))

        try:
            allocator = IdentityAllocator(self.settings.uuids.as_slot_map())
            result = convert_paths(
                path_data,
                self.settings,
                allocator=allocator,
                path_callback=self.conversion_logger.log_path_flattened,
            )
        except Svg2LibrePcbError as e:
            self.conversion_logger.log_conversion_error(source, e)
            raise
        finally:
            stats.end_time = time.time()

        bbox = result.bounding_box
        self.conversion_logger.log_geometry(
            polygons=len(result.polygons),
            vertices=result.vertex_count,
            width=bbox.width,
            height=bbox.height,
        )
        self.conversion_logger.log_footprints(
            [footprint.variant.layer_name for footprint in result.bundle.package.footprints]
        )
        bundle = result.bundle
        for slot, element in (
            (IdentitySlot.PACKAGE, bundle.package),
            (IdentitySlot.SYMBOL, bundle.symbol),
            (IdentitySlot.COMPONENT, bundle.component),
            (IdentitySlot.DEVICE, bundle.device),
        ):
            self.conversion_logger.log_element_built(
                slot.value, element.uuid, allocator.is_supplied(slot)
            )

        return result

    def convert_file(
        self, svg_path: Path, output_dir: Path
    ) -> tuple[ConversionResult, list[Path]]:
        """Read an SVG file, convert it and write the library elements.

        The output directory is checked before any conversion work.

        Returns:
            Tuple of the conversion result and the written document paths

        Raises:
            Svg2LibrePcbError: On read, conversion or write failure
        """
        writer = LibraryWriter(output_dir)
        try:
            writer.validate()
            path_data = SvgReader(svg_path).read_path_data()
        except Svg2LibrePcbError as e:
            self.conversion_logger.log_conversion_error(str(svg_path), e)
            raise

        result = self.convert(path_data, source=str(svg_path))

        try:
            written = writer.write(result.bundle)
        except Svg2LibrePcbError as e:
            self.conversion_logger.log_conversion_error(str(output_dir), e)
            raise
        for path in written:
            self.conversion_logger.log_element_written(path)

        self.logger.info(
            "Conversion complete",
            source=str(svg_path),
            elements=len(written),
            duration_s=round(self.stats.duration_seconds, 3),
        )
        return result, written

    @property
    def stats(self) -> ConversionStats:
        """Statistics of conversions run by this converter."""
        return self.conversion_logger.stats
