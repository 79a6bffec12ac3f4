"""Core conversion algorithms for svg2librepcb.

This module contains the conversion pipeline:

- Path parsing (SVG path data to drawing commands)
- Curve flattening (Bezier curves and arcs to straight segments)
- Polygon assembly (segments to closed polygons)
- Geometry normalization (alignment and unit conversion)
- UUID allocation (caller overrides and generated UUIDs)
- Library element building (package, symbol, component, device)

All pipeline functions are pure: no I/O, no logging, no global state.
Only LibraryConverter reads files, writes files and logs.

Key functions:
- parse_path / serialize_path: Path data <-> commands
- flatten_path: Commands to segments within a tolerance
- assemble_polygons: Segments to polygons
- normalize: Align and scale polygons
- build_library: Assemble the element graph
- convert_paths: The whole pipeline

Key classes:
- IdentityAllocator: One UUID per element slot
- LibraryConverter: Orchestrates a file-to-library conversion
"""

from svg2librepcb.core.assembler import assemble_paths, assemble_polygons
from svg2librepcb.core.builder import build_library
from svg2librepcb.core.flattener import flatten_path
from svg2librepcb.core.identity import IdentityAllocator, validate_identity
from svg2librepcb.core.normalizer import alignment_offset, compute_bounding_box, normalize
from svg2librepcb.core.parser import parse_path, serialize_path
from svg2librepcb.core.processor import ConversionResult, LibraryConverter, convert_paths

__all__ = [
    # Classes
    "ConversionResult",
    "IdentityAllocator",
    "LibraryConverter",
    # Pipeline functions
    "alignment_offset",
    "assemble_paths",
    "assemble_polygons",
    "build_library",
    "compute_bounding_box",
    "convert_paths",
    "flatten_path",
    "normalize",
    "parse_path",
    "serialize_path",
    "validate_identity",
]
