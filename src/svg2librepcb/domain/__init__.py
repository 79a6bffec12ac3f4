"""Domain models for svg2librepcb.

This module contains the core domain models representing path commands,
flattened geometry and the LibrePCB library elements. All models are
designed to be:

- Immutable (using frozen dataclasses)
- Free of I/O and of any serialization format details

Key classes:
- Point, Segment, Polygon, BoundingBox: Geometry
- MoveTo, LineTo, CubicCurveTo, ...: Path drawing commands
- Package, Symbol, Component, Device: Library elements
- LibraryBundle: The cross-referenced element graph of one conversion
"""

from svg2librepcb.domain.geometry import BoundingBox, Point, Polygon, Segment, SegmentKind
from svg2librepcb.domain.library import (
    SYMBOL_LAYER,
    Component,
    Device,
    ElementMetadata,
    Footprint,
    FootprintPolygon,
    IdentitySlot,
    LayerVariant,
    LibraryBundle,
    LibraryElement,
    Package,
    Symbol,
)
from svg2librepcb.domain.path import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    SmoothCubicCurveTo,
    SmoothQuadraticCurveTo,
    VerticalLineTo,
)

__all__: list[str] = [
    # Enums
    "IdentitySlot",
    "LayerVariant",
    "SegmentKind",
    # Geometry
    "BoundingBox",
    "Point",
    "Polygon",
    "Segment",
    # Path commands
    "ArcTo",
    "ClosePath",
    "CubicCurveTo",
    "HorizontalLineTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadraticCurveTo",
    "SmoothCubicCurveTo",
    "SmoothQuadraticCurveTo",
    "VerticalLineTo",
    # Library elements
    "SYMBOL_LAYER",
    "Component",
    "Device",
    "ElementMetadata",
    "Footprint",
    "FootprintPolygon",
    "LibraryBundle",
    "LibraryElement",
    "Package",
    "Symbol",
]
