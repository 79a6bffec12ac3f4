"""SVG path drawing commands.

Each command kind is its own frozen dataclass carrying only the data it
needs. Coordinates are stored exactly as written in the path data, so a
relative command keeps its offsets until the flattener resolves them
against the current point.
"""

from dataclasses import dataclass

from svg2librepcb.domain.geometry import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new sub-path at ``end`` (``M``/``m``)."""

    end: Point
    relative: bool = False

    letter = "M"


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line to ``end`` (``L``/``l``)."""

    end: Point
    relative: bool = False

    letter = "L"


@dataclass(frozen=True, slots=True)
class HorizontalLineTo:
    """Horizontal line to ``x`` (``H``/``h``)."""

    x: float
    relative: bool = False

    letter = "H"


@dataclass(frozen=True, slots=True)
class VerticalLineTo:
    """Vertical line to ``y`` (``V``/``v``)."""

    y: float
    relative: bool = False

    letter = "V"


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier curve (``C``/``c``)."""

    control1: Point
    control2: Point
    end: Point
    relative: bool = False

    letter = "C"


@dataclass(frozen=True, slots=True)
class SmoothCubicCurveTo:
    """Cubic Bezier whose first control point is reflected (``S``/``s``)."""

    control2: Point
    end: Point
    relative: bool = False

    letter = "S"


@dataclass(frozen=True, slots=True)
class QuadraticCurveTo:
    """Quadratic Bezier curve (``Q``/``q``)."""

    control: Point
    end: Point
    relative: bool = False

    letter = "Q"


@dataclass(frozen=True, slots=True)
class SmoothQuadraticCurveTo:
    """Quadratic Bezier whose control point is reflected (``T``/``t``)."""

    end: Point
    relative: bool = False

    letter = "T"


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Elliptical arc (``A``/``a``).

    Attributes:
        rx: X radius
        ry: Y radius
        rotation: Rotation of the ellipse X axis in degrees
        large_arc: Take the arc spanning more than 180 degrees
        sweep: Draw in the positive-angle direction
        end: End point
    """

    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    end: Point
    relative: bool = False

    letter = "A"


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current sub-path (``Z``/``z``)."""

    relative: bool = False

    letter = "Z"


PathCommand = (
    MoveTo
    | LineTo
    | HorizontalLineTo
    | VerticalLineTo
    | CubicCurveTo
    | SmoothCubicCurveTo
    | QuadraticCurveTo
    | SmoothQuadraticCurveTo
    | ArcTo
    | ClosePath
)
