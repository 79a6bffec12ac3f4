"""Curve flattening for parsed path commands.

Resolves relative and shorthand commands against the current point and
replaces every curve with straight segments that stay within a flatness
tolerance of the true curve.
"""

import math
from collections.abc import Iterable

from svg2librepcb.core._bezier import arc_to_cubics, flatten_cubic, flatten_quadratic
from svg2librepcb.domain import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadraticCurveTo,
    Segment,
    SegmentKind,
    SmoothCubicCurveTo,
    SmoothQuadraticCurveTo,
    VerticalLineTo,
)
from svg2librepcb.exceptions import ConfigurationError

DEFAULT_TOLERANCE = 0.15
DEFAULT_MAX_DEPTH = 16


def _resolve(current: Point, point: Point, relative: bool) -> Point:
    if relative:
        return Point(current.x + point.x, current.y + point.y)
    return point


def _reflect(control: Point | None, current: Point) -> Point:
    """Reflect the previous control point through the current point."""
    if control is None:
        return current
    return Point(2 * current.x - control.x, 2 * current.y - control.y)


def _curve_segments(points: list[Point]) -> Iterable[Segment]:
    for start, end in zip(points, points[1:]):
        yield Segment(start, end, SegmentKind.CURVE)


def validate_tolerance(tolerance: float) -> None:
    """Reject tolerances that would never terminate subdivision.

    Raises:
        ConfigurationError: If tolerance is not a positive finite number
    """
    if not math.isfinite(tolerance) or tolerance <= 0:
        raise ConfigurationError(
            "flattening_tolerance", f"must be a positive number, got {tolerance}"
        )


def flatten_path(
    commands: Iterable[PathCommand],
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Segment]:
    """Flatten path commands into straight segments.

    Straight commands yield exactly one segment each. Curves and arcs
    yield one or more CURVE segments whose deviation from the true curve
    does not exceed tolerance (unless max_depth is reached first).

    Args:
        commands: Parsed path commands, starting with a MoveTo
        tolerance: Maximum deviation in source units
        max_depth: Hard cap on subdivision depth per curve

    Returns:
        Segments in drawing order, in absolute source coordinates

    Raises:
        ConfigurationError: If tolerance is not positive
    """
    validate_tolerance(tolerance)

    segments: list[Segment] = []
    current = Point(0.0, 0.0)
    subpath_start = current
    # Control points of the previous command, for S and T reflection
    cubic_control: Point | None = None
    quad_control: Point | None = None

    for command in commands:
        next_cubic: Point | None = None
        next_quad: Point | None = None

        if isinstance(command, MoveTo):
            target = _resolve(current, command.end, command.relative)
            segments.append(Segment(current, target, SegmentKind.MOVE))
            current = subpath_start = target

        elif isinstance(command, LineTo):
            target = _resolve(current, command.end, command.relative)
            segments.append(Segment(current, target, SegmentKind.LINE))
            current = target

        elif isinstance(command, HorizontalLineTo):
            x = current.x + command.x if command.relative else command.x
            target = Point(x, current.y)
            segments.append(Segment(current, target, SegmentKind.LINE))
            current = target

        elif isinstance(command, VerticalLineTo):
            y = current.y + command.y if command.relative else command.y
            target = Point(current.x, y)
            segments.append(Segment(current, target, SegmentKind.LINE))
            current = target

        elif isinstance(command, (CubicCurveTo, SmoothCubicCurveTo)):
            if isinstance(command, CubicCurveTo):
                control1 = _resolve(current, command.control1, command.relative)
            else:
                control1 = _reflect(cubic_control, current)
            control2 = _resolve(current, command.control2, command.relative)
            target = _resolve(current, command.end, command.relative)
            points = flatten_cubic((current, control1, control2, target), tolerance, max_depth)
            segments.extend(_curve_segments(points))
            next_cubic = control2
            current = target

        elif isinstance(command, (QuadraticCurveTo, SmoothQuadraticCurveTo)):
            if isinstance(command, QuadraticCurveTo):
                control = _resolve(current, command.control, command.relative)
            else:
                control = _reflect(quad_control, current)
            target = _resolve(current, command.end, command.relative)
            points = flatten_quadratic((current, control, target), tolerance, max_depth)
            segments.extend(_curve_segments(points))
            next_quad = control
            current = target

        elif isinstance(command, ArcTo):
            target = _resolve(current, command.end, command.relative)
            pieces = arc_to_cubics(
                current,
                command.rx,
                command.ry,
                command.rotation,
                command.large_arc,
                command.sweep,
                target,
            )
            for piece in pieces:
                segments.extend(_curve_segments(flatten_cubic(piece, tolerance, max_depth)))
            current = target

        elif isinstance(command, ClosePath):
            segments.append(Segment(current, subpath_start, SegmentKind.CLOSE))
            current = subpath_start

        else:
            raise TypeError(f"Unknown path command: {command!r}")

        cubic_control = next_cubic
        quad_control = next_quad

    return segments
