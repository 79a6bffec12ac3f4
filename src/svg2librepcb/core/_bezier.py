"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for flatten_path.
Not intended for public use.
"""

import math

from svg2librepcb.domain import Point

CubicPoints = tuple[Point, Point, Point, Point]
QuadraticPoints = tuple[Point, Point, Point]


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def distance_to_segment(point: Point, a: Point, b: Point) -> float:
    """Distance from point to the closed segment a-b."""
    dx = b.x - a.x
    dy = b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(point.x - a.x, point.y - a.y)

    t = ((point.x - a.x) * dx + (point.y - a.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(point.x - (a.x + t * dx), point.y - (a.y + t * dy))


def flatten_quadratic(
    points: QuadraticPoints, tolerance: float, max_depth: int
) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    A piece is flat once its control point lies within tolerance of the
    chord. The curve stays inside its control triangle, so the chord is
    then within tolerance of the curve.

    Args:
        points: Control points (p0, p1, p2)
        tolerance: Maximum distance from true curve
        max_depth: Subdivision depth at which a piece is accepted regardless

    Returns:
        List of points approximating the curve, starting with p0
    """
    result = [points[0]]
    stack: list[tuple[QuadraticPoints, int]] = [(points, 0)]

    while stack:
        (p0, p1, p2), depth = stack.pop()

        if depth >= max_depth or distance_to_segment(p1, p0, p2) <= tolerance:
            result.append(p2)
            continue

        # Subdivide at t=0.5
        q1 = _midpoint(p0, p1)
        r1 = _midpoint(p1, p2)
        mid = _midpoint(q1, r1)

        # Right half goes on the stack first so the left half is emitted first
        stack.append(((mid, r1, p2), depth + 1))
        stack.append(((p0, q1, mid), depth + 1))

    return result


def flatten_cubic(points: CubicPoints, tolerance: float, max_depth: int) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision, with an explicit work
    stack instead of recursion.

    Args:
        points: Control points (p0, p1, p2, p3)
        tolerance: Maximum distance from true curve
        max_depth: Subdivision depth at which a piece is accepted regardless

    Returns:
        List of points approximating the curve, starting with p0
    """
    result = [points[0]]
    stack: list[tuple[CubicPoints, int]] = [(points, 0)]

    while stack:
        (p0, p1, p2, p3), depth = stack.pop()

        flatness = max(
            distance_to_segment(p1, p0, p3),
            distance_to_segment(p2, p0, p3),
        )
        if depth >= max_depth or flatness <= tolerance:
            result.append(p3)
            continue

        # First level
        q1 = _midpoint(p0, p1)
        q2 = _midpoint(p1, p2)
        q3 = _midpoint(p2, p3)

        # Second level
        r1 = _midpoint(q1, q2)
        r2 = _midpoint(q2, q3)

        # Third level (midpoint)
        mid = _midpoint(r1, r2)

        stack.append(((mid, r2, q3, p3), depth + 1))
        stack.append(((p0, q1, r1, mid), depth + 1))

    return result


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


def arc_to_cubics(
    start: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
) -> list[CubicPoints]:
    """Approximate an SVG elliptical arc by cubic Bezier pieces.

    Converts from endpoint to center parameterization
    (http://www.w3.org/TR/SVG/implnote.html#ArcImplementationNotes) and
    emits one cubic per quarter turn or less.

    Returns:
        Cubic control point tuples; empty when start and end coincide.
        A zero radius yields a single straight cubic.
    """
    if start == end:
        return []

    rx = abs(rx)
    ry = abs(ry)
    if rx == 0 or ry == 0:
        return [(start, start, end, end)]

    phi = math.radians(rotation)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    dx = (start.x - end.x) / 2
    dy = (start.y - end.y) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    # Correct out of range radii
    radius_check = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if radius_check > 1:
        scale = math.sqrt(radius_check)
        rx *= scale
        ry *= scale

    rx_sq = rx * rx
    ry_sq = ry * ry
    t1 = rx_sq * y1p * y1p
    t2 = ry_sq * x1p * x1p
    coef = math.sqrt(max(0.0, (rx_sq * ry_sq - t1 - t2) / (t1 + t2)))
    if large_arc == sweep:
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    cx = cos_phi * cxp - sin_phi * cyp + (start.x + end.x) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (start.y + end.y) / 2

    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry
    theta = _vector_angle(1.0, 0.0, ux, uy)
    delta_total = _vector_angle(ux, uy, vx, vy)
    if not sweep and delta_total > 0:
        delta_total -= 2 * math.pi
    elif sweep and delta_total < 0:
        delta_total += 2 * math.pi

    count = max(1, math.ceil(abs(delta_total) / (math.pi / 2) - 1e-9))
    delta = delta_total / count
    k = 4.0 / 3.0 * math.tan(delta / 4)

    def on_ellipse(u: float, v: float) -> Point:
        return Point(
            cx + rx * u * cos_phi - ry * v * sin_phi,
            cy + rx * u * sin_phi + ry * v * cos_phi,
        )

    pieces: list[CubicPoints] = []
    previous = start
    for i in range(count):
        cos1, sin1 = math.cos(theta), math.sin(theta)
        theta += delta
        cos2, sin2 = math.cos(theta), math.sin(theta)

        control1 = on_ellipse(cos1 - k * sin1, sin1 + k * cos1)
        control2 = on_ellipse(cos2 + k * sin2, sin2 - k * cos2)
        piece_end = end if i == count - 1 else on_ellipse(cos2, sin2)

        pieces.append((previous, control1, control2, piece_end))
        previous = piece_end

    return pieces
