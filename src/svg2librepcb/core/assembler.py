"""Polygon assembly from flattened segments.

Groups the segments of one SVG path into closed sub-loops and turns each
into a Polygon in the board frame. SVG's Y axis grows downwards while
LibrePCB's grows upwards, so Y is mirrored here.

Donut shapes (an outer ring with a hole) must already be joined into a
single loop in the source drawing; no ring nesting is detected.
"""

from collections.abc import Iterable

from svg2librepcb.domain import Point, Polygon, Segment, SegmentKind
from svg2librepcb.exceptions import GeometryError

DEFAULT_EPSILON = 1e-6


def _dedupe(points: list[Point], epsilon: float) -> list[Point]:
    """Drop consecutive points closer than epsilon."""
    result: list[Point] = []
    for point in points:
        if result and result[-1].is_close(point, epsilon):
            continue
        result.append(point)
    return result


def _distinct_count(points: list[Point], epsilon: float) -> int:
    """Count points that are not within epsilon of an earlier kept point."""
    kept: list[Point] = []
    for point in points:
        if not any(point.is_close(other, epsilon) for other in kept):
            kept.append(point)
    return len(kept)


def _orientation(a: Point, b: Point, c: Point) -> float:
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def _segments_cross(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Proper intersection test for segments a-b and c-d."""
    d1 = _orientation(c, d, a)
    d2 = _orientation(c, d, b)
    d3 = _orientation(a, b, c)
    d4 = _orientation(a, b, d)
    return d1 * d2 < 0 and d3 * d4 < 0


def is_self_intersecting(vertices: list[Point]) -> bool:
    """Check whether any two non-adjacent edges of a closed loop cross."""
    n = len(vertices)
    edges = [(vertices[i], vertices[(i + 1) % n]) for i in range(n)]
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if _segments_cross(*edges[i], *edges[j]):
                return True
    return False


def _close_loop(
    points: list[Point],
    explicit_close: bool,
    index: int,
    epsilon: float,
    strict_winding: bool,
) -> Polygon | None:
    """Turn the points of one sub-loop into a polygon.

    Returns None for a bare moveto without drawing commands.
    """
    if len(points) <= 1:
        return None

    vertices = _dedupe(points, epsilon)
    if not explicit_close and not vertices[0].is_close(vertices[-1], epsilon):
        raise GeometryError(
            f"Sub-path {index} is not closed: starts at {vertices[0].to_tuple()} "
            f"but ends at {vertices[-1].to_tuple()}"
        )
    if len(vertices) > 1 and vertices[0].is_close(vertices[-1], epsilon):
        vertices.pop()

    # Back-and-forth strokes keep repeated points after the consecutive dedupe
    distinct = _distinct_count(vertices, epsilon)
    if distinct < 3:
        raise GeometryError(
            f"Sub-path {index} has {distinct} distinct vertices, at least 3 are required"
        )

    if strict_winding and is_self_intersecting(vertices):
        raise GeometryError(f"Sub-path {index} intersects itself")

    # 0.0 - y keeps zero coordinates positive
    return Polygon.from_vertices(Point(p.x, 0.0 - p.y) for p in vertices)


def assemble_polygons(
    segments: Iterable[Segment],
    epsilon: float = DEFAULT_EPSILON,
    strict_winding: bool = False,
) -> list[Polygon]:
    """Build one polygon per closed sub-loop of a flattened path.

    A sub-loop starts at a MOVE segment and is closed by a CLOSE segment,
    or implicitly when it ends where it started.

    Args:
        segments: Flattened segments of a single path element
        epsilon: Distance under which points are considered identical
        strict_winding: Also reject self-intersecting loops

    Returns:
        Polygons in the board frame, in drawing order

    Raises:
        GeometryError: If a sub-loop does not close or is degenerate
    """
    polygons: list[Polygon] = []
    loop: list[Point] = []
    index = 0

    def finish(explicit_close: bool) -> None:
        nonlocal index
        polygon = _close_loop(loop, explicit_close, index, epsilon, strict_winding)
        if polygon is not None:
            polygons.append(polygon)
            index += 1

    for segment in segments:
        if segment.kind is SegmentKind.MOVE:
            finish(explicit_close=False)
            loop = [segment.end]
        elif segment.kind is SegmentKind.CLOSE:
            if not loop:
                loop = [segment.start]
            loop.append(segment.end)
            finish(explicit_close=True)
            # Drawing after a close continues from the sub-loop start
            loop = [segment.end]
        else:
            if not loop:
                loop = [segment.start]
            loop.append(segment.end)

    finish(explicit_close=False)
    return polygons


def assemble_paths(
    path_segments: Iterable[Iterable[Segment]],
    epsilon: float = DEFAULT_EPSILON,
    strict_winding: bool = False,
) -> list[Polygon]:
    """Assemble the polygons of several paths, keeping document order."""
    polygons: list[Polygon] = []
    for segments in path_segments:
        polygons.extend(assemble_polygons(segments, epsilon, strict_winding))
    return polygons
