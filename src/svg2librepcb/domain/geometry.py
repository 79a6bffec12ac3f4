"""Core geometric types for polygon representation.

This module defines the fundamental geometric types used throughout svg2librepcb:
- Point: A 2D point
- SegmentKind: Enum for the origin of a flattened segment
- Segment: A straight edge produced by curve flattening
- BoundingBox: Axis-aligned bounds of a set of polygons
- Polygon: A closed loop of points
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: "Point", epsilon: float) -> bool:
        """Check whether both coordinates are within epsilon of another point."""
        return abs(self.x - other.x) <= epsilon and abs(self.y - other.y) <= epsilon

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


class SegmentKind(Enum):
    """Which path command produced a segment.

    - MOVE: Pen jump that starts a new sub-loop
    - LINE: Straight drawing command
    - CURVE: Piece of a flattened curve or arc
    - CLOSE: Closing edge back to the sub-loop start
    """

    MOVE = auto()
    LINE = auto()
    CURVE = auto()
    CLOSE = auto()


@dataclass(frozen=True, slots=True)
class Segment:
    """A straight edge between two points.

    Attributes:
        start: Start point in source units
        end: End point in source units
        kind: Command family that produced the segment
    """

    start: Point
    end: Point
    kind: SegmentKind = SegmentKind.LINE

    def length(self) -> float:
        """Length of the segment."""
        return self.start.distance_to(self.end)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Smallest X coordinate
        min_y: Smallest Y coordinate
        max_x: Largest X coordinate
        max_y: Largest Y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box containing both boxes."""
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    @classmethod
    def of_points(cls, points: Iterable[Point]) -> "BoundingBox":
        """Bounding box of a non-empty point collection.

        Raises:
            ValueError: If no points are given
        """
        xs: list[float] = []
        ys: list[float] = []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)
        if not xs:
            raise ValueError("Cannot compute bounding box of an empty point set")
        return cls(min(xs), min(ys), max(xs), max(ys))

    @classmethod
    def of_polygons(cls, polygons: Iterable["Polygon"]) -> "BoundingBox":
        """Aggregate bounding box of several polygons."""
        return cls.of_points(p for polygon in polygons for p in polygon.points)


@dataclass(frozen=True)
class Polygon:
    """A closed loop of points.

    The first and last point coincide, so ``points`` always holds one
    more entry than ``vertices``.

    Attributes:
        points: Points of the loop, including the repeated closing point
    """

    points: tuple[Point, ...]

    @classmethod
    def from_vertices(cls, vertices: Iterable[Point]) -> "Polygon":
        """Create a closed polygon from its distinct vertices."""
        vertex_list = list(vertices)
        if not vertex_list:
            raise ValueError("A polygon needs at least one vertex")
        return cls(points=(*vertex_list, vertex_list[0]))

    @property
    def vertices(self) -> tuple[Point, ...]:
        """Distinct vertices, without the repeated closing point."""
        return self.points[:-1]

    def is_closed(self, epsilon: float = 1e-6) -> bool:
        return self.points[0].is_close(self.points[-1], epsilon)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.of_points(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        Positive area means counter-clockwise winding in a Y-up frame.
        """
        vertices = self.vertices
        n = len(vertices)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += vertices[i].x * vertices[j].y
            area -= vertices[j].x * vertices[i].y
        return area / 2.0

    def is_clockwise(self) -> bool:
        return self.signed_area() < 0

    def translated(self, dx: float, dy: float) -> "Polygon":
        """Return a copy moved by (dx, dy)."""
        return Polygon(tuple(Point(p.x + dx, p.y + dy) for p in self.points))

    def scaled(self, factor: float) -> "Polygon":
        """Return a copy with every coordinate multiplied by factor."""
        if factor == 1.0:
            return self
        return Polygon(tuple(Point(p.x * factor, p.y * factor) for p in self.points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary."""
        return cls(points=tuple(Point.from_dict(p) for p in data["points"]))
