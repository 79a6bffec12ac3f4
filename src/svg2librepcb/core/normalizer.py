"""Geometry normalization.

Moves the polygon set so that the requested anchor of its aggregate
bounding box sits at the origin, then converts to millimetres.
"""

from collections.abc import Sequence

from svg2librepcb.config import MM_PER_USER_UNIT, Alignment
from svg2librepcb.domain import BoundingBox, Polygon
from svg2librepcb.exceptions import GeometryError


def compute_bounding_box(polygons: Sequence[Polygon]) -> BoundingBox:
    """Aggregate bounding box of all polygons.

    Raises:
        GeometryError: If there are no polygons
    """
    if not polygons:
        raise GeometryError("Cannot compute bounding box: no polygons")
    return BoundingBox.of_polygons(polygons)


def alignment_offset(bbox: BoundingBox, align: Alignment) -> tuple[float, float]:
    """Translation that moves the alignment anchor to the origin.

    Coordinates are in the board frame (Y up), so the bottom edge is min_y.
    """
    if align is Alignment.NONE:
        return (0.0, 0.0)
    if align is Alignment.BOTTOM_LEFT:
        return (-bbox.min_x, -bbox.min_y)
    if align is Alignment.TOP_LEFT:
        return (-bbox.min_x, -bbox.max_y)
    if align is Alignment.CENTER:
        center = bbox.center
        return (-center.x, -center.y)
    raise ValueError(f"Unknown alignment: {align!r}")


def normalize(
    polygons: Sequence[Polygon],
    align: Alignment,
    scale: float = MM_PER_USER_UNIT,
) -> list[Polygon]:
    """Align polygons and convert them to output units.

    The bounding box is always recomputed from the given polygons, so
    normalizing already-aligned geometry with the same mode changes nothing.

    Args:
        polygons: Polygons in source units, board frame
        align: Which bounding box anchor to move to the origin
        scale: Output units per source unit

    Returns:
        New list of normalized polygons (empty if no polygons were given)
    """
    if not polygons:
        return []

    dx, dy = alignment_offset(compute_bounding_box(polygons), align)
    if dx == 0 and dy == 0:
        return [polygon.scaled(scale) for polygon in polygons]
    return [polygon.translated(dx, dy).scaled(scale) for polygon in polygons]
