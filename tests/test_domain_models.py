"""Tests for domain models to verify they work correctly."""

from datetime import datetime, timezone

import pytest

from svg2librepcb.domain import (
    BoundingBox,
    ClosePath,
    Component,
    Device,
    ElementMetadata,
    LayerVariant,
    LibraryBundle,
    LineTo,
    MoveTo,
    Package,
    Point,
    Polygon,
    Segment,
    SegmentKind,
    Symbol,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        assert Point(1.5, -2.0).to_tuple() == (1.5, -2.0)

    def test_point_serialization(self) -> None:
        p1 = Point(3.0, 4.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_distance_and_closeness(self) -> None:
        a = Point(0, 0)
        b = Point(3, 4)
        assert a.distance_to(b) == 5.0
        assert a.is_close(Point(1e-7, -1e-7), 1e-6)
        assert not a.is_close(Point(1e-5, 0), 1e-6)


class TestSegment:
    """Tests for Segment class."""

    def test_default_kind_is_line(self) -> None:
        segment = Segment(Point(0, 0), Point(3, 4))
        assert segment.kind is SegmentKind.LINE
        assert segment.length() == 5.0


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_dimensions(self) -> None:
        bbox = BoundingBox(-1.0, 2.0, 3.0, 10.0)
        assert bbox.width == 4.0
        assert bbox.height == 8.0
        assert bbox.center == Point(1.0, 6.0)

    def test_union(self) -> None:
        a = BoundingBox(0, 0, 1, 1)
        b = BoundingBox(-1, 0.5, 0.5, 2)
        assert a.union(b) == BoundingBox(-1, 0, 1, 2)

    def test_of_points_empty(self) -> None:
        with pytest.raises(ValueError):
            BoundingBox.of_points([])

    def test_of_polygons(self) -> None:
        polygons = [
            Polygon.from_vertices([Point(0, 0), Point(1, 0), Point(1, 1)]),
            Polygon.from_vertices([Point(5, 5), Point(6, 5), Point(6, 7)]),
        ]
        assert BoundingBox.of_polygons(polygons) == BoundingBox(0, 0, 6, 7)


class TestPolygon:
    """Tests for Polygon class."""

    def test_from_vertices_closes_loop(self) -> None:
        polygon = Polygon.from_vertices([Point(0, 0), Point(10, 0), Point(10, 10)])
        assert len(polygon.points) == 4
        assert polygon.points[0] == polygon.points[-1]
        assert len(polygon.vertices) == 3
        assert polygon.is_closed()

    def test_from_vertices_empty(self) -> None:
        with pytest.raises(ValueError):
            Polygon.from_vertices([])

    def test_signed_area_counterclockwise(self) -> None:
        polygon = Polygon.from_vertices([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])
        assert polygon.signed_area() == pytest.approx(100.0)
        assert not polygon.is_clockwise()

    def test_signed_area_clockwise(self) -> None:
        polygon = Polygon.from_vertices([Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0)])
        assert polygon.signed_area() == pytest.approx(-100.0)
        assert polygon.is_clockwise()

    def test_translated(self) -> None:
        polygon = Polygon.from_vertices([Point(0, 0), Point(1, 0), Point(1, 1)])
        moved = polygon.translated(2, -3)
        assert moved.vertices == (Point(2, -3), Point(3, -3), Point(3, -2))
        assert polygon.vertices[0] == Point(0, 0)

    def test_scaled(self) -> None:
        polygon = Polygon.from_vertices([Point(0, 0), Point(1, 0), Point(1, 2)])
        assert polygon.scaled(1.0) is polygon
        assert polygon.scaled(2.0).vertices == (Point(0, 0), Point(2, 0), Point(2, 4))

    def test_polygon_serialization(self) -> None:
        polygon = Polygon.from_vertices([Point(0, 0), Point(1, 0), Point(1, 1)])
        assert Polygon.from_dict(polygon.to_dict()) == polygon


class TestPathCommands:
    """Tests for path command types."""

    def test_command_letters(self) -> None:
        assert MoveTo(Point(0, 0)).letter == "M"
        assert LineTo(Point(0, 0), relative=True).letter == "L"
        assert ClosePath().letter == "Z"

    def test_commands_compare_by_value(self) -> None:
        assert LineTo(Point(1, 2)) == LineTo(Point(1, 2))
        assert LineTo(Point(1, 2)) != LineTo(Point(1, 2), relative=True)


class TestLayerVariant:
    """Tests for LayerVariant enum."""

    @pytest.mark.parametrize(
        ("variant", "layer", "display"),
        [
            (LayerVariant.COPPER, "top_cu", "Top Copper"),
            (LayerVariant.PLACEMENT, "top_placement", "Top Placement"),
            (LayerVariant.STOPMASK, "top_stop_mask", "Top Stop Mask"),
        ],
    )
    def test_layer_names(self, variant: LayerVariant, layer: str, display: str) -> None:
        assert variant.layer_name == layer
        assert variant.display_name == display


class TestLibraryBundle:
    """Tests for LibraryBundle class."""

    def test_elements_and_resolve(self) -> None:
        meta = ElementMetadata(name="Logo", author="Me")
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        package = Package("pkg", meta, created, "pkgcat", footprints=())
        symbol = Symbol("sym", meta, created, "cmpcat", polygons=())
        component = Component("cmp", meta, created, "cmpcat", "sym", "var", "gate")
        device = Device("dev", meta, created, "cmpcat", "cmp", "pkg")
        bundle = LibraryBundle(
            package=package,
            symbol=symbol,
            component=component,
            device=device,
            index={e.uuid: e for e in (package, symbol, component, device)},
        )

        assert list(bundle.elements()) == [package, symbol, component, device]
        assert bundle.resolve(device.component) is component
        with pytest.raises(KeyError):
            bundle.resolve("missing")
