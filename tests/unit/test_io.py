"""Tests for SVG reading and library writing."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from svg2librepcb.core.builder import build_library
from svg2librepcb.core.identity import IdentityAllocator
from svg2librepcb.domain import (
    ElementMetadata,
    FootprintPolygon,
    LayerVariant,
    LibraryBundle,
    Point,
    Polygon,
)
from svg2librepcb.exceptions import LibraryWriteError, SvgLoadError
from svg2librepcb.io import LibraryWriter, SvgReader
from svg2librepcb.io.sexpr import (
    quote,
    render_component,
    render_device,
    render_package,
    render_polygon,
    render_symbol,
)

SVG_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="20mm" height="20mm" viewBox="0 0 20 20">
  <path id="first" d="M0,0 L10,0 L10,10 Z"/>
  <g>
    <circle cx="5" cy="5" r="2"/>
    <path d="   "/>
    <path id="second" d="M12 12 h5 v5 z"/>
  </g>
</svg>
"""


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    """An SVG with two paths, an empty path and a circle."""
    path = tmp_path / "logo.svg"
    path.write_text(SVG_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def bundle() -> LibraryBundle:
    """Elements for a single triangle on copper and placement."""
    polygon = Polygon.from_vertices([Point(0, 0), Point(1.5, 0), Point(1.5, 2.25)])
    return build_library(
        [polygon],
        [LayerVariant.COPPER, LayerVariant.PLACEMENT],
        IdentityAllocator(),
        ElementMetadata(name='Logo "A"', author="Me", keywords="logo,art"),
        created=datetime(2024, 3, 4, 5, 6, 7, tzinfo=timezone.utc),
    )


class TestSvgReader:
    """Tests for SvgReader."""

    def test_read_path_data(self, svg_file: Path) -> None:
        """Test that non-empty path data is returned in document order."""
        assert SvgReader(svg_file).read_path_data() == [
            "M0,0 L10,0 L10,10 Z",
            "M12 12 h5 v5 z",
        ]

    def test_without_namespace(self, tmp_path: Path) -> None:
        """Test documents that do not declare the SVG namespace."""
        path = tmp_path / "plain.svg"
        path.write_text('<svg><path d="M0 0 L1 0 L1 1 Z"/></svg>', encoding="utf-8")

        assert SvgReader(path).read_path_data() == ["M0 0 L1 0 L1 1 Z"]

    def test_read_text(self, svg_file: Path) -> None:
        """Test that the raw document is returned unchanged."""
        assert SvgReader(svg_file).read_text() == SVG_DOCUMENT

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test loading a file that does not exist."""
        with pytest.raises(SvgLoadError, match="file not found"):
            SvgReader(tmp_path / "missing.svg").read_path_data()

    def test_invalid_xml(self, tmp_path: Path) -> None:
        """Test loading a file that is not XML."""
        path = tmp_path / "broken.svg"
        path.write_text("<svg><path d='M0 0'>", encoding="utf-8")

        with pytest.raises(SvgLoadError, match="invalid XML"):
            SvgReader(path).read_path_data()


class TestSexpr:
    """Tests for s-expression rendering."""

    def test_quote(self) -> None:
        """Test escaping of quotes and backslashes."""
        assert quote('a "b" \\c') == '"a \\"b\\" \\\\c"'

    def test_polygon_vertices(self) -> None:
        """Test one vertex line per point, closing point included."""
        placed = FootprintPolygon(
            uuid="p",
            layer="top_cu",
            polygon=Polygon.from_vertices([Point(0, 0), Point(1.5, 0), Point(1.5, 2.25)]),
        )
        lines = render_polygon(placed, "0.0", fill=True)

        assert lines[0] == "(polygon p (layer top_cu)"
        assert "(fill true)" in lines[1]
        vertices = [line for line in lines if "(vertex" in line]
        assert len(vertices) == 4
        assert vertices[2] == " (vertex (position 1.500 2.250) (angle 0.0))"

    def test_package(self, bundle: LibraryBundle) -> None:
        """Test the package header and its footprints."""
        text = "\n".join(render_package(bundle.package))

        assert text.startswith(f"(librepcb_package {bundle.package.uuid}")
        assert '(name "Logo \\"A\\"")' in text
        assert '(keywords "logo,art")' in text
        assert "(created 2024-03-04T05:06:07Z)" in text
        assert f"(category {bundle.package.category})" in text
        assert '(name "Top Copper")' in text
        assert '(name "Top Placement")' in text
        assert "(layer top_cu)" in text
        assert "(layer top_placement)" in text
        assert "(layer top_stop_mask)" not in text

    def test_symbol(self, bundle: LibraryBundle) -> None:
        """Test that symbol polygons are unfilled outlines."""
        text = "\n".join(render_symbol(bundle.symbol))

        assert text.startswith(f"(librepcb_symbol {bundle.symbol.uuid}")
        assert "(layer sym_outlines)" in text
        assert "(fill false)" in text

    def test_component_references_symbol(self, bundle: LibraryBundle) -> None:
        """Test that the component gate shows the symbol."""
        text = "\n".join(render_component(bundle.component))

        assert f"(symbol {bundle.symbol.uuid})" in text
        assert f"(variant {bundle.component.variant_uuid}" in text
        assert f"(gate {bundle.component.gate_uuid}" in text

    def test_device_references(self, bundle: LibraryBundle) -> None:
        """Test that the device binds component and package."""
        text = "\n".join(render_device(bundle.device))

        assert f"(component {bundle.component.uuid})" in text
        assert f"(package {bundle.package.uuid})" in text

    def test_balanced_parentheses(self, bundle: LibraryBundle) -> None:
        """Test that every rendered document is balanced."""
        for lines in (
            render_package(bundle.package),
            render_symbol(bundle.symbol),
            render_component(bundle.component),
            render_device(bundle.device),
        ):
            text = "\n".join(lines).replace('\\"', "")
            text = "".join(part for i, part in enumerate(text.split('"')) if i % 2 == 0)
            assert text.count("(") == text.count(")")


class TestLibraryWriter:
    """Tests for LibraryWriter."""

    def test_layout(self, tmp_path: Path, bundle: LibraryBundle) -> None:
        """Test element directories, documents and type tags."""
        written = LibraryWriter(tmp_path).write(bundle)

        assert written == [
            tmp_path / "pkg" / bundle.package.uuid / "package.lp",
            tmp_path / "sym" / bundle.symbol.uuid / "symbol.lp",
            tmp_path / "cmp" / bundle.component.uuid / "component.lp",
            tmp_path / "dev" / bundle.device.uuid / "device.lp",
        ]
        for path in written:
            assert path.read_text(encoding="utf-8").endswith(")\n")

    def test_type_tags_are_empty(self, tmp_path: Path, bundle: LibraryBundle) -> None:
        """Test that type-tag files exist and are empty."""
        LibraryWriter(tmp_path).write(bundle)

        for kind, uuid in (
            ("pkg", bundle.package.uuid),
            ("sym", bundle.symbol.uuid),
            ("cmp", bundle.component.uuid),
            ("dev", bundle.device.uuid),
        ):
            tag = tmp_path / kind / uuid / f".librepcb-{kind}"
            assert tag.is_file()
            assert tag.read_bytes() == b""

    def test_missing_output_dir(self, tmp_path: Path, bundle: LibraryBundle) -> None:
        """Test writing into a directory that does not exist."""
        with pytest.raises(LibraryWriteError, match="does not exist"):
            LibraryWriter(tmp_path / "missing").write(bundle)

    def test_output_is_file(self, tmp_path: Path) -> None:
        """Test that the output path must be a directory."""
        path = tmp_path / "file.txt"
        path.write_text("", encoding="utf-8")

        with pytest.raises(LibraryWriteError, match="not a directory"):
            LibraryWriter(path).validate()
