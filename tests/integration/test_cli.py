"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from svg2librepcb import __version__
from svg2librepcb.cli.app import app

SVG_DOCUMENT = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <path d="M0,0 L10,0 L10,10 L0,10 Z"/>
  <path d="M12 0 C 12 8 20 8 20 0 Z"/>
</svg>
"""

runner = CliRunner()


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    path = tmp_path / "logo.svg"
    path.write_text(SVG_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def library(tmp_path: Path) -> Path:
    path = tmp_path / "Test.lplib"
    path.mkdir()
    return path


def base_args(svg_file: Path, library: Path) -> list[str]:
    return [str(svg_file), "--outpath", str(library), "--name", "Logo", "--author", "Me"]


def element_dirs(library: Path, kind: str) -> list[Path]:
    kind_dir = library / kind
    return sorted(kind_dir.iterdir()) if kind_dir.exists() else []


class TestConvertCommand:
    """Tests for the convert command."""

    def test_convert(self, svg_file: Path, library: Path) -> None:
        """Test a default conversion writes all four elements."""
        result = runner.invoke(app, base_args(svg_file, library))

        assert result.exit_code == 0, result.output
        for kind in ("pkg", "sym", "cmp", "dev"):
            assert len(element_dirs(library, kind)) == 1

    def test_supplied_uuids(self, svg_file: Path, library: Path) -> None:
        """Test that UUID options name the element directories."""
        pkg = "11111111-2222-3333-4444-555555555555"
        dev = "66666666-7777-8888-9999-aaaaaaaaaaaa"
        result = runner.invoke(
            app, [*base_args(svg_file, library), "--uuid-pkg", pkg, "--uuid-dev", dev]
        )

        assert result.exit_code == 0, result.output
        assert element_dirs(library, "pkg") == [library / "pkg" / pkg]
        device_doc = (library / "dev" / dev / "device.lp").read_text(encoding="utf-8")
        assert f"(package {pkg})" in device_doc

    def test_layer_selection(self, svg_file: Path, library: Path) -> None:
        """Test that disabled layers get no footprint."""
        result = runner.invoke(
            app,
            [*base_args(svg_file, library), "--no-layer-placement", "--no-layer-stopmask"],
        )

        assert result.exit_code == 0, result.output
        package_dir = element_dirs(library, "pkg")[0]
        package_doc = (package_dir / "package.lp").read_text(encoding="utf-8")
        assert package_doc.count("(footprint ") == 1
        assert "(layer top_cu)" in package_doc

    def test_metadata_options(self, svg_file: Path, library: Path) -> None:
        """Test that metadata options end up in the documents."""
        result = runner.invoke(
            app,
            [
                *base_args(svg_file, library),
                "--description",
                "Company logo",
                "--keywords",
                "logo,brand",
                "--version",
                "1.2",
                "--align",
                "center",
            ],
        )

        assert result.exit_code == 0, result.output
        symbol_doc = (element_dirs(library, "sym")[0] / "symbol.lp").read_text(encoding="utf-8")
        assert '(description "Company logo")' in symbol_doc
        assert '(keywords "logo,brand")' in symbol_doc
        assert '(version "1.2")' in symbol_doc

    def test_echo_svg(self, svg_file: Path, library: Path) -> None:
        """Test that the original SVG is echoed for editor extensions."""
        result = runner.invoke(
            app, [*base_args(svg_file, library), "--echo-svg", "--id", "path1"]
        )

        assert result.exit_code == 0, result.output
        assert SVG_DOCUMENT.strip() in result.output

    def test_show_version(self) -> None:
        """Test the version flag."""
        result = runner.invoke(app, ["--show-version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestConvertErrors:
    """Tests for failing conversions."""

    def test_invalid_uuid(self, svg_file: Path, library: Path) -> None:
        """Test that a malformed UUID fails without writing anything."""
        result = runner.invoke(app, [*base_args(svg_file, library), "--uuid-sym", "xyz"])

        assert result.exit_code == 1
        assert list(library.iterdir()) == []

    def test_no_layers(self, svg_file: Path, library: Path) -> None:
        """Test that disabling every layer is rejected."""
        result = runner.invoke(
            app,
            [
                *base_args(svg_file, library),
                "--no-layer-copper",
                "--no-layer-placement",
                "--no-layer-stopmask",
            ],
        )

        assert result.exit_code == 1
        assert list(library.iterdir()) == []

    def test_missing_outpath(self, svg_file: Path, tmp_path: Path) -> None:
        """Test that the library directory must exist."""
        result = runner.invoke(app, base_args(svg_file, tmp_path / "missing"))

        assert result.exit_code == 1

    def test_missing_svg(self, tmp_path: Path, library: Path) -> None:
        """Test that a missing input file fails."""
        result = runner.invoke(app, base_args(tmp_path / "missing.svg", library))

        assert result.exit_code == 1

    def test_invalid_path_data(self, tmp_path: Path, library: Path) -> None:
        """Test that malformed path data fails without writing anything."""
        svg_file = tmp_path / "bad.svg"
        svg_file.write_text('<svg><path d="M0 0 L10 0 X"/></svg>', encoding="utf-8")

        result = runner.invoke(app, base_args(svg_file, library))

        assert result.exit_code == 1
        assert list(library.iterdir()) == []

    def test_invalid_tolerance(self, svg_file: Path, library: Path) -> None:
        """Test that a non-positive tolerance is rejected."""
        result = runner.invoke(
            app, [*base_args(svg_file, library), "--flattening-tolerance", "0"]
        )

        assert result.exit_code == 1

    def test_verbose_and_quiet(self, svg_file: Path, library: Path) -> None:
        """Test that verbose and quiet cannot be combined."""
        result = runner.invoke(app, [*base_args(svg_file, library), "-v", "-q"])

        assert result.exit_code == 1

    def test_invalid_log_level(self, svg_file: Path, library: Path) -> None:
        """Test that an unknown log level is reported as a usage error."""
        result = runner.invoke(app, [*base_args(svg_file, library), "--log-level", "bogus"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert list(library.iterdir()) == []

    def test_markup_in_path_data_printed_verbatim(self, tmp_path: Path, library: Path) -> None:
        """Test that bracketed path data is shown as text in the error report."""
        svg_file = tmp_path / "bad.svg"
        svg_file.write_text('<svg><path d="M0 0 [/b] L1 1"/></svg>', encoding="utf-8")

        result = runner.invoke(app, base_args(svg_file, library))

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "offset 5" in result.output
        assert "[/b]" in result.output
