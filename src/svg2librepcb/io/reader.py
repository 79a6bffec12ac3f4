"""SVG reader for extracting path data.

Only ``<path>`` elements are read. Transforms, styles and other shapes
are ignored.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from svg2librepcb.exceptions import SvgLoadError


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def extract_path_data(root: ET.Element) -> list[str]:
    """Collect non-empty ``d`` attributes of all path elements.

    Args:
        root: Root element of the SVG document

    Returns:
        Path data strings in document order
    """
    path_data = []
    for element in root.iter():
        if not isinstance(element.tag, str) or _local_name(element.tag) != "path":
            continue
        data = (element.get("d") or "").strip()
        if data:
            path_data.append(data)
    return path_data


class SvgReader:
    """Loads an SVG document and extracts its path data.

    Example:
        reader = SvgReader(Path("logo.svg"))
        for data in reader.read_path_data():
            print(data)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path

    def _read_bytes(self) -> bytes:
        if not self._svg_path.exists():
            raise SvgLoadError(str(self._svg_path), "file not found")
        try:
            return self._svg_path.read_bytes()
        except OSError as e:
            raise SvgLoadError(str(self._svg_path), str(e)) from e

    def read_text(self) -> str:
        """Return the raw SVG document.

        Raises:
            SvgLoadError: If the file cannot be read or decoded
        """
        try:
            return self._read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise SvgLoadError(str(self._svg_path), f"not valid UTF-8: {e}") from e

    def read_path_data(self) -> list[str]:
        """Return the ``d`` attribute of every path in document order.

        Raises:
            SvgLoadError: If the file is missing or not well-formed XML
        """
        try:
            root = ET.fromstring(self._read_bytes())
        except ET.ParseError as e:
            raise SvgLoadError(str(self._svg_path), f"invalid XML: {e}") from e
        return extract_path_data(root)
