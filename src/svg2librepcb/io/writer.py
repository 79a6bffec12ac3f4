"""Library writer for saving generated elements.

This module provides the LibraryWriter class that lays out generated
elements inside a LibrePCB library directory.
"""

from pathlib import Path

from svg2librepcb.domain import (
    Component,
    Device,
    LibraryBundle,
    LibraryElement,
    Package,
    Symbol,
)
from svg2librepcb.exceptions import LibraryWriteError
from svg2librepcb.io.sexpr import render_element

# Element type -> (directory, document file, type-tag file)
ELEMENT_LAYOUT: dict[type, tuple[str, str, str]] = {
    Package: ("pkg", "package.lp", ".librepcb-pkg"),
    Symbol: ("sym", "symbol.lp", ".librepcb-sym"),
    Component: ("cmp", "component.lp", ".librepcb-cmp"),
    Device: ("dev", "device.lp", ".librepcb-dev"),
}


class LibraryWriter:
    """Writes library elements into a LibrePCB library directory.

    Every element gets its own ``<kind>/<uuid>/`` directory holding the
    element document and an empty type-tag file.

    Example:
        writer = LibraryWriter(Path("MyLibrary.lplib"))
        written = writer.write(bundle)
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the library writer.

        Args:
            output_dir: Existing library directory
        """
        self._output_dir = output_dir

    def validate(self) -> None:
        """Check that the output directory exists.

        Raises:
            LibraryWriteError: If the path is missing or not a directory
        """
        if not self._output_dir.exists():
            raise LibraryWriteError(str(self._output_dir), "output path does not exist")
        if not self._output_dir.is_dir():
            raise LibraryWriteError(str(self._output_dir), "output path is not a directory")

    def element_dir(self, element: LibraryElement) -> Path:
        """Directory an element is written to."""
        directory, _, _ = ELEMENT_LAYOUT[type(element)]
        return self._output_dir / directory / element.uuid

    def write_element(self, element: LibraryElement) -> Path:
        """Write one element.

        Returns:
            Path of the written element document

        Raises:
            LibraryWriteError: If the files cannot be written
        """
        _, document, type_tag = ELEMENT_LAYOUT[type(element)]
        element_dir = self.element_dir(element)
        content = "\n".join(render_element(element)) + "\n"

        try:
            element_dir.mkdir(parents=True, exist_ok=True)
            (element_dir / type_tag).write_text("", encoding="utf-8")
            (element_dir / document).write_text(content, encoding="utf-8")
        except OSError as e:
            raise LibraryWriteError(str(element_dir), str(e)) from e

        return element_dir / document

    def write(self, bundle: LibraryBundle) -> list[Path]:
        """Write every element of a bundle.

        Returns:
            Paths of the written element documents
        """
        self.validate()
        return [self.write_element(element) for element in bundle.elements()]
