"""I/O layer for svg2librepcb.

This module handles reading SVG documents and writing LibrePCB library
elements. It keeps file formats out of the core pipeline.

Key responsibilities:
- Extract path data from SVG files
- Render library elements as LibrePCB s-expressions
- Lay out element directories inside a library

Key classes:
- SvgReader: Load SVG files and extract path data
- LibraryWriter: Write element directories
"""

from svg2librepcb.io.reader import SvgReader
from svg2librepcb.io.writer import LibraryWriter

__all__ = [
    "LibraryWriter",
    "SvgReader",
]
