"""svg2librepcb - Convert SVG path artwork into LibrePCB library elements.

svg2librepcb is a CLI tool that reads the ``<path>`` elements of an SVG
document, flattens their curves into polygons and generates a LibrePCB
package (one footprint per selected layer), symbol, component and device
that reference each other.

Example:
    $ svg2librepcb logo.svg --outpath ./mylib.lplib --name Logo --author Me

This will create pkg/, sym/, cmp/ and dev/ entries inside ./mylib.lplib.
"""

__version__ = "0.1.0"
__author__ = "svg2librepcb contributors"

__all__ = ["__author__", "__version__"]
