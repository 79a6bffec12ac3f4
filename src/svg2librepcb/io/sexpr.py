"""LibrePCB s-expression rendering.

Each ``render_*`` function turns a library element into the lines of its
``.lp`` document. Nested lists are indented by one space per level.
"""

from svg2librepcb.domain import (
    Component,
    Device,
    Footprint,
    FootprintPolygon,
    LibraryElement,
    Package,
    Symbol,
)

# Closed footprint polygons are filled areas; symbol polygons are outlines.
FOOTPRINT_LINE_WIDTH = "0.0"
SYMBOL_LINE_WIDTH = "0.2"


def quote(value: str) -> str:
    """Quote a string value, escaping backslashes and double quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _indent(lines: list[str]) -> list[str]:
    return [f" {line}" for line in lines]


def _header(kind: str, element: LibraryElement) -> list[str]:
    metadata = element.metadata
    return [
        f"(librepcb_{kind} {element.uuid}",
        f" (name {quote(metadata.name)})",
        f" (description {quote(metadata.description)})",
        f" (keywords {quote(metadata.keywords)})",
        f" (author {quote(metadata.author)})",
        f" (version {quote(metadata.version)})",
        f" (created {element.created.strftime('%Y-%m-%dT%H:%M:%SZ')})",
        " (deprecated false)",
        f" (category {element.category})",
    ]


def render_polygon(placed: FootprintPolygon, width: str, fill: bool) -> list[str]:
    """Render a polygon with one vertex line per point."""
    lines = [
        f"(polygon {placed.uuid} (layer {placed.layer})",
        f" (width {width}) (fill {'true' if fill else 'false'}) (grab_area true)",
    ]
    for point in placed.polygon.points:
        lines.append(f" (vertex (position {point.x:.3f} {point.y:.3f}) (angle 0.0))")
    lines.append(")")
    return lines


def render_footprint(footprint: Footprint) -> list[str]:
    lines = [
        f"(footprint {footprint.uuid}",
        f" (name {quote(footprint.name)})",
        f" (description {quote('')})",
    ]
    for placed in footprint.polygons:
        lines.extend(_indent(render_polygon(placed, FOOTPRINT_LINE_WIDTH, fill=True)))
    lines.append(")")
    return lines


def render_package(package: Package) -> list[str]:
    lines = _header("package", package)
    for footprint in package.footprints:
        lines.extend(_indent(render_footprint(footprint)))
    lines.append(")")
    return lines


def render_symbol(symbol: Symbol) -> list[str]:
    lines = _header("symbol", symbol)
    for placed in symbol.polygons:
        lines.extend(_indent(render_polygon(placed, SYMBOL_LINE_WIDTH, fill=False)))
    lines.append(")")
    return lines


def render_component(component: Component) -> list[str]:
    lines = _header("component", component)
    lines.extend(
        [
            " (schematic_only false)",
            f" (default_value {quote('')})",
            f" (prefix {quote('')})",
            f" (variant {component.variant_uuid} (norm {quote('')})",
            f"  (name {quote('default')})",
            f"  (description {quote('')})",
            f"  (gate {component.gate_uuid}",
            f"   (symbol {component.symbol})",
            f"   (position 0.0 0.0) (rotation 0.0) (required true) (suffix {quote('')})",
            "  )",
            " )",
            ")",
        ]
    )
    return lines


def render_device(device: Device) -> list[str]:
    lines = _header("device", device)
    lines.extend(
        [
            f" (component {device.component})",
            f" (package {device.package})",
            ")",
        ]
    )
    return lines


def render_element(element: LibraryElement) -> list[str]:
    """Render any library element."""
    if isinstance(element, Package):
        return render_package(element)
    if isinstance(element, Symbol):
        return render_symbol(element)
    if isinstance(element, Component):
        return render_component(element)
    if isinstance(element, Device):
        return render_device(element)
    raise TypeError(f"Unknown library element: {element!r}")
