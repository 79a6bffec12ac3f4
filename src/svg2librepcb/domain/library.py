"""LibrePCB library element models.

This module defines the in-memory object graph handed to the library
writer. Elements reference each other by UUID only; the ``LibraryBundle``
owns the lookup table that resolves those references.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from svg2librepcb.domain.geometry import Polygon


class LayerVariant(Enum):
    """Board layer a footprint is generated for."""

    COPPER = "copper"
    PLACEMENT = "placement"
    STOPMASK = "stopmask"

    @property
    def layer_name(self) -> str:
        """LibrePCB layer identifier."""
        return _LAYER_NAMES[self]

    @property
    def display_name(self) -> str:
        """Human-readable footprint name."""
        return _DISPLAY_NAMES[self]


_LAYER_NAMES = {
    LayerVariant.COPPER: "top_cu",
    LayerVariant.PLACEMENT: "top_placement",
    LayerVariant.STOPMASK: "top_stop_mask",
}

_DISPLAY_NAMES = {
    LayerVariant.COPPER: "Top Copper",
    LayerVariant.PLACEMENT: "Top Placement",
    LayerVariant.STOPMASK: "Top Stop Mask",
}

SYMBOL_LAYER = "sym_outlines"


class IdentitySlot(Enum):
    """Logical elements that own a caller-visible UUID."""

    PACKAGE = "package"
    SYMBOL = "symbol"
    COMPONENT = "component"
    DEVICE = "device"
    PACKAGE_CATEGORY = "package_category"
    COMPONENT_CATEGORY = "component_category"


@dataclass(frozen=True)
class ElementMetadata:
    """Descriptive fields shared by every library element.

    Attributes:
        name: Element name
        author: Element author
        version: Element version string
        description: Free-form description
        keywords: Comma separated keywords
    """

    name: str
    author: str
    version: str = "0.1.0"
    description: str = ""
    keywords: str = ""


@dataclass(frozen=True)
class FootprintPolygon:
    """A polygon placed on a specific layer."""

    uuid: str
    layer: str
    polygon: Polygon


@dataclass(frozen=True)
class Footprint:
    """Package geometry for one layer variant."""

    uuid: str
    variant: LayerVariant
    polygons: tuple[FootprintPolygon, ...]

    @property
    def name(self) -> str:
        return self.variant.display_name


@dataclass(frozen=True)
class Package:
    uuid: str
    metadata: ElementMetadata
    created: datetime
    category: str
    footprints: tuple[Footprint, ...]


@dataclass(frozen=True)
class Symbol:
    uuid: str
    metadata: ElementMetadata
    created: datetime
    category: str
    polygons: tuple[FootprintPolygon, ...]


@dataclass(frozen=True)
class Component:
    """Component with a single variant and gate showing the symbol."""

    uuid: str
    metadata: ElementMetadata
    created: datetime
    category: str
    symbol: str
    variant_uuid: str
    gate_uuid: str


@dataclass(frozen=True)
class Device:
    """Device binding a component to a package."""

    uuid: str
    metadata: ElementMetadata
    created: datetime
    category: str
    component: str
    package: str


LibraryElement = Package | Symbol | Component | Device


@dataclass(frozen=True)
class LibraryBundle:
    """The complete set of elements produced by one conversion.

    Attributes:
        package: Package holding one footprint per layer variant
        symbol: Schematic symbol
        component: Component referencing the symbol
        device: Device referencing component and package
        index: Lookup table from UUID to element
    """

    package: Package
    symbol: Symbol
    component: Component
    device: Device
    index: dict[str, LibraryElement] = field(default_factory=dict)

    def elements(self) -> Iterator[LibraryElement]:
        """Iterate elements in dependency order."""
        yield self.package
        yield self.symbol
        yield self.component
        yield self.device

    def resolve(self, uuid: str) -> LibraryElement:
        """Look up an element by UUID.

        Raises:
            KeyError: If no element with that UUID exists in this bundle
        """
        return self.index[uuid]
