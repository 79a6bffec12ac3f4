"""Library element assembly.

Builds the package, symbol, component and device for one conversion and
links them through the UUIDs handed out by the identity allocator.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from svg2librepcb.core.identity import IdentityAllocator
from svg2librepcb.domain import (
    SYMBOL_LAYER,
    Component,
    Device,
    ElementMetadata,
    Footprint,
    FootprintPolygon,
    IdentitySlot,
    LayerVariant,
    LibraryBundle,
    LibraryElement,
    Package,
    Polygon,
    Symbol,
)
from svg2librepcb.exceptions import ConfigurationError


def _check_metadata(metadata: ElementMetadata) -> None:
    for field in ("name", "author"):
        if not getattr(metadata, field).strip():
            raise ConfigurationError(field, "a value is required")


def _place(
    polygons: Sequence[Polygon], layer: str, allocator: IdentityAllocator
) -> tuple[FootprintPolygon, ...]:
    return tuple(
        FootprintPolygon(uuid=allocator.fresh(), layer=layer, polygon=polygon)
        for polygon in polygons
    )


def _build_index(elements: Iterable[LibraryElement]) -> dict[str, LibraryElement]:
    index: dict[str, LibraryElement] = {}
    for element in elements:
        if element.uuid in index:
            raise ConfigurationError(
                "uuids", f"UUID {element.uuid} is assigned to more than one element"
            )
        index[element.uuid] = element
    return index


def build_library(
    polygons: Sequence[Polygon],
    layers: Iterable[LayerVariant],
    allocator: IdentityAllocator,
    metadata: ElementMetadata,
    created: datetime | None = None,
) -> LibraryBundle:
    """Assemble the cross-referenced library elements.

    Args:
        polygons: Normalized polygons in output units
        layers: Layer variants to generate footprints for
        allocator: Source of element UUIDs
        metadata: Name, author and other descriptive fields
        created: Creation timestamp (defaults to now, UTC)

    Returns:
        Bundle with package, symbol, component, device and UUID index

    Raises:
        ConfigurationError: If no layer is selected, required metadata is
            missing, or two elements would share a UUID
    """
    selected = set(layers)
    variants = [variant for variant in LayerVariant if variant in selected]
    if not variants:
        raise ConfigurationError("layers", "at least one layer variant is required")
    _check_metadata(metadata)

    if created is None:
        created = datetime.now(timezone.utc).replace(microsecond=0)
    polygons = tuple(polygons)
    component_category = allocator.get(IdentitySlot.COMPONENT_CATEGORY)

    footprints = tuple(
        Footprint(
            uuid=allocator.fresh(),
            variant=variant,
            polygons=_place(polygons, variant.layer_name, allocator),
        )
        for variant in variants
    )
    package = Package(
        uuid=allocator.get(IdentitySlot.PACKAGE),
        metadata=metadata,
        created=created,
        category=allocator.get(IdentitySlot.PACKAGE_CATEGORY),
        footprints=footprints,
    )
    symbol = Symbol(
        uuid=allocator.get(IdentitySlot.SYMBOL),
        metadata=metadata,
        created=created,
        category=component_category,
        polygons=_place(polygons, SYMBOL_LAYER, allocator),
    )
    component = Component(
        uuid=allocator.get(IdentitySlot.COMPONENT),
        metadata=metadata,
        created=created,
        category=component_category,
        symbol=symbol.uuid,
        variant_uuid=allocator.fresh(),
        gate_uuid=allocator.fresh(),
    )
    device = Device(
        uuid=allocator.get(IdentitySlot.DEVICE),
        metadata=metadata,
        created=created,
        category=component_category,
        component=component.uuid,
        package=package.uuid,
    )

    index = _build_index((package, symbol, component, device))
    return LibraryBundle(
        package=package,
        symbol=symbol,
        component=component,
        device=device,
        index=index,
    )
