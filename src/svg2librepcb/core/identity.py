"""UUID allocation for library elements.

Each logical element (package, symbol, component, device and the two
categories) gets exactly one UUID per run. Callers may pin any of them to
keep UUIDs stable across re-runs; everything else is generated.
"""

import re
import uuid
from collections.abc import Callable, Mapping

from svg2librepcb.domain import IdentitySlot
from svg2librepcb.exceptions import InvalidIdentityError

UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def validate_identity(value: str, slot: IdentitySlot | None = None) -> str:
    """Validate a hyphenated hex UUID and return it in lowercase.

    Raises:
        InvalidIdentityError: If value is not in 8-4-4-4-12 hex form
    """
    slot_name = slot.value if slot is not None else None
    if not isinstance(value, str) or UUID_RE.fullmatch(value) is None:
        raise InvalidIdentityError(str(value), slot_name)
    return str(uuid.UUID(value))


class IdentityAllocator:
    """Hands out one UUID per identity slot.

    Overrides are validated when the allocator is created, so a bad UUID
    aborts the run before any geometry work is done.

    Example:
        allocator = IdentityAllocator({IdentitySlot.PACKAGE: "..."})
        pkg = allocator.get(IdentitySlot.PACKAGE)
        assert allocator.get(IdentitySlot.PACKAGE) == pkg
    """

    def __init__(
        self,
        overrides: Mapping[IdentitySlot, str] | None = None,
        factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ) -> None:
        """Initialize the allocator.

        Args:
            overrides: Caller-supplied UUIDs per slot
            factory: Source of fresh UUIDs

        Raises:
            InvalidIdentityError: If an override is malformed
        """
        self._factory = factory
        self._allocated: dict[IdentitySlot, str] = {
            slot: validate_identity(value, slot)
            for slot, value in (overrides or {}).items()
        }
        self._supplied = frozenset(self._allocated)

    def get(self, slot: IdentitySlot) -> str:
        """UUID for a slot, generated on first request and reused after."""
        if slot not in self._allocated:
            self._allocated[slot] = self.fresh()
        return self._allocated[slot]

    def fresh(self) -> str:
        """A new UUID not tied to any slot."""
        return str(self._factory())

    def is_supplied(self, slot: IdentitySlot) -> bool:
        """Check whether the caller pinned this slot."""
        return slot in self._supplied

    def allocated(self) -> dict[IdentitySlot, str]:
        """Copy of the slot table."""
        return dict(self._allocated)
