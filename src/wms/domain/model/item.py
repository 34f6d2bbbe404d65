"""Item definitions and stock snapshots.

An ItemDefinition is the parent record every stock row depends on.  An
ItemSnapshot is the read model produced by the ledger: the item's name, its
recorded total and its per-location balances.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wms.domain.model.value_objects import Code


@dataclass(frozen=True)
class ItemDefinition:
    item_code: str
    item_name: str

    @staticmethod
    def create(item_code: str, item_name: str) -> ItemDefinition:
        """Validate and normalise raw input into a definition."""
        code = Code.of(item_code, "Item code")
        name = Code.of(item_name, "Item name")
        return ItemDefinition(item_code=code.value, item_name=name.value)


@dataclass(frozen=True)
class LocationQuantity:
    location_code: str
    quantity: int


@dataclass(frozen=True)
class ItemSnapshot:
    """Stock of one item as of a single read.

    ``locations`` is ordered by location code.  ``total_quantity`` is 0 for
    an item that was defined but never stocked.
    """

    item_code: str
    item_name: str
    total_quantity: int = 0
    locations: list[LocationQuantity] = field(default_factory=list)

    @property
    def location_total(self) -> int:
        return sum(loc.quantity for loc in self.locations)

    @property
    def is_consistent(self) -> bool:
        """True when the recorded total matches the sum over locations."""
        return self.total_quantity == self.location_total

    def quantity_at(self, location_code: str) -> int | None:
        """Balance at a location, or None if the item was never stocked there."""
        for loc in self.locations:
            if loc.location_code == location_code:
                return loc.quantity
        return None
