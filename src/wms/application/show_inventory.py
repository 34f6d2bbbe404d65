"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from wms.application.dto import LocationLineDTO
from wms.domain.model.item import ItemSnapshot
from wms.domain.repository.inventory_ledger import InventoryLedger


class ShowInventoryHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self) -> list[ItemSnapshot]:
        """Every defined item, including ones with no stock."""
        return self._ledger.list_all()

    def by_location(self) -> list[LocationLineDTO]:
        """Every stocked location, ordered by location then item code."""
        lines = [
            LocationLineDTO(
                location_code=loc.location_code,
                item_code=item.item_code,
                item_name=item.item_name,
                quantity=loc.quantity,
            )
            for item in self._ledger.list_all()
            for loc in item.locations
        ]
        return sorted(lines, key=lambda line: (line.location_code, line.item_code))
