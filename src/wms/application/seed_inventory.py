"""Application service: Seed Inventory use case.

Loads a small fixed catalogue of sample items so a fresh database has
something to report on.  With ``reset`` every existing item is deleted
first, each through the ledger's cascading delete.
"""

from __future__ import annotations

from wms.application.dto import LocationLineDTO
from wms.application.show_inventory import ShowInventoryHandler
from wms.domain.model.item import ItemDefinition
from wms.domain.repository.inventory_ledger import InventoryLedger

# (item code, item name, location, quantity)
SAMPLE_STOCK: tuple[tuple[str, str, str, int], ...] = (
    ("CPU-I7-12700K", "Intel Core i7-12700K", "Shelf A, Row 1", 50),
    ("GPU-RTX-3080", "NVIDIA GeForce RTX 3080", "Shelf B, Row 3", 25),
    ("RAM-DDR5-32G", "Corsair Vengeance DDR5 32GB", "Shelf A, Row 2", 100),
)


class SeedInventoryHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, reset: bool = True) -> list[LocationLineDTO]:
        if reset:
            for item in self._ledger.list_all():
                self._ledger.delete_item(item.item_code)

        defined = {item.item_code for item in self._ledger.list_all()}
        for code, name, location, quantity in SAMPLE_STOCK:
            if code not in defined:
                self._ledger.define_item(ItemDefinition(item_code=code, item_name=name))
            self._ledger.stock_in(code, location, quantity)

        return ShowInventoryHandler(self._ledger).by_location()
