"""Application service: Define Item use case."""

from __future__ import annotations

from wms.domain.model.item import ItemDefinition
from wms.domain.repository.inventory_ledger import InventoryLedger


class DefineItemHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, item_code: str, item_name: str) -> ItemDefinition:
        """Register a new item code so stock can be recorded against it."""
        item = ItemDefinition.create(item_code, item_name)
        self._ledger.define_item(item)
        return item
