"""Application service: Show Item use case (query)."""

from __future__ import annotations

from wms.domain.exceptions import EntityNotFoundError
from wms.domain.model.item import ItemSnapshot
from wms.domain.model.value_objects import Code
from wms.domain.repository.inventory_ledger import InventoryLedger


class ShowItemHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, item_code: str) -> ItemSnapshot:
        code = Code.of(item_code, "Item code")
        snapshot = self._ledger.get_item(code.value)
        if snapshot is None:
            raise EntityNotFoundError(f"Item code '{code}' not found")
        return snapshot
