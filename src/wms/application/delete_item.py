"""Application service: Delete Item use case.

Removes the item definition together with its total and every location
row.  The ledger performs the cascade in one transaction.
"""

from __future__ import annotations

from wms.domain.model.value_objects import Code
from wms.domain.repository.inventory_ledger import InventoryLedger


class DeleteItemHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, item_code: str) -> None:
        code = Code.of(item_code, "Item code")
        self._ledger.delete_item(code.value)
