"""Application service: Stock Out use case."""

from __future__ import annotations

from wms.domain.model.value_objects import Code, Quantity
from wms.domain.repository.inventory_ledger import InventoryLedger


class StockOutHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, item_code: str, location_code: str, quantity: int | str) -> int:
        """Remove stock from a location and return the quantity removed.

        Balance checks happen inside the ledger's transaction, not here,
        so a concurrent stock-out cannot slip between check and write.
        """
        code = Code.of(item_code, "Item code")
        location = Code.of(location_code, "Location code")
        qty = Quantity.parse(quantity)

        self._ledger.stock_out(code.value, location.value, qty.value)
        return qty.value
