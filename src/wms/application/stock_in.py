"""Application service: Stock In use case.

Adds stock to an item at a location.  The item must already be defined;
the total and location rows are created on first stock-in.
"""

from __future__ import annotations

from wms.domain.model.value_objects import Code, Quantity
from wms.domain.repository.inventory_ledger import InventoryLedger


class StockInHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, item_code: str, location_code: str, quantity: int | str) -> int:
        """Record incoming stock and return the quantity booked."""
        code = Code.of(item_code, "Item code")
        location = Code.of(location_code, "Location code")
        qty = Quantity.parse(quantity)

        self._ledger.stock_in(code.value, location.value, qty.value)
        return qty.value
