"""Abstract repository for the inventory ledger.

Defined in the domain layer so the domain never depends on infrastructure.
The SQL implementation lives in the infrastructure layer; tests use an
in-memory fake.

Every mutating method is all-or-nothing: it either applies all of its
changes or none of them, and it keeps each item's total equal to the sum of
its location balances.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wms.domain.model.item import ItemDefinition, ItemSnapshot


class InventoryLedger(ABC):

    @abstractmethod
    def define_item(self, item: ItemDefinition) -> None:
        """Insert a new item definition.

        Raises DuplicateKeyError if the item code is already defined.
        """

    @abstractmethod
    def stock_in(self, item_code: str, location_code: str, quantity: int) -> None:
        """Add stock to an item at a location, creating rows as needed.

        Raises ReferentialError if the item code is not defined.
        """

    @abstractmethod
    def stock_out(self, item_code: str, location_code: str, quantity: int) -> None:
        """Remove stock from an item at a location.

        The location row is deleted when it reaches zero.  Raises
        EntityNotFoundError for an undefined item and InsufficientStockError
        when either the location or the total balance is too small.
        """

    @abstractmethod
    def delete_item(self, item_code: str) -> None:
        """Delete an item with all of its stock and location records.

        Raises EntityNotFoundError if the item code is not defined.
        """

    @abstractmethod
    def get_item(self, item_code: str) -> ItemSnapshot | None:
        """Return a snapshot of one item, or None if it is not defined."""

    @abstractmethod
    def list_all(self) -> list[ItemSnapshot]:
        """Return a snapshot of every defined item, ordered by item code."""
