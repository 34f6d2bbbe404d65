"""SQL-backed implementation of InventoryLedger.

Statements are plain SQL run through SQLAlchemy Core, written so the same
text works on SQLite and MySQL.  Upserts are expressed as an UPDATE followed
by an INSERT when no row matched, inside the same transaction.

Stock-out reads the balances and writes the new ones in one transaction, and
every write is guarded by the balance it expects (``quantity_at_location =
:qty`` before deleting a row, ``>= :qty`` before decrementing).  A guard that
matches nothing means the balance moved under us; the transaction is rolled
back and InsufficientStockError raised.
"""

from __future__ import annotations

import logging
from itertools import groupby
from operator import attrgetter
from typing import Iterable

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine, Row
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from wms.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    InsufficientStockError,
    ReferentialError,
    StorageError,
)
from wms.domain.model.item import ItemDefinition, ItemSnapshot, LocationQuantity
from wms.domain.repository.inventory_ledger import InventoryLedger
from wms.infrastructure.persistence.transaction import transaction_scope

logger = logging.getLogger(__name__)

# MySQL server error codes
ER_DUP_ENTRY = 1062
ER_NO_REFERENCED_ROW_2 = 1452

_SNAPSHOT_SELECT = """
    SELECT d.item_code, d.item_name, i.total_quantity,
           l.location_code, l.quantity_at_location
    FROM item_definitions d
    LEFT JOIN inventory i ON d.item_code = i.item_code
    LEFT JOIN item_locations l ON d.item_code = l.item_code
"""

_BALANCE_SELECT = """
    SELECT i.total_quantity, l.quantity_at_location
    FROM item_definitions d
    LEFT JOIN inventory i ON d.item_code = i.item_code
    LEFT JOIN item_locations l
        ON d.item_code = l.item_code AND l.location_code = :location
    WHERE d.item_code = :code
"""

# dependents first
_DELETE_ORDER = ("item_locations", "inventory", "item_definitions")


class SqlInventoryLedger(InventoryLedger):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- InventoryLedger interface --------------------------------------------

    def define_item(self, item: ItemDefinition) -> None:
        with transaction_scope(self._engine, f"Define item {item.item_code}") as conn:
            try:
                conn.execute(
                    text(
                        "INSERT INTO item_definitions (item_code, item_name) "
                        "VALUES (:code, :name)"
                    ),
                    {"code": item.item_code, "name": item.item_name},
                )
            except IntegrityError as exc:
                if _is_duplicate_key(exc):
                    raise DuplicateKeyError(
                        f"Item code '{item.item_code}' already exists"
                    ) from exc
                raise

    def stock_in(self, item_code: str, location_code: str, quantity: int) -> None:
        operation = f"Stock-in of {quantity} x {item_code} at {location_code}"
        with transaction_scope(self._engine, operation) as conn:
            if not self._is_defined(conn, item_code):
                raise ReferentialError(_undefined_item_message(item_code))
            try:
                self._add_to_total(conn, item_code, quantity)
                self._add_to_location(conn, item_code, location_code, quantity)
            except IntegrityError as exc:
                if _is_foreign_key_violation(exc):
                    raise ReferentialError(_undefined_item_message(item_code)) from exc
                raise

    def stock_out(self, item_code: str, location_code: str, quantity: int) -> None:
        operation = f"Stock-out of {quantity} x {item_code} from {location_code}"
        with transaction_scope(self._engine, operation) as conn:
            total, at_location = self._read_balance(conn, item_code, location_code)

            if at_location is None or at_location < quantity:
                raise InsufficientStockError(
                    f"Insufficient stock at location '{location_code}' "
                    f"(have {at_location or 0}, requested {quantity})"
                )
            if total is None or total < quantity:
                raise InsufficientStockError(
                    f"Insufficient total stock for '{item_code}' "
                    f"(have {total or 0}, requested {quantity}); "
                    "records may be inconsistent"
                )

            if at_location == quantity:
                logger.info("Location %s emptied for %s", location_code, item_code)
                result = conn.execute(
                    text(
                        "DELETE FROM item_locations "
                        "WHERE item_code = :code AND location_code = :location "
                        "AND quantity_at_location = :qty"
                    ),
                    {"code": item_code, "location": location_code, "qty": quantity},
                )
            else:
                result = conn.execute(
                    text(
                        "UPDATE item_locations "
                        "SET quantity_at_location = quantity_at_location - :qty "
                        "WHERE item_code = :code AND location_code = :location "
                        "AND quantity_at_location >= :qty"
                    ),
                    {"code": item_code, "location": location_code, "qty": quantity},
                )
            if result.rowcount != 1:
                raise InsufficientStockError(
                    f"Stock at location '{location_code}' changed during stock-out; "
                    "nothing was removed"
                )

            result = conn.execute(
                text(
                    "UPDATE inventory SET total_quantity = total_quantity - :qty "
                    "WHERE item_code = :code AND total_quantity >= :qty"
                ),
                {"code": item_code, "qty": quantity},
            )
            if result.rowcount != 1:
                raise InsufficientStockError(
                    f"Total stock for '{item_code}' changed during stock-out; "
                    "nothing was removed"
                )

    def delete_item(self, item_code: str) -> None:
        with transaction_scope(self._engine, f"Delete item {item_code}") as conn:
            if not self._is_defined(conn, item_code):
                raise EntityNotFoundError(f"Item code '{item_code}' not found")
            for table in _DELETE_ORDER:
                self._delete_rows(conn, table, item_code)

    def get_item(self, item_code: str) -> ItemSnapshot | None:
        rows = self._query(
            _SNAPSHOT_SELECT
            + " WHERE d.item_code = :code ORDER BY l.location_code",
            {"code": item_code},
        )
        snapshots = group_snapshots(rows)
        return snapshots[0] if snapshots else None

    def list_all(self) -> list[ItemSnapshot]:
        rows = self._query(_SNAPSHOT_SELECT + " ORDER BY d.item_code, l.location_code")
        return group_snapshots(rows)

    # --- Statement helpers ----------------------------------------------------

    def _read_balance(
        self, conn: Connection, item_code: str, location_code: str
    ) -> tuple[int | None, int | None]:
        """Current (total, location) balance; None marks a missing row."""
        row = conn.execute(
            text(_BALANCE_SELECT), {"code": item_code, "location": location_code}
        ).first()
        if row is None:
            raise EntityNotFoundError(f"Item code '{item_code}' not found")
        return row.total_quantity, row.quantity_at_location

    @staticmethod
    def _is_defined(conn: Connection, item_code: str) -> bool:
        row = conn.execute(
            text("SELECT 1 FROM item_definitions WHERE item_code = :code"),
            {"code": item_code},
        ).first()
        return row is not None

    @staticmethod
    def _delete_rows(conn: Connection, table: str, item_code: str) -> None:
        conn.execute(text(f"DELETE FROM {table} WHERE item_code = :code"), {"code": item_code})

    @staticmethod
    def _add_to_total(conn: Connection, item_code: str, quantity: int) -> None:
        params = {"code": item_code, "qty": quantity}
        result = conn.execute(
            text(
                "UPDATE inventory SET total_quantity = total_quantity + :qty "
                "WHERE item_code = :code"
            ),
            params,
        )
        if result.rowcount == 0:
            conn.execute(
                text(
                    "INSERT INTO inventory (item_code, total_quantity) "
                    "VALUES (:code, :qty)"
                ),
                params,
            )

    @staticmethod
    def _add_to_location(
        conn: Connection, item_code: str, location_code: str, quantity: int
    ) -> None:
        params = {"code": item_code, "location": location_code, "qty": quantity}
        result = conn.execute(
            text(
                "UPDATE item_locations "
                "SET quantity_at_location = quantity_at_location + :qty "
                "WHERE item_code = :code AND location_code = :location"
            ),
            params,
        )
        if result.rowcount == 0:
            conn.execute(
                text(
                    "INSERT INTO item_locations "
                    "(item_code, location_code, quantity_at_location) "
                    "VALUES (:code, :location, :qty)"
                ),
                params,
            )

    def _query(self, sql: str, params: dict | None = None) -> list[Row]:
        try:
            with self._engine.connect() as conn:
                return list(conn.execute(text(sql), params or {}))
        except SQLAlchemyError as exc:
            raise StorageError(f"Query failed: {exc}") from exc


def group_snapshots(rows: Iterable[Row]) -> list[ItemSnapshot]:
    """Fold joined rows, pre-sorted by item code, into one snapshot per item."""
    snapshots: list[ItemSnapshot] = []
    for item_code, group in groupby(rows, key=attrgetter("item_code")):
        group_rows = list(group)
        first = group_rows[0]
        snapshots.append(
            ItemSnapshot(
                item_code=item_code,
                item_name=first.item_name,
                total_quantity=first.total_quantity or 0,
                locations=[
                    LocationQuantity(row.location_code, row.quantity_at_location)
                    for row in group_rows
                    if row.location_code
                ],
            )
        )
    return snapshots


def _undefined_item_message(item_code: str) -> str:
    return f"Item code '{item_code}' is not defined; define the item before stocking it"


def _driver_error(exc: IntegrityError) -> tuple[int | None, str]:
    orig = exc.orig
    if orig is None:
        return None, str(exc).upper()
    code = orig.args[0] if orig.args and isinstance(orig.args[0], int) else None
    return code, str(orig).upper()


def _is_duplicate_key(exc: IntegrityError) -> bool:
    code, message = _driver_error(exc)
    return code == ER_DUP_ENTRY or "UNIQUE CONSTRAINT" in message or "DUPLICATE" in message


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    code, message = _driver_error(exc)
    return code == ER_NO_REFERENCED_ROW_2 or "FOREIGN KEY" in message
