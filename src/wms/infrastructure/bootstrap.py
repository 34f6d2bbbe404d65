"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from wms.domain.exceptions import StorageError
from wms.infrastructure.config import Settings, get_settings
from wms.infrastructure.persistence.database import create_db_engine, ensure_schema
from wms.infrastructure.persistence.sql_inventory_ledger import SqlInventoryLedger


def inventory_ledger(settings: Settings | None = None) -> SqlInventoryLedger:
    """Open the configured database, creating the tables on first use."""
    settings = settings or get_settings()
    try:
        engine = create_db_engine(settings.database_url, echo=settings.echo_sql)
        ensure_schema(engine)
    except SQLAlchemyError as exc:
        raise StorageError(f"Cannot open inventory database: {exc}") from exc
    return SqlInventoryLedger(engine)
