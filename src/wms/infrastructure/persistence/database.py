"""Engine construction and schema creation.

The three tables are keyed by item code throughout.  ``inventory`` and
``item_locations`` reference ``item_definitions``, so a cascade delete must
remove them before the definition.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS item_definitions (
        item_code VARCHAR(50) NOT NULL PRIMARY KEY,
        item_name VARCHAR(255) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS inventory (
        item_code VARCHAR(50) NOT NULL UNIQUE,
        total_quantity INTEGER NOT NULL CHECK (total_quantity >= 0),
        FOREIGN KEY (item_code) REFERENCES item_definitions (item_code)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS item_locations (
        item_code VARCHAR(50) NOT NULL,
        location_code VARCHAR(100) NOT NULL,
        quantity_at_location INTEGER NOT NULL CHECK (quantity_at_location >= 0),
        UNIQUE (item_code, location_code),
        FOREIGN KEY (item_code) REFERENCES item_definitions (item_code)
    )
    """,
)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Build an engine; SQLite connections get foreign keys switched on."""
    url = make_url(database_url)
    is_sqlite = url.get_backend_name() == "sqlite"

    if is_sqlite and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, echo=echo, pool_pre_ping=not is_sqlite)

    if is_sqlite:
        # SQLite ignores FOREIGN KEY clauses unless asked per connection
        @event.listens_for(engine, "connect")
        def _on_connect(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            try:
                cur.execute("PRAGMA foreign_keys=ON;")
            finally:
                cur.close()

    return engine


def ensure_schema(engine: Engine) -> None:
    """Create the ledger tables if they do not exist yet."""
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.execute(text(statement))
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))
