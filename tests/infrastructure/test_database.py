"""Tests for engine construction and schema creation."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from wms.infrastructure.persistence.database import create_db_engine, ensure_schema


class TestSchema:

    def test_ensure_schema_is_idempotent(self, engine):
        ensure_schema(engine)
        with engine.connect() as conn:
            names = {
                row[0]
                for row in conn.execute(
                    text("SELECT name FROM sqlite_master WHERE type = 'table'")
                )
            }
        assert {"item_definitions", "inventory", "item_locations"} <= names

    def test_foreign_keys_enforced(self, engine):
        with pytest.raises(IntegrityError):
            with engine.begin() as conn:
                conn.execute(
                    text(
                        "INSERT INTO inventory (item_code, total_quantity) "
                        "VALUES ('GHOST', 1)"
                    )
                )

    def test_negative_quantity_rejected(self, engine):
        with engine.begin() as conn:
            conn.execute(
                text("INSERT INTO item_definitions VALUES ('CPU-1', 'CPU')")
            )
        with pytest.raises(IntegrityError):
            with engine.begin() as conn:
                conn.execute(
                    text(
                        "INSERT INTO item_locations VALUES ('CPU-1', 'A1', -1)"
                    )
                )

    def test_parent_directory_created(self, tmp_path):
        db_path = tmp_path / "nested" / "dir" / "wms.db"
        engine = create_db_engine("sqlite:///" + db_path.as_posix())
        try:
            ensure_schema(engine)
        finally:
            engine.dispose()
        assert db_path.exists()
