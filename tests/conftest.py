import pytest

from wms.infrastructure.persistence.database import create_db_engine, ensure_schema
from wms.infrastructure.persistence.sql_inventory_ledger import SqlInventoryLedger


@pytest.fixture
def database_url(tmp_path):
    return "sqlite:///" + (tmp_path / "warehouse.db").as_posix()


@pytest.fixture
def engine(database_url):
    engine = create_db_engine(database_url)
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def ledger(engine):
    return SqlInventoryLedger(engine)
