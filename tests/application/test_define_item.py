"""Integration tests for the DefineItem use case."""

import pytest

from wms.application.define_item import DefineItemHandler
from wms.domain.exceptions import DuplicateKeyError, ValidationError
from tests.fakes import FakeInventoryLedger


class TestDefineItem:

    def test_define_registers_item(self):
        ledger = FakeInventoryLedger()
        item = DefineItemHandler(ledger).handle("CPU-1", "CPU")

        assert item.item_code == "CPU-1"
        assert ledger.get_item("CPU-1").item_name == "CPU"

    def test_duplicate_code_rejected(self):
        ledger = FakeInventoryLedger()
        handler = DefineItemHandler(ledger)
        handler.handle("CPU-1", "CPU")

        with pytest.raises(DuplicateKeyError, match="already exists"):
            handler.handle("CPU-1", "Another CPU")

    def test_empty_name_rejected_before_store_access(self):
        ledger = FakeInventoryLedger()
        with pytest.raises(ValidationError):
            DefineItemHandler(ledger).handle("CPU-1", "")
        assert ledger.calls == []
