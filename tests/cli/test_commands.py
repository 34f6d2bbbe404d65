"""End-to-end tests for the click subcommands against a temporary database."""

import pytest
from click.testing import CliRunner

from wms.domain.exceptions import RollbackFailure, ValidationError
from wms.infrastructure.cli.errors import ReconciliationRequired, to_click_exception
from wms.infrastructure.cli.inventory_commands import seed
from wms.infrastructure.cli.main import cli
from wms.infrastructure.cli.menu import menu


@pytest.fixture
def run(database_url):
    runner = CliRunner()

    def _run(*args, input=None):
        return runner.invoke(
            cli, list(args), input=input, env={"WMS_DATABASE_URL": database_url}
        )

    return _run


class TestItemCommands:

    def test_define_and_show(self, run):
        result = run("item", "define", "--code", "CPU-1", "--name", "CPU")
        assert result.exit_code == 0, result.output
        assert "Item defined: CPU-1 -> CPU" in result.output

        result = run("item", "show", "--code", "CPU-1")
        assert result.exit_code == 0
        assert "Name      : CPU" in result.output
        assert "Total     : 0" in result.output
        assert "Locations : -" in result.output

    def test_define_duplicate_fails(self, run):
        run("item", "define", "--code", "CPU-1", "--name", "CPU")
        result = run("item", "define", "--code", "CPU-1", "--name", "CPU")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_show_unknown_item(self, run):
        result = run("item", "show", "--code", "NOPE")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_delete_with_confirmation(self, run):
        run("item", "define", "--code", "CPU-1", "--name", "CPU")
        run("stock", "in", "--code", "CPU-1", "--location", "A1", "--quantity", "5")

        result = run("item", "delete", "--code", "CPU-1", input="y\n")
        assert result.exit_code == 0, result.output
        assert "all of its records deleted" in result.output
        assert run("item", "show", "--code", "CPU-1").exit_code == 1

    def test_delete_declined_keeps_item(self, run):
        run("item", "define", "--code", "CPU-1", "--name", "CPU")

        result = run("item", "delete", "--code", "CPU-1", input="n\n")
        assert result.exit_code == 1
        assert run("item", "show", "--code", "CPU-1").exit_code == 0

    def test_delete_yes_flag(self, run):
        run("item", "define", "--code", "CPU-1", "--name", "CPU")
        result = run("item", "delete", "--code", "CPU-1", "--yes")
        assert result.exit_code == 0


class TestStockCommands:

    def test_stock_flow_and_report(self, run):
        run("item", "define", "--code", "CPU-1", "--name", "CPU")
        run("stock", "in", "--code", "CPU-1", "--location", "A1", "--quantity", "50")
        run("stock", "in", "--code", "CPU-1", "--location", "A2", "--quantity", "30")

        result = run("stock", "out", "--code", "CPU-1", "--location", "A1", "--quantity", "50")
        assert result.exit_code == 0, result.output
        assert "Removed 50 x CPU-1 from A1" in result.output

        result = run("report")
        assert result.exit_code == 0
        assert "CPU-1" in result.output
        assert "A2: 30" in result.output
        assert "A1:" not in result.output

    def test_stock_out_insufficient(self, run):
        run("item", "define", "--code", "CPU-1", "--name", "CPU")
        run("stock", "in", "--code", "CPU-1", "--location", "A2", "--quantity", "30")

        result = run("stock", "out", "--code", "CPU-1", "--location", "A2", "--quantity", "100")
        assert result.exit_code == 1
        assert "Insufficient stock" in result.output

    def test_stock_in_undefined_item(self, run):
        result = run("stock", "in", "--code", "GPU-1", "--location", "A1", "--quantity", "1")
        assert result.exit_code == 1
        assert "not defined" in result.output

    def test_stock_in_non_positive_quantity(self, run):
        run("item", "define", "--code", "CPU-1", "--name", "CPU")
        result = run("stock", "in", "--code", "CPU-1", "--location", "A1", "--quantity", "0")
        assert result.exit_code == 1
        assert "positive" in result.output


class TestInventoryCommands:

    def test_empty_report(self, run):
        result = run("report")
        assert result.exit_code == 0
        assert "No items defined." in result.output

    def test_init_db(self, run):
        result = run("init-db")
        assert result.exit_code == 0
        assert "ready" in result.output

    def test_seed_prints_location_report(self, run):
        result = run("seed")
        assert result.exit_code == 0, result.output
        assert "Sample data inserted." in result.output
        assert (
            "Location: Shelf A, Row 1, Code: CPU-I7-12700K, "
            "Name: Intel Core i7-12700K, Quantity: 50"
        ) in result.output
        assert result.output.index("Shelf A, Row 2") < result.output.index("Shelf B, Row 3")

    def test_seed_twice_with_reset_is_stable(self, run):
        run("seed")
        run("seed")
        result = run("item", "show", "--code", "RAM-DDR5-32G")
        assert "Total     : 100" in result.output

    def test_unusable_database_url(self):
        result = CliRunner().invoke(
            cli, ["report"], env={"WMS_DATABASE_URL": "not a database url"}
        )
        assert result.exit_code == 1
        assert "Cannot open inventory database" in result.output

    @pytest.mark.parametrize("command", [cli, seed, menu])
    def test_bad_log_level_is_reported_without_traceback(self, database_url, command):
        result = CliRunner().invoke(
            command,
            ["report"] if command is cli else [],
            env={"WMS_DATABASE_URL": database_url, "WMS_LOG_LEVEL": "verbose"},
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid configuration" in result.output
        assert "'DEBUG'" in result.output


class TestErrorMapping:

    def test_rollback_failure_gets_its_own_exit_code(self):
        exc = to_click_exception(RollbackFailure("could not be rolled back"))
        assert isinstance(exc, ReconciliationRequired)
        assert exc.exit_code == 3
        assert exc.format_message().startswith("CRITICAL:")

    def test_other_errors_exit_with_one(self):
        exc = to_click_exception(ValidationError("bad input"))
        assert exc.exit_code == 1
