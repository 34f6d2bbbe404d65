"""Interactive, numbered menu over the ledger use cases.

Every prompt accepts the cancel keyword, which abandons the current
operation and returns to the menu.  Operations run through ``attempt`` so a
failure is reported by kind and the loop carries on.
"""

from __future__ import annotations

import logging

import click

from wms.application.define_item import DefineItemHandler
from wms.application.delete_item import DeleteItemHandler
from wms.application.result import OperationResult, attempt
from wms.application.show_inventory import ShowInventoryHandler
from wms.application.show_item import ShowItemHandler
from wms.application.stock_in import StockInHandler
from wms.application.stock_out import StockOutHandler
from wms.domain.exceptions import ErrorKind
from wms.domain.repository.inventory_ledger import InventoryLedger
from wms.infrastructure.cli.errors import load_settings, open_ledger
from wms.infrastructure.cli.report import render_item, render_report

logger = logging.getLogger(__name__)

MENU = """
===== Warehouse Management =====
1. Define item
2. Stock in to a location
3. Query item stock
4. Full inventory report
5. Stock out (reduce stock)
6. Delete item (with all records)
0. Exit
================================"""


class Cancelled(Exception):
    """The user typed the cancel keyword at a prompt."""


class MenuSession:

    def __init__(self, ledger: InventoryLedger, cancel_command: str = "cancel") -> None:
        self._ledger = ledger
        self._cancel_command = cancel_command
        self._actions = {
            1: self.define_item,
            2: self.stock_in,
            3: self.query_item,
            4: self.full_report,
            5: self.stock_out,
            6: self.delete_item,
        }

    def run(self) -> None:
        click.echo(
            f"Type '{self._cancel_command}' at any prompt to return to the menu."
        )
        while True:
            click.echo(MENU)
            raw = click.prompt("Your choice", default="", show_default=False)
            try:
                choice = int(raw.strip())
            except ValueError:
                click.echo("Invalid input, please enter a number.")
                continue

            if choice == 0:
                click.echo("Goodbye.")
                return
            action = self._actions.get(choice)
            if action is None:
                click.echo("Invalid choice, please try again.")
                continue

            try:
                action()
            except Cancelled:
                click.echo("Operation cancelled.")

    # --- Menu actions ---------------------------------------------------------

    def define_item(self) -> None:
        code = self._ask("Item code")
        name = self._ask("Item name")
        result = attempt(DefineItemHandler(self._ledger).handle, code, name)
        self._report(result, f"Item defined: {code.strip()} -> {name.strip()}")

    def stock_in(self) -> None:
        code = self._ask("Item code to stock in")
        location = self._ask("Location code to shelve at")
        quantity = self._ask_int("Quantity received")
        result = attempt(StockInHandler(self._ledger).handle, code, location, quantity)
        self._report(result, f"Stocked {quantity} x {code.strip()} at {location.strip()}")

    def query_item(self) -> None:
        code = self._ask("Item code to query")
        result = attempt(ShowItemHandler(self._ledger).handle, code)
        if result.ok:
            self._echo_lines(render_item(result.value))
        else:
            self._report(result, "")

    def full_report(self) -> None:
        result = attempt(ShowInventoryHandler(self._ledger).handle)
        if result.ok:
            self._echo_lines(render_report(result.value))
        else:
            self._report(result, "")

    def stock_out(self) -> None:
        code = self._ask("Item code to stock out")
        location = self._ask("Location code to take stock from")
        quantity = self._ask_int("Quantity to remove")
        result = attempt(StockOutHandler(self._ledger).handle, code, location, quantity)
        self._report(result, f"Removed {quantity} x {code.strip()} from {location.strip()}")

    def delete_item(self) -> None:
        code = self._ask("Item code to delete permanently")
        found = attempt(ShowItemHandler(self._ledger).handle, code)
        if not found.ok:
            self._report(found, "")
            return

        item = found.value
        answer = self._ask(
            f"WARNING: permanently delete '{item.item_name}' ({item.item_code}) "
            "with all of its stock and location records? This cannot be undone. [y/N]"
        )
        if answer.strip().lower() not in ("y", "yes"):
            click.echo("Deletion cancelled.")
            return

        result = attempt(DeleteItemHandler(self._ledger).handle, item.item_code)
        self._report(result, f"Item '{item.item_code}' and all of its records deleted.")

    # --- Prompt helpers -------------------------------------------------------

    def _ask(self, prompt: str) -> str:
        value = click.prompt(prompt, default="", show_default=False)
        if value.strip() == self._cancel_command:
            raise Cancelled()
        return value

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self._ask(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                click.echo(
                    f"Invalid input, enter a whole number or '{self._cancel_command}'."
                )

    # --- Output helpers -------------------------------------------------------

    @staticmethod
    def _echo_lines(lines: list[str]) -> None:
        for line in lines:
            click.echo(line)

    @staticmethod
    def _report(result: OperationResult, success: str) -> None:
        if result.ok:
            click.echo(success)
        elif result.kind is ErrorKind.ROLLBACK_FAILURE:
            logger.critical("Rollback failure reported to operator: %s", result.message)
            click.secho(f"CRITICAL: {result.message}", fg="red", bold=True)
            click.echo("Check the affected item before making further changes.")
        elif result.kind is ErrorKind.VALIDATION:
            click.echo(f"Invalid input: {result.message}")
        elif result.kind is ErrorKind.TRANSACTION_FAILURE:
            click.echo(f"Failed: {result.message}. No changes were saved.")
        else:
            click.echo(f"Failed: {result.message}")


@click.command("menu")
def menu() -> None:
    """Run the interactive warehouse menu."""
    settings = load_settings()
    MenuSession(open_ledger(), cancel_command=settings.cancel_command).run()
