"""CLI commands for item definitions."""

from __future__ import annotations

import click

from wms.application.define_item import DefineItemHandler
from wms.application.delete_item import DeleteItemHandler
from wms.application.show_item import ShowItemHandler
from wms.domain.exceptions import DomainException
from wms.infrastructure.cli.errors import open_ledger, to_click_exception
from wms.infrastructure.cli.report import render_item


@click.command("define")
@click.option("--code", required=True, help="Item code.")
@click.option("--name", required=True, help="Item name.")
def item_define(code: str, name: str) -> None:
    """Define a new item code."""
    handler = DefineItemHandler(ledger=open_ledger())

    try:
        item = handler.handle(item_code=code, item_name=name)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Item defined: {item.item_code} -> {item.item_name}")


@click.command("show")
@click.option("--code", required=True, help="Item code.")
def item_show(code: str) -> None:
    """Show total and per-location stock for one item."""
    handler = ShowItemHandler(ledger=open_ledger())

    try:
        item = handler.handle(code)
    except DomainException as exc:
        raise to_click_exception(exc)

    for line in render_item(item):
        click.echo(line)


@click.command("delete")
@click.option("--code", required=True, help="Item code.")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
def item_delete(code: str, yes: bool) -> None:
    """Delete an item with all of its stock and location records."""
    ledger = open_ledger()

    try:
        item = ShowItemHandler(ledger).handle(code)
    except DomainException as exc:
        raise to_click_exception(exc)

    if not yes:
        click.confirm(
            f"Permanently delete '{item.item_name}' ({item.item_code}) "
            "with all of its stock and location records?",
            abort=True,
        )

    try:
        DeleteItemHandler(ledger).handle(item.item_code)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Item '{item.item_code}' and all of its records deleted.")
