"""CLI commands for whole-inventory operations."""

from __future__ import annotations

import click

from wms.application.seed_inventory import SeedInventoryHandler
from wms.application.show_inventory import ShowInventoryHandler
from wms.domain.exceptions import DomainException
from wms.infrastructure.cli.errors import open_ledger, to_click_exception
from wms.infrastructure.cli.report import render_location_report, render_report


@click.command("report")
def inventory_report() -> None:
    """Show every item with its total and location balances."""
    handler = ShowInventoryHandler(ledger=open_ledger())

    try:
        items = handler.handle()
    except DomainException as exc:
        raise to_click_exception(exc)

    for line in render_report(items):
        click.echo(line)


@click.command("init-db")
def init_db() -> None:
    """Create the ledger tables if they are missing."""
    open_ledger()
    click.echo("Schema and tables are ready.")


@click.command("seed")
@click.option(
    "--reset/--no-reset",
    default=True,
    help="Delete existing items before loading the samples.",
)
def seed(reset: bool) -> None:
    """Load sample items and print the stock by location."""
    handler = SeedInventoryHandler(ledger=open_ledger())

    try:
        lines = handler.handle(reset=reset)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo("Sample data inserted.")
    for line in render_location_report(lines):
        click.echo(line)
