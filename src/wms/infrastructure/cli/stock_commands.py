"""CLI commands for stock movements."""

from __future__ import annotations

import click

from wms.application.stock_in import StockInHandler
from wms.application.stock_out import StockOutHandler
from wms.domain.exceptions import DomainException
from wms.infrastructure.cli.errors import open_ledger, to_click_exception


@click.command("in")
@click.option("--code", required=True, help="Item code.")
@click.option("--location", required=True, help="Location code to shelve at.")
@click.option("--quantity", required=True, type=int, help="Units received.")
def stock_in(code: str, location: str, quantity: int) -> None:
    """Receive stock and shelve it at a location."""
    handler = StockInHandler(ledger=open_ledger())

    try:
        handler.handle(item_code=code, location_code=location, quantity=quantity)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Stocked {quantity} x {code} at {location}")


@click.command("out")
@click.option("--code", required=True, help="Item code.")
@click.option("--location", required=True, help="Location code to take stock from.")
@click.option("--quantity", required=True, type=int, help="Units removed.")
def stock_out(code: str, location: str, quantity: int) -> None:
    """Remove stock from a location."""
    handler = StockOutHandler(ledger=open_ledger())

    try:
        handler.handle(item_code=code, location_code=location, quantity=quantity)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Removed {quantity} x {code} from {location}")
