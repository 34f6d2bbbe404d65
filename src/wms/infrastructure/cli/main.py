import logging

import click

from wms.infrastructure.cli.errors import load_settings
from wms.infrastructure.cli.inventory_commands import init_db, inventory_report, seed
from wms.infrastructure.cli.item_commands import item_define, item_delete, item_show
from wms.infrastructure.cli.menu import menu
from wms.infrastructure.cli.stock_commands import stock_in, stock_out


@click.group()
def cli() -> None:
    """WMS: Warehouse inventory ledger"""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def item() -> None:
    """Manage item definitions."""


@cli.group()
def stock() -> None:
    """Move stock in and out of locations."""


# Register subcommands
cli.add_command(init_db)
cli.add_command(inventory_report)
cli.add_command(menu)
cli.add_command(seed)
item.add_command(item_define)
item.add_command(item_delete)
item.add_command(item_show)
stock.add_command(stock_in)
stock.add_command(stock_out)
