"""Mapping from domain and configuration errors to click exit behaviour."""

from __future__ import annotations

import click
from pydantic import ValidationError as SettingsError

from wms.domain.exceptions import DomainException, RollbackFailure
from wms.domain.repository.inventory_ledger import InventoryLedger
from wms.infrastructure.bootstrap import inventory_ledger
from wms.infrastructure.config import Settings, get_settings


class ReconciliationRequired(click.ClickException):
    """A rollback failed; the exit code lets scripts tell this apart."""

    exit_code = 3

    def format_message(self) -> str:
        return f"CRITICAL: {self.message}"


def to_click_exception(exc: DomainException) -> click.ClickException:
    if isinstance(exc, RollbackFailure):
        return ReconciliationRequired(str(exc))
    return click.ClickException(str(exc))


def load_settings() -> Settings:
    """Read the settings, reporting bad ``WMS_*`` values as a CLI error."""
    try:
        return get_settings()
    except SettingsError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise click.ClickException(f"Invalid configuration: {problems}") from exc


def open_ledger() -> InventoryLedger:
    """Open the configured ledger, turning connection problems into a CLI error."""
    settings = load_settings()
    try:
        return inventory_ledger(settings)
    except DomainException as exc:
        raise to_click_exception(exc)
