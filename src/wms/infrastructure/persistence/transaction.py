"""Explicit transaction boundary for multi-statement ledger operations.

``transaction_scope`` checks a connection out of the engine, begins a
transaction and yields the connection.  A database error while connecting or
beginning raises TransactionFailure; nothing has been written at that point.
Once begun, the transaction commits when the block finishes and rolls back on
any exception:

- a DomainException raised by the block (a failed balance check, say) is
  re-raised unchanged after the rollback;
- a database error becomes a TransactionFailure;
- anything else is re-raised unchanged after the rollback;
- if the rollback itself fails, RollbackFailure is raised instead, because
  the state of the store is no longer known.

The connection goes back to the pool on every exit path, which restores its
autocommit behaviour for the next checkout.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from wms.domain.exceptions import DomainException, RollbackFailure, TransactionFailure

logger = logging.getLogger(__name__)


@contextmanager
def transaction_scope(engine: Engine, operation: str) -> Iterator[Connection]:
    try:
        conn = engine.connect()
    except SQLAlchemyError as exc:
        raise TransactionFailure(f"{operation} failed: {_describe(exc)}") from exc

    with conn:
        try:
            trans = conn.begin()
        except SQLAlchemyError as exc:
            raise TransactionFailure(f"{operation} failed: {_describe(exc)}") from exc

        try:
            yield conn
            trans.commit()
        except DomainException as exc:
            _rollback(trans, operation, exc, logging.INFO)
            raise
        except SQLAlchemyError as exc:
            _rollback(trans, operation, exc, logging.WARNING)
            raise TransactionFailure(f"{operation} failed: {_describe(exc)}") from exc
        except Exception as exc:
            _rollback(trans, operation, exc, logging.ERROR)
            raise
        logger.info("%s committed", operation)


def _rollback(trans, operation: str, cause: Exception, level: int) -> None:
    try:
        trans.rollback()
    except SQLAlchemyError as exc:
        logger.critical(
            "Rollback of %s failed after %r; state must be reconciled by hand",
            operation, cause, exc_info=exc,
        )
        raise RollbackFailure(
            f"{operation} failed and could not be rolled back: {_describe(exc)}. "
            "Database state is unverified; manual reconciliation may be needed."
        ) from exc
    logger.log(level, "%s rolled back: %s", operation, cause)


def _describe(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)
