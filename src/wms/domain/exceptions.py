"""Domain-level exceptions.

Every ledger failure is a subclass of DomainException so the CLI layer can
catch them uniformly and display user-friendly messages.  Each class carries
an ``ErrorKind`` so callers that prefer a result value can branch on the kind
instead of the exception type.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    OK = "ok"
    VALIDATION = "validation"
    DUPLICATE_KEY = "duplicate_key"
    REFERENTIAL = "referential"
    NOT_FOUND = "not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    STORAGE = "storage"
    TRANSACTION_FAILURE = "transaction_failure"
    ROLLBACK_FAILURE = "rollback_failure"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.VALIDATION


class ValidationError(DomainException):
    """Input was empty or out of range; raised before touching the store."""

    kind = ErrorKind.VALIDATION


class DuplicateKeyError(DomainException):
    """An item code is already defined."""

    kind = ErrorKind.DUPLICATE_KEY


class ReferentialError(DomainException):
    """Stock was recorded against an item code that is not defined."""

    kind = ErrorKind.REFERENTIAL


class EntityNotFoundError(DomainException):
    """A requested item does not exist."""

    kind = ErrorKind.NOT_FOUND


class InsufficientStockError(DomainException):
    """A stock-out asked for more than the location or total balance."""

    kind = ErrorKind.INSUFFICIENT_STOCK


class StorageError(DomainException):
    """The database rejected or failed a statement."""

    kind = ErrorKind.STORAGE


class TransactionFailure(StorageError):
    """A multi-statement operation failed and was rolled back."""

    kind = ErrorKind.TRANSACTION_FAILURE


class RollbackFailure(StorageError):
    """Undoing a failed transaction failed too.

    The database state is unverified; an operator may need to reconcile the
    affected item by hand.
    """

    kind = ErrorKind.ROLLBACK_FAILURE
