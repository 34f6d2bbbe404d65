"""Result wrapper for callers that branch on an error kind.

``attempt`` runs a use case and folds any DomainException into an
OperationResult, so an interactive loop can react to the kind of failure
(for example, warn loudly on a failed rollback) without a ladder of
``except`` clauses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from wms.domain.exceptions import DomainException, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    kind: ErrorKind
    value: T | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is ErrorKind.OK


def attempt(operation: Callable[..., T], *args: Any, **kwargs: Any) -> OperationResult[T]:
    try:
        value = operation(*args, **kwargs)
    except DomainException as exc:
        return OperationResult(kind=exc.kind, message=str(exc))
    return OperationResult(kind=ErrorKind.OK, value=value)
