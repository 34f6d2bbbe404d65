"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so an empty code or a non-positive quantity
never reaches the ledger.
"""

from __future__ import annotations

from dataclasses import dataclass

from wms.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Code:
    """A non-empty identifier such as an item code or a location code."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Code must be a string, got {type(self.value).__name__}"
            )
        if not self.value:
            raise ValidationError("Code must not be empty")

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(raw: str | None, label: str = "Code") -> Code:
        """Strip surrounding whitespace and reject empty input."""
        value = (raw or "").strip()
        if not value:
            raise ValidationError(f"{label} must not be empty")
        return Code(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Stock is always moved in whole units and a movement of zero is
    meaningless, so both stock-in and stock-out require ``value > 0``.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def parse(raw: str | int) -> Quantity:
        """Build a Quantity from user input such as ``"25"``."""
        if isinstance(raw, int):
            return Quantity(raw)
        try:
            return Quantity(int(str(raw).strip()))
        except ValueError as exc:
            raise ValidationError(f"Invalid quantity: {raw!r}") from exc
