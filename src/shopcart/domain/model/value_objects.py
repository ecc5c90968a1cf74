"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shopcart.domain.exceptions import ValidationError

ZERO = Decimal("0")
ONE = Decimal("1")


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce *value* to Decimal via ``str()`` so floats keep their literal."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    return amount


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot add or remove zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DiscountRate:
    """Fraction of a price taken off, between 0 and 1 inclusive."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Discount rate must be a Decimal, got {type(self.value).__name__}"
            )
        if not self.value.is_finite() or not ZERO <= self.value <= ONE:
            raise ValidationError(
                f"Discount rate must be between 0 and 1, got {self.value}"
            )

    def apply(self, price: Decimal) -> Decimal:
        return price * (ONE - self.value)

    def __str__(self) -> str:
        return f"{(self.value * 100).normalize():f}%"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(rate: str | float | int | Decimal) -> DiscountRate:
        """Convenient factory that coerces to Decimal safely."""
        try:
            amount = to_decimal(rate)
        except ValidationError as exc:
            raise ValidationError(f"Invalid discount rate: {rate!r}") from exc
        return DiscountRate(amount)
