"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts stay Decimal;
formatting is the presentation layer's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line with its discount broken out."""

    product_name: str
    category: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal  # before discount
    discounted: Decimal
    saved: Decimal


@dataclass(frozen=True)
class CartSummaryDTO:
    """Output: the whole cart as displayed to the user."""

    lines: list[CartLineDTO]
    total_items: int
    total: Decimal

    @property
    def total_saved(self) -> Decimal:
        return sum((line.saved for line in self.lines), Decimal("0"))


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: result of a checkout attempt."""

    success: bool
    amount: Decimal
    transaction_id: str


@dataclass(frozen=True)
class ItemSpec:
    """Input: a product to put in the cart and how many of it."""

    name: str
    price: str
    category: str
    quantity: int = 1
