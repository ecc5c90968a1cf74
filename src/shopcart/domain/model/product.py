"""Product value object.

A product is what a cart line points at. Two products with the same name,
price and category are interchangeable, so the cart merges them into one line.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import ZERO, to_decimal


@dataclass(frozen=True)
class Product:
    """A sellable item.

    Frozen dataclass: equality and hashing are structural over all three
    fields. ``category`` is compared exactly here; case folding belongs to
    the discount lookup.
    """

    name: str
    price: Decimal
    category: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Product name cannot be empty")

        price = to_decimal(self.price)
        if price < ZERO:
            raise ValidationError(f"Price cannot be negative, got {price}")
        object.__setattr__(self, "price", price)

        if not isinstance(self.category, str) or not self.category.strip():
            raise ValidationError("Category cannot be empty")
