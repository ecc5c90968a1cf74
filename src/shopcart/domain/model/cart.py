"""Cart aggregate: line items plus the discount policy used to total them.

The Cart is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from shopcart.domain.exceptions import EntityNotFoundError, ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import ZERO, Quantity
from shopcart.domain.service.discount_policy import DiscountPolicy


@dataclass
class CartItem:
    """One distinct product in the cart and how many of it.

    Only the owning Cart changes ``quantity``; it drops the item once the
    quantity reaches zero.
    """

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if self.product is None:
            raise ValidationError("Product is required")
        self.quantity = Quantity(self.quantity).value

    @property
    def subtotal(self) -> Decimal:
        """Undiscounted price of the line."""
        return self.product.price * self.quantity

    @property
    def is_empty(self) -> bool:
        return self.quantity <= 0

    def _add(self, qty: int) -> None:
        self.quantity += Quantity(qty).value

    def _remove(self, qty: int) -> None:
        """Take *qty* units off; may drop the quantity to zero or below."""
        self.quantity -= Quantity(qty).value


class Cart:
    """Aggregate root for a shopping cart.

    Invariants:
    - at most one ``CartItem`` per distinct (structurally equal) Product
    - every item present has ``quantity >= 1``
    - items keep the order in which their product was first added
    """

    def __init__(self, discount_service: DiscountPolicy) -> None:
        if discount_service is None:
            raise ValidationError("Discount service is required")
        self._discount_service = discount_service
        self._items: list[CartItem] = []

    @property
    def items(self) -> tuple[CartItem, ...]:
        """Ordered copies of the line items; changing them leaves the cart as is."""
        return tuple(replace(item) for item in self._items)

    # --- Mutations ------------------------------------------------------------

    def add_product(self, product: Product, quantity: int = 1) -> None:
        """Add *quantity* units, merging with an existing line for *product*."""
        if product is None:
            raise ValidationError("Product is required")
        Quantity(quantity)

        item = self._find_item(product)
        if item is not None:
            item._add(quantity)
        else:
            self._items.append(CartItem(product=product, quantity=quantity))

    def remove_product(self, product: Product, quantity: int = 1) -> None:
        """Remove *quantity* units of *product*.

        Removing at least as many units as the line holds drops the line;
        asking for more than is present is not an error.
        """
        if product is None:
            raise ValidationError("Product is required")
        Quantity(quantity)

        item = self._find_item(product)
        if item is None:
            raise EntityNotFoundError(f"Product '{product.name}' not found in cart")

        item._remove(quantity)
        if item.is_empty:
            self._items = [line for line in self._items if line is not item]

    def clear(self) -> None:
        self._items.clear()

    # --- Computed values ------------------------------------------------------

    def calculate_total(self) -> Decimal:
        """Sum of every line subtotal after its discount.

        The discount policy is asked once per line on every call; rates may
        have changed since the last total.
        """
        total = ZERO
        for item in self._items:
            total += self._discount_service.apply_discount(item.product, item.subtotal)
        return total

    def get_total_items(self) -> int:
        return sum(item.quantity for item in self._items)

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product: Product) -> CartItem | None:
        for item in self._items:
            if item.product == product:
                return item
        return None
