"""Domain service: category discounts.

Maps a product category to a discount rate and applies it to a price.
Category lookup is case-insensitive: "Electronics", "electronics" and
"ELECTRONICS" share one rate. Unknown categories are simply not
discounted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import DiscountRate
from shopcart.domain.service.discount_policy import DiscountPolicy

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_DISCOUNTS: dict[str, Decimal] = {
    "Electronics": Decimal("0.10"),
    "Clothing": Decimal("0.15"),
    "Books": Decimal("0.05"),
    "Food": Decimal("0.00"),
}


class DiscountService(DiscountPolicy):
    """Category-based discount table, seeded with the default rates.

    *rates* entries, if given, are validated and override the defaults.
    """

    def __init__(self, rates: Mapping[str, str | float | int | Decimal] | None = None) -> None:
        # casefolded key -> (display name, rate)
        self._rates: dict[str, tuple[str, DiscountRate]] = {}
        for category, rate in DEFAULT_CATEGORY_DISCOUNTS.items():
            self._store(category, DiscountRate(rate))
        for category, rate in (rates or {}).items():
            self.set_category_discount(category, rate)

    # --- DiscountPolicy interface ---------------------------------------------

    def apply_discount(self, product: Product, price: Decimal) -> Decimal:
        if product is None:
            raise ValidationError("Product is required")
        entry = self._rates.get(_key(product.category))
        if entry is None:
            logger.debug("No discount for category %r", product.category)
            return price
        discounted = entry[1].apply(price)
        logger.debug(
            "Applied %s discount to %s: %s -> %s",
            entry[1], product.name, price, discounted,
        )
        return discounted

    # --- Rate management ------------------------------------------------------

    def set_category_discount(
        self, category: str, rate: str | float | int | Decimal
    ) -> None:
        """Insert or overwrite the rate for *category*.

        Raises ValidationError for a blank category or a rate outside [0, 1];
        the previous rate is kept in that case.
        """
        if not isinstance(category, str) or not category.strip():
            raise ValidationError("Category cannot be empty")
        discount = DiscountRate.of(rate)
        self._store(category, discount)
        logger.debug("Discount for %r set to %s", category, discount)

    def rate_for(self, category: str) -> Decimal | None:
        entry = self._rates.get(_key(category))
        return entry[1].value if entry is not None else None

    @property
    def rates(self) -> dict[str, Decimal]:
        """Snapshot of the table, keyed by the first-registered spelling."""
        return {name: rate.value for name, rate in self._rates.values()}

    # --- Internal helpers -----------------------------------------------------

    def _store(self, category: str, rate: DiscountRate) -> None:
        key = _key(category)
        existing = self._rates.get(key)
        name = existing[0] if existing is not None else category
        self._rates[key] = (name, rate)


def _key(category: str) -> str:
    return category.casefold()
