"""Abstract discount capability.

Defined in the domain layer so the Cart depends only on this interface.
Tests substitute spies and mocks for it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from shopcart.domain.model.product import Product


class DiscountPolicy(ABC):

    @abstractmethod
    def apply_discount(self, product: Product, price: Decimal) -> Decimal:
        """Return *price* after the discount that applies to *product*."""
