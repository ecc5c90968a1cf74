"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from decimal import Decimal
from pathlib import Path

from shopcart.domain.model.cart import Cart
from shopcart.domain.service.discount_service import DiscountService
from shopcart.infrastructure.config.json_discount_rates import load_discount_rates
from shopcart.infrastructure.payment.payment_service import PaymentService

RATES_FILE_ENV = "SHOPCART_RATES_FILE"


def discount_service(
    rates_file: Path | None = None,
    overrides: Mapping[str, str | Decimal] | None = None,
) -> DiscountService:
    """Default rates, then the rates file, then explicit *overrides*.

    Without *rates_file* the ``SHOPCART_RATES_FILE`` variable is consulted.
    """
    if rates_file is None and os.environ.get(RATES_FILE_ENV):
        rates_file = Path(os.environ[RATES_FILE_ENV])

    service = DiscountService(load_discount_rates(rates_file) if rates_file else None)
    for category, rate in (overrides or {}).items():
        service.set_category_discount(category, rate)
    return service


def payment_service() -> PaymentService:
    return PaymentService()


def new_cart(discounts: DiscountService) -> Cart:
    return Cart(discounts)
