"""Application service: Show Cart use case.

Breaks each line down into its original price, discounted price and the
amount saved. The summary total is the sum of the discounted lines, so
each line is priced exactly once.
"""

from __future__ import annotations

from shopcart.application.dto import CartLineDTO, CartSummaryDTO
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.value_objects import ZERO
from shopcart.domain.service.discount_policy import DiscountPolicy


class ShowCartHandler:

    def __init__(self, discount_policy: DiscountPolicy) -> None:
        self._discount_policy = discount_policy

    def handle(self, cart: Cart) -> CartSummaryDTO:
        lines: list[CartLineDTO] = []
        for item in cart.items:
            subtotal = item.subtotal
            discounted = self._discount_policy.apply_discount(item.product, subtotal)
            lines.append(
                CartLineDTO(
                    product_name=item.product.name,
                    category=item.product.category,
                    quantity=item.quantity,
                    unit_price=item.product.price,
                    subtotal=subtotal,
                    discounted=discounted,
                    saved=subtotal - discounted,
                )
            )

        return CartSummaryDTO(
            lines=lines,
            total_items=cart.get_total_items(),
            total=sum((line.discounted for line in lines), ZERO),
        )
