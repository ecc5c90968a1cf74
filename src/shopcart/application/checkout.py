"""Application service: Checkout use case.

Totals the cart, charges the payment gateway and, only when the payment
goes through, empties the cart. A refused payment leaves the cart as it
was so the customer can try again.
"""

from __future__ import annotations

import logging

from shopcart.application.dto import ReceiptDTO
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import Cart
from shopcart.domain.service.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, payment_gateway: PaymentGateway) -> None:
        self._payment_gateway = payment_gateway

    def handle(self, cart: Cart) -> ReceiptDTO:
        if not cart.items:
            raise ValidationError("Cart is empty")

        total = cart.calculate_total()
        if not self._payment_gateway.process_payment(total):
            logger.warning("Checkout of %s failed; cart kept", total)
            return ReceiptDTO(success=False, amount=total, transaction_id="")

        transaction_id = self._payment_gateway.get_last_transaction_id()
        cart.clear()
        return ReceiptDTO(success=True, amount=total, transaction_id=transaction_id)
