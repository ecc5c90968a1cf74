"""In-memory payment simulation implementing PaymentGateway.

No network, no retries, no persistence: a positive amount always succeeds
and is given a fresh UUID4 transaction id.
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from shopcart.domain.model.value_objects import ZERO
from shopcart.domain.service.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


class PaymentService(PaymentGateway):

    def __init__(self) -> None:
        self._last_transaction_id: str | None = None

    # --- PaymentGateway interface ---------------------------------------------

    def process_payment(self, amount: Decimal) -> bool:
        """Accept any positive amount; refused attempts leave state untouched."""
        if amount is None or amount <= ZERO:
            logger.warning("Payment refused: amount %s is not positive", amount)
            return False

        self._last_transaction_id = str(uuid.uuid4())
        logger.info(
            "Payment of %s accepted, transaction %s",
            amount, self._last_transaction_id,
        )
        return True

    def get_last_transaction_id(self) -> str:
        return self._last_transaction_id or ""
