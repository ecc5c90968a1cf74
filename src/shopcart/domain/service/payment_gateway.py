"""Abstract payment capability.

Concrete implementations (the in-memory simulation, test fakes) live
outside the domain layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class PaymentGateway(ABC):

    @abstractmethod
    def process_payment(self, amount: Decimal) -> bool:
        """Charge *amount*; return False when the payment is refused."""

    @abstractmethod
    def get_last_transaction_id(self) -> str:
        """Return the id of the last successful payment, or an empty string."""
