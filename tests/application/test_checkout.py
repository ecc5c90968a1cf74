"""Integration tests for the Checkout use case.

Uses a fake payment gateway, so no real payments are made.
"""

from decimal import Decimal
from unittest.mock import create_autospec

import pytest

from shopcart.application.checkout import CheckoutHandler
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product
from shopcart.domain.service.discount_service import DiscountService
from shopcart.domain.service.payment_gateway import PaymentGateway
from shopcart.infrastructure.payment.payment_service import PaymentService
from tests.fakes import FakePaymentGateway


def _cart() -> Cart:
    cart = Cart(DiscountService())
    cart.add_product(Product("Laptop", Decimal("1200.00"), "Electronics"))
    cart.add_product(Product("Mouse", Decimal("30.00"), "Electronics"))
    return cart


class TestCheckoutHappyPath:

    def test_charges_discounted_total(self):
        gateway = FakePaymentGateway()
        CheckoutHandler(gateway).handle(_cart())
        assert gateway.charged == [Decimal("1107.00")]

    def test_returns_receipt_and_clears_cart(self):
        cart = _cart()
        receipt = CheckoutHandler(FakePaymentGateway(transaction_id="TXN-42")).handle(cart)

        assert receipt.success is True
        assert receipt.amount == Decimal("1107.00")
        assert receipt.transaction_id == "TXN-42"
        assert cart.items == ()

    def test_with_simulated_service(self):
        service = PaymentService()
        receipt = CheckoutHandler(service).handle(_cart())
        assert receipt.transaction_id == service.get_last_transaction_id() != ""


class TestCheckoutFailure:

    def test_refused_payment_keeps_cart(self):
        cart = _cart()
        receipt = CheckoutHandler(FakePaymentGateway(succeed=False)).handle(cart)

        assert receipt.success is False
        assert receipt.transaction_id == ""
        assert cart.get_total_items() == 2

    def test_free_cart_refused_by_simulated_service(self):
        cart = Cart(DiscountService())
        cart.add_product(Product("Sample", Decimal("0"), "Food"))
        receipt = CheckoutHandler(PaymentService()).handle(cart)
        assert receipt.success is False
        assert len(cart.items) == 1

    def test_empty_cart_rejected_before_payment(self):
        gateway = FakePaymentGateway()
        with pytest.raises(ValidationError, match="Cart is empty"):
            CheckoutHandler(gateway).handle(Cart(DiscountService()))
        assert gateway.charged == []


class TestCheckoutWithMockedGateway:

    def test_charges_once_with_cart_total(self):
        gateway = create_autospec(PaymentGateway, instance=True)
        gateway.process_payment.return_value = True
        gateway.get_last_transaction_id.return_value = "MOCK-TXN-123"

        receipt = CheckoutHandler(gateway).handle(_cart())

        gateway.process_payment.assert_called_once_with(Decimal("1107.00"))
        assert receipt.transaction_id == "MOCK-TXN-123"

    def test_refusal_depends_on_amount(self):
        gateway = create_autospec(PaymentGateway, instance=True)
        gateway.process_payment.side_effect = lambda amount: amount < Decimal("1000")
        handler = CheckoutHandler(gateway)

        small = Cart(DiscountService())
        small.add_product(Product("Book", Decimal("50.00"), "Books"))
        assert handler.handle(small).success is True
        assert handler.handle(_cart()).success is False

        assert gateway.process_payment.call_count == 2
        gateway.get_last_transaction_id.assert_called_once_with()
