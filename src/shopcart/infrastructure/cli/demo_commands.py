"""Walk-through of the cart API: basic use, discounts, payment, edits."""

from __future__ import annotations

from decimal import Decimal

import click

from shopcart.application.checkout import CheckoutHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product
from shopcart.infrastructure.bootstrap import discount_service, new_cart, payment_service
from shopcart.infrastructure.cli.cart_commands import display_summary
from shopcart.infrastructure.cli.formatting import money


def _echo_cart(cart: Cart) -> None:
    for item in cart.items:
        click.echo(
            f"  - {item.product.name} x{item.quantity} @ {money(item.product.price)}"
            f" = {money(item.subtotal)}"
        )


def _basic_usage() -> None:
    click.echo("EXAMPLE 1: Basic usage")
    cart = new_cart(discount_service())

    cart.add_product(Product("Laptop Dell XPS", Decimal("1500.00"), "Electronics"), 1)
    cart.add_product(Product("Mouse Logitech", Decimal("50.00"), "Electronics"), 2)
    cart.add_product(Product("Clean Code", Decimal("45.00"), "Books"), 1)

    click.echo("Cart contents:")
    _echo_cart(cart)
    click.echo(f"Total items: {cart.get_total_items()}")
    click.echo(f"Total due (with discounts): {money(cart.calculate_total())}")


def _discounts() -> None:
    click.echo("EXAMPLE 2: Category discounts")
    discounts = discount_service()
    cart = new_cart(discounts)

    cart.add_product(Product("Laptop", Decimal("1000.00"), "Electronics"))
    cart.add_product(Product("T-shirt", Decimal("100.00"), "Clothing"), 2)
    cart.add_product(Product("Python Programming", Decimal("50.00"), "Books"))
    cart.add_product(Product("Apple", Decimal("5.00"), "Food"), 10)

    display_summary(ShowCartHandler(discounts).handle(cart))


def _payment() -> None:
    click.echo("EXAMPLE 3: Payment")
    cart = new_cart(discount_service())
    cart.add_product(Product("Laptop", Decimal("1200.00"), "Electronics"))
    cart.add_product(Product("Mouse", Decimal("30.00"), "Electronics"))

    click.echo(f"Total due: {money(cart.calculate_total())}")
    receipt = CheckoutHandler(payment_service()).handle(cart)
    if receipt.success:
        click.echo("Payment accepted")
        click.echo(f"  Transaction: {receipt.transaction_id}")
        click.echo(f"Cart emptied ({cart.get_total_items()} items left)")
    else:
        click.echo("Payment failed, please try again")


def _complex_cart() -> None:
    click.echo("EXAMPLE 4: Editing a cart")
    discounts = discount_service()
    cart = new_cart(discounts)

    laptop = Product("Laptop", Decimal("1000.00"), "Electronics")
    patterns = Product("Design Patterns", Decimal("50.00"), "Books")
    architecture = Product("Clean Architecture", Decimal("45.00"), "Books")
    shirt = Product("T-shirt", Decimal("80.00"), "Clothing")

    cart.add_product(laptop)
    cart.add_product(patterns, 2)
    cart.add_product(architecture)
    cart.add_product(shirt, 3)
    click.echo(f"Items: {cart.get_total_items()}  Total: {money(cart.calculate_total())}")

    click.echo("Adding another 'Design Patterns'...")
    cart.add_product(patterns)
    click.echo(f"Items: {cart.get_total_items()}  Total: {money(cart.calculate_total())}")

    click.echo("Removing one T-shirt...")
    cart.remove_product(shirt)
    click.echo(f"Items: {cart.get_total_items()}  Total: {money(cart.calculate_total())}")

    click.echo("Final cart:")
    _echo_cart(cart)

    click.echo("Raising the Electronics discount to 20%...")
    discounts.set_category_discount("Electronics", Decimal("0.20"))
    click.echo(f"New total: {money(cart.calculate_total())}")


_SCENARIOS = (_basic_usage, _discounts, _payment, _complex_cart)


@click.command("demo")
def cart_demo() -> None:
    """Run the example shopping sessions."""
    for index, scenario in enumerate(_SCENARIOS):
        if index:
            click.echo()
            click.echo("-" * 50)
            click.echo()
        scenario()
