"""CLI commands for building, pricing and paying for a cart."""

from __future__ import annotations

from pathlib import Path

import click

from shopcart.application.checkout import CheckoutHandler
from shopcart.application.dto import CartSummaryDTO, ItemSpec
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import DiscountRate
from shopcart.infrastructure.bootstrap import discount_service, new_cart, payment_service
from shopcart.infrastructure.cli.formatting import money


def _parse_item(raw: str) -> ItemSpec:
    """Parse 'Name:Price:Category[:Qty]' into an ItemSpec."""
    parts = [part.strip() for part in raw.split(":")]
    if len(parts) not in (3, 4):
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'Name:Price:Category[:Qty]'."
        )
    name, price, category = parts[:3]
    qty = 1
    if len(parts) == 4:
        try:
            qty = int(parts[3])
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{parts[3]}' for product '{name}'."
            )
    return ItemSpec(name=name, price=price, category=category, quantity=qty)


def _parse_discount(raw: str) -> tuple[str, str]:
    """Parse 'Category=Rate'."""
    if "=" not in raw:
        raise click.BadParameter(
            f"Invalid discount format '{raw}'. Expected 'Category=Rate'."
        )
    category, rate = raw.rsplit("=", 1)
    return category.strip(), rate.strip()


def display_summary(summary: CartSummaryDTO) -> None:
    """Shared formatting for displaying a priced cart."""
    click.echo(f"  {'Product':<20} {'Category':<12} {'Qty':>5} {'Price':>12} {'Discounted':>12}")
    click.echo(f"  {'-'*65}")
    for line in summary.lines:
        click.echo(
            f"  {line.product_name:<20} {line.category:<12} {line.quantity:>5} "
            f"{money(line.subtotal):>12} {money(line.discounted):>12}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Items':<39} {summary.total_items:>5}")
    click.echo(f"  {'You save':<45} {money(summary.total_saved):>12}")
    click.echo(f"  {'Total':<45} {money(summary.total):>12}")


rates_option = click.option(
    "--rates",
    "rates_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="JSON file of category discount overrides.",
)


@click.command("quote")
@click.option(
    "--item", "items", required=True, multiple=True,
    help="Item as 'Name:Price:Category[:Qty]'. Repeatable.",
)
@click.option(
    "--discount", "discounts", multiple=True,
    help="Override a category rate, e.g. 'Electronics=0.20'. Repeatable.",
)
@rates_option
@click.option("--pay", is_flag=True, help="Check out after pricing the cart.")
def cart_quote(
    items: tuple[str, ...],
    discounts: tuple[str, ...],
    rates_file: Path | None,
    pay: bool,
) -> None:
    """Price a cart of items, optionally paying for it."""
    specs = [_parse_item(raw) for raw in items]
    overrides = dict(_parse_discount(raw) for raw in discounts)

    try:
        discount_policy = discount_service(rates_file=rates_file, overrides=overrides)
        cart = new_cart(discount_policy)
        for spec in specs:
            cart.add_product(Product(spec.name, spec.price, spec.category), spec.quantity)
        summary = ShowCartHandler(discount_policy).handle(cart)
        display_summary(summary)

        if not pay:
            return
        receipt = CheckoutHandler(payment_service()).handle(cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo()
    if receipt.success:
        click.echo(f"Payment of {money(receipt.amount)} accepted")
        click.echo(f"Transaction: {receipt.transaction_id}")
    else:
        raise click.ClickException(f"Payment of {money(receipt.amount)} was refused")


@click.command("rates")
@rates_option
def cart_rates(rates_file: Path | None) -> None:
    """List the effective category discount rates."""
    try:
        service = discount_service(rates_file=rates_file)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Category':<20} {'Discount':>10}")
    click.echo("-" * 31)
    for category, rate in service.rates.items():
        click.echo(f"{category:<20} {str(DiscountRate(rate)):>10}")
