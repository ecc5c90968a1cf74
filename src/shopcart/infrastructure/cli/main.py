import logging

import click

from shopcart.infrastructure.cli.cart_commands import cart_quote, cart_rates
from shopcart.infrastructure.cli.demo_commands import cart_demo


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log discount and payment activity.")
def cli(verbose: bool) -> None:
    """shopcart — in-memory shopping cart"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(cart_demo)
cli.add_command(cart_quote)
cli.add_command(cart_rates)
