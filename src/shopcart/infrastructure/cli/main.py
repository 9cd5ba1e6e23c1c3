from pathlib import Path

import click

from shopcart.infrastructure.bootstrap import DATA_DIR_ENV
from shopcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_create,
    cart_remove,
    cart_report,
    cart_show,
    cart_total,
)
from shopcart.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from shopcart.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the store (default: ./data in the project root).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging on stderr.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """shopcart — product catalog and shopping carts"""
    configure_logging(verbose)
    ctx.obj = data_dir


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_create)
cart.add_command(cart_remove)
cart.add_command(cart_report)
cart.add_command(cart_show)
cart.add_command(cart_total)
