"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from shopcart.application.add_product import AddProductHandler
from shopcart.application.delete_product import DeleteProductHandler
from shopcart.application.show_product import ListProductsHandler, ShowProductHandler
from shopcart.application.update_product import UpdateProductHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--type", "type_", required=True, help="Category label (e.g. Electronics).")
@click.pass_obj
def product_add(data_dir: Path | None, name: str, price: str, type_: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work(data_dir))

    try:
        product = handler.handle(name=name, price=price, type=type_)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path | None) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(unit_of_work(data_dir))

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Type':<15} {'Price':>10}")
    click.echo("-" * 54)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.type:<15} {str(p.price):>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(data_dir: Path | None, product_id: int) -> None:
    """Show a single product."""
    handler = ShowProductHandler(unit_of_work(data_dir))

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}")
    click.echo(f"Name:  {product.name}")
    click.echo(f"Type:  {product.type}")
    click.echo(f"Price: {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--type", "type_", required=True, help="New category label.")
@click.pass_obj
def product_update(
    data_dir: Path | None, product_id: int, name: str, price: str, type_: str
) -> None:
    """Replace a product's name, price and type."""
    handler = UpdateProductHandler(unit_of_work(data_dir))

    try:
        product = handler.handle(product_id=product_id, name=name, price=price, type=type_)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(data_dir: Path | None, product_id: int) -> None:
    """Delete a product from the catalog."""
    handler = DeleteProductHandler(unit_of_work(data_dir))

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
