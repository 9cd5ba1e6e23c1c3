"""CLI commands for the ShoppingCart aggregate."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import click

from shopcart.application.abandoned_carts_report import AbandonedCartsReportHandler
from shopcart.application.add_cart_item import AddCartItemHandler
from shopcart.application.checkout_cart import CheckoutCartHandler
from shopcart.application.create_cart import CreateCartHandler
from shopcart.application.dto import CartDTO
from shopcart.application.remove_cart_item import RemoveCartItemHandler
from shopcart.application.show_cart import CartTotalHandler, ShowCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import unit_of_work


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    click.echo(f"Cart #{dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Modified: {dto.last_modified_at}")
    if dto.checked_out_at:
        click.echo(f"Checked out: {dto.checked_out_at}")
    click.echo()

    if not dto.items:
        click.echo("  (empty)")
    else:
        click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
        click.echo(f"  {'-'*54}")
        for item in dto.items:
            click.echo(
                f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5} "
                f"{item.unit_price:>10} {item.line_total:>10}"
            )
        click.echo(f"  {'-'*54}")

    click.echo(f"  {'Cart Total':<34} {dto.total:>20}")


@click.command("create")
@click.pass_obj
def cart_create(data_dir: Path | None) -> None:
    """Open a new, empty shopping cart."""
    handler = CreateCartHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{dto.id} created  (status={dto.status})")


@click.command("show")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID to display.")
@click.pass_obj
def cart_show(data_dir: Path | None, cart_id: int) -> None:
    """Show the contents of a cart."""
    handler = ShowCartHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("add")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.option("--product-id", required=True, type=int, help="Product to add.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.pass_obj
def cart_add(data_dir: Path | None, cart_id: int, product_id: int, quantity: int) -> None:
    """Add units of a product to a cart."""
    handler = AddCartItemHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(cart_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.option("--product-id", required=True, type=int, help="Product to remove.")
@click.option(
    "--quantity",
    default=None,
    type=int,
    help="Units to remove. Omit to remove the product entirely.",
)
@click.pass_obj
def cart_remove(
    data_dir: Path | None, cart_id: int, product_id: int, quantity: int | None
) -> None:
    """Remove units of a product from a cart."""
    handler = RemoveCartItemHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(cart_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("total")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.pass_obj
def cart_total(data_dir: Path | None, cart_id: int) -> None:
    """Print the exact total price of a cart."""
    handler = CartTotalHandler(unit_of_work(data_dir))

    try:
        total = handler.handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(str(total.amount))


@click.command("checkout")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID to check out.")
@click.pass_obj
def cart_checkout(data_dir: Path | None, cart_id: int) -> None:
    """Check out a cart. A checked out cart can no longer change."""
    handler = CheckoutCartHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{cart_id} checked out — total {dto.total}.")


@click.command("report")
@click.option(
    "--date",
    "report_date",
    required=True,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Report day (YYYY-MM-DD); carts created up to the end of it count.",
)
@click.pass_obj
def cart_report(data_dir: Path | None, report_date: datetime) -> None:
    """Print the abandoned carts report for a day."""
    day: date = report_date.date()
    handler = AbandonedCartsReportHandler(unit_of_work(data_dir))

    try:
        carts = handler.handle(day)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"--- Abandoned Carts Report for {day.isoformat()} ---")
    if not carts:
        click.echo(f"No abandoned carts found for {day.isoformat()}.")
        return

    for dto in carts:
        click.echo(f"Cart ID: {dto.id}")
        click.echo(f"  Created At: {dto.created_at}")
        click.echo("  Items:")
        for item in dto.items:
            click.echo(
                f"    - {item.product_name} (ID: {item.product_id}), "
                f"Quantity: {item.quantity}, Price: {item.unit_price}, "
                f"Item Total: {item.line_total}"
            )
        click.echo("-" * 36)
    click.echo("--- End of Report ---")
