"""CLI commands for the shopping cart and checkout."""

from __future__ import annotations

import click

from flowershop.application.add_to_cart import AddToCartHandler
from flowershop.application.dto import DeliveryForm
from flowershop.application.show_cart import ShowCartHandler
from flowershop.application.submit_checkout import SubmitCheckoutHandler
from flowershop.application.update_cart import (
    RemoveFromCartHandler,
    SetCartQuantityHandler,
)
from flowershop.domain.exceptions import DomainException
from flowershop.infrastructure.cli.output import display_cart, display_order, domain_error


@click.command("cart-add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int)
@click.pass_obj
def cart_add(store, product_id: int, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(store.cart_engine)

    try:
        total = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{product_id} in cart: {total}")


@click.command("cart-set")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="0 removes the line.")
@click.pass_obj
def cart_set(store, product_id: int, quantity: int) -> None:
    """Set the quantity of a cart line."""
    handler = SetCartQuantityHandler(store.cart_engine)

    try:
        handler.handle(product_id, quantity)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{product_id} in cart: {max(quantity, 0)}")


@click.command("cart-remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def cart_remove(store, product_id: int) -> None:
    """Remove a product from the cart."""
    RemoveFromCartHandler(store.cart_engine).handle(product_id)
    click.echo(f"Product #{product_id} removed from cart.")


@click.command("cart")
@click.pass_obj
def cart_show(store) -> None:
    """Show the cart with its running total."""
    handler = ShowCartHandler(store.cart_engine, store.catalog)
    display_cart(handler.handle())


@click.command("checkout")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--phone", required=True, help="Phone as +7(XXX)-XXX-XX-XX.")
@click.option("--date", "delivery_date", required=True, help="Delivery date, YYYY-MM-DD.")
@click.option("--time", "delivery_time", required=True, help="Delivery time, HH:MM.")
@click.option(
    "--payment",
    type=click.Choice(["cash", "card"]),
    default="card",
    show_default=True,
)
@click.option("--recipient", default=None, help="Recipient name (defaults to yours).")
@click.pass_obj
def cart_checkout(
    store,
    address: str,
    phone: str,
    delivery_date: str,
    delivery_time: str,
    payment: str,
    recipient: str | None,
) -> None:
    """Place an order for everything in the cart."""
    handler = SubmitCheckoutHandler(store.session, store.cart_engine, store.ledger)
    form = DeliveryForm(
        phone=phone,
        address=address,
        delivery_date=delivery_date,
        delivery_time=delivery_time,
        payment=payment,
        recipient_name=recipient,
    )

    try:
        dto = handler.handle(form)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo("Thank you! Your order has been placed.")
    display_order(dto)
