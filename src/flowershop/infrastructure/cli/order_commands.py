"""CLI commands for order history and the admin workflow."""

from __future__ import annotations

import click

from flowershop.application.delete_order import DeleteOwnOrderHandler
from flowershop.application.list_orders import ListAllOrdersHandler, ListMyOrdersHandler
from flowershop.application.set_order_status import SetOrderStatusHandler
from flowershop.domain.exceptions import DomainException
from flowershop.infrastructure.cli.output import display_order, domain_error

STATUSES = ["new", "processing", "confirmed", "cancelled"]


@click.command("orders")
@click.pass_obj
def order_history(store) -> None:
    """Show your orders, newest first."""
    handler = ListMyOrdersHandler(store.session, store.ledger)

    try:
        orders = handler.handle()
    except DomainException as exc:
        raise domain_error(exc)

    if not orders:
        click.echo("You have no orders yet.")
        return
    for dto in orders:
        display_order(dto)
        click.echo()


@click.command("order-delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.pass_obj
def order_delete(store, order_id: int) -> None:
    """Delete one of your orders while it is still new."""
    handler = DeleteOwnOrderHandler(store.session, store.ledger)

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Order #{order_id} deleted.")


@click.command("admin-orders")
@click.option(
    "--status",
    type=click.Choice(["all", *STATUSES]),
    default="all",
    show_default=True,
)
@click.pass_obj
def admin_orders(store, status: str) -> None:
    """List every order (admin only)."""
    handler = ListAllOrdersHandler(store.session, store.ledger)

    try:
        orders = handler.handle(status)
    except DomainException as exc:
        raise domain_error(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<5} {'User':<12} {'Created':<22} {'Status':<11} {'Total':>14}")
    click.echo("-" * 68)
    for o in orders:
        click.echo(
            f"{o.id:<5} {o.user_id:<12} {o.created_at:<22} {o.status:<11} {o.total:>14}"
        )


@click.command("admin-status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--status", required=True, type=click.Choice(STATUSES))
@click.option("--reason", default=None, help="Cancellation reason.")
@click.pass_obj
def admin_status(store, order_id: int, status: str, reason: str | None) -> None:
    """Change an order's status (admin only)."""
    handler = SetOrderStatusHandler(store.session, store.lifecycle)

    try:
        dto = handler.handle(order_id, status, reason)
    except DomainException as exc:
        raise domain_error(exc)

    message = f"Order #{dto.id} is now {dto.status}"
    if dto.cancel_reason:
        message += f" ({dto.cancel_reason})"
    click.echo(message + ".")
