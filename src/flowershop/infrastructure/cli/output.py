"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

import click

from flowershop.application.dto import CartDTO, ErrorDTO, OrderDTO
from flowershop.domain.exceptions import DomainException


def domain_error(exc: DomainException) -> click.ClickException:
    """Turn a domain failure into a CLI error reading ``Kind: detail``."""
    error = ErrorDTO.from_exception(exc)
    return click.ClickException(f"{error.kind}: {error.detail}")


def display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'ID':<4} {'Product':<28} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*68}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<4} {line.product_name:<28} {line.quantity:>5} "
            f"{line.unit_price:>14} {line.line_total:>14}"
        )
    click.echo(f"  {'-'*68}")
    click.echo(f"  {'Cart Total':<38} {dto.total:>30}")


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.user_id} / {dto.recipient_name}, {dto.phone}")
    click.echo(f"Deliver:  {dto.address} on {dto.delivery_date} at {dto.delivery_time}")
    click.echo(f"Payment:  {dto.payment}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.cancel_reason:
        click.echo(f"Cancelled: {dto.cancel_reason}")
    click.echo()

    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} "
            f"{item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Order Total':<33} {dto.total:>30}")
