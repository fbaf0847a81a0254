"""Entry point.

Commands are chained so that one invocation is one shopping session
against the same in-memory store, e.g.::

    flowershop login --login admin --password admin \
        cart-add --id 1 --qty 3 cart \
        checkout --address "1 Flower St." --phone "+7(999)-111-22-33" \
                 --date 2024-06-10 --time 12:00
"""

import dataclasses

import click

from flowershop.domain.exceptions import DomainException
from flowershop.infrastructure.bootstrap import build_storefront
from flowershop.infrastructure.cli.account_commands import (
    account_login,
    account_logout,
    account_register,
)
from flowershop.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_remove,
    cart_set,
    cart_show,
)
from flowershop.infrastructure.cli.catalog_commands import catalog_list, product_show
from flowershop.infrastructure.cli.order_commands import (
    admin_orders,
    admin_status,
    order_delete,
    order_history,
)
from flowershop.infrastructure.cli.output import domain_error
from flowershop.infrastructure.config import LOG_LEVELS, load_config
from flowershop.infrastructure.log_setup import configure_logging


@click.group(chain=True)
@click.option(
    "--restore-stock-on-cancel/--no-restore-stock-on-cancel",
    default=None,
    help="Give stock back when an admin cancels an order.",
)
@click.option(
    "--restore-stock-on-delete/--no-restore-stock-on-delete",
    default=None,
    help="Give stock back when a customer deletes a new order.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    restore_stock_on_cancel: bool | None,
    restore_stock_on_delete: bool | None,
    log_level: str | None,
) -> None:
    """Flower shop storefront"""
    try:
        config = load_config()
    except DomainException as exc:
        raise domain_error(exc)

    overrides = {
        "restore_stock_on_cancel": restore_stock_on_cancel,
        "restore_stock_on_delete": restore_stock_on_delete,
        "log_level": log_level.upper() if log_level else None,
    }
    config = dataclasses.replace(
        config, **{k: v for k, v in overrides.items() if v is not None}
    )

    configure_logging(config.log_level)
    if ctx.obj is None:
        ctx.obj = build_storefront(config)


# Register subcommands
cli.add_command(catalog_list)
cli.add_command(product_show)
cli.add_command(account_login)
cli.add_command(account_register)
cli.add_command(account_logout)
cli.add_command(cart_add)
cli.add_command(cart_set)
cli.add_command(cart_remove)
cli.add_command(cart_show)
cli.add_command(cart_checkout)
cli.add_command(order_history)
cli.add_command(order_delete)
cli.add_command(admin_orders)
cli.add_command(admin_status)
