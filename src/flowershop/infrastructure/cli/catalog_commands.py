"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from flowershop.application.browse_catalog import (
    BrowseCatalogHandler,
    ShowProductHandler,
)
from flowershop.domain.exceptions import DomainException
from flowershop.infrastructure.cli.output import domain_error


@click.command("catalog")
@click.option(
    "--category",
    type=click.Choice(["all", "flowers", "bouquets", "packaging"]),
    default="all",
    show_default=True,
)
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(["new", "name", "country", "price_asc", "price_desc"]),
    default="new",
    show_default=True,
)
@click.pass_obj
def catalog_list(store, category: str, sort_by: str) -> None:
    """List products that are in stock."""
    handler = BrowseCatalogHandler(store.catalog)

    try:
        products = handler.handle(category=category, sort_by=sort_by)
    except DomainException as exc:
        raise domain_error(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<4} {'Name':<28} {'Category':<10} {'Price':>14} {'Stock':>6}")
    click.echo("-" * 66)
    for p in products:
        marker = "*" if p.is_new else " "
        click.echo(
            f"{p.id:<4} {p.name:<28} {p.category:<10} {p.price:>14} {p.stock:>6}{marker}"
        )


@click.command("product")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(store, product_id: int) -> None:
    """Show a single product."""
    handler = ShowProductHandler(store.catalog)

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"#{p.id} {p.name}  ({p.category})")
    click.echo(f"Price:   {p.price}")
    click.echo(f"Stock:   {p.stock}")
    click.echo(f"Origin:  {p.country}, colour {p.color}")
    click.echo(p.description)
