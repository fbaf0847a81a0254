"""CLI commands for logging in and out."""

from __future__ import annotations

import click

from flowershop.domain.exceptions import DomainException
from flowershop.infrastructure.cli.output import domain_error


@click.command("login")
@click.option("--login", "login_name", required=True, help="Account login.")
@click.option("--password", required=True, help="Account password.")
@click.pass_obj
def account_login(store, login_name: str, password: str) -> None:
    """Log in as an existing user."""
    try:
        user = store.session.login(login_name, password)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Logged in as {user.login}" + (" (admin)" if user.is_admin else ""))


@click.command("register")
@click.option("--login", "login_name", required=True, help="Account login.")
@click.option("--password", required=True, help="At least 6 characters.")
@click.option("--name", required=True, help="Full name.")
@click.option("--phone", required=True, help="Phone as +7(XXX)-XXX-XX-XX.")
@click.option("--email", required=True, help="E-mail address.")
@click.pass_obj
def account_register(
    store, login_name: str, password: str, name: str, phone: str, email: str
) -> None:
    """Create a customer account and log in."""
    try:
        user = store.session.register(login_name, password, name, phone, email)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Registered and logged in as {user.login}")


@click.command("logout")
@click.pass_obj
def account_logout(store) -> None:
    """Log out the current user."""
    store.session.logout()
    click.echo("Logged out.")
