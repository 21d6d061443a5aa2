"""CLI commands listing products and customers."""

from __future__ import annotations

import click

from orderentry.domain.exceptions import DomainException
from orderentry.infrastructure import bootstrap
from orderentry.infrastructure.config import Settings


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    try:
        products = bootstrap.unit_of_work(settings).products.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'UPC':<6} {'Name':<34} {'Manufacturer':<14} {'Price':>9} {'Stock':>6}")
    click.echo("-" * 73)
    for p in products:
        click.echo(str(p))


@click.command("list")
@click.pass_obj
def customer_list(settings: Settings) -> None:
    """List all customers."""
    try:
        customers = bootstrap.unit_of_work(settings).customers.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<4} {'Name':<20} {'Address':<24} Phone")
    click.echo("-" * 62)
    for c in customers:
        click.echo(str(c))
