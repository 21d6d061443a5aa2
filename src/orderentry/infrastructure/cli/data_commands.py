"""CLI commands for the data store."""

from __future__ import annotations

import click

from orderentry.application.seed_data import SeedDataHandler
from orderentry.domain.exceptions import DomainException
from orderentry.infrastructure import bootstrap
from orderentry.infrastructure.config import Settings


@click.command("seed")
@click.option("--force", is_flag=True, default=False, help="Overwrite existing records.")
@click.pass_obj
def data_seed(settings: Settings, force: bool) -> None:
    """Load the sample customers and products."""
    try:
        handler = SeedDataHandler(bootstrap.unit_of_work(settings))
        customers, products = handler.handle(force=force)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Seeded {customers} customers and {products} products into {settings.data_dir}")
