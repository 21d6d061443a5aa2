from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from orderentry.infrastructure.cli.catalog_commands import customer_list, product_list
from orderentry.infrastructure.cli.data_commands import data_seed
from orderentry.infrastructure.cli.order_commands import order_place
from orderentry.infrastructure.config import ConfigurationError, Settings
from orderentry.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON data files.",
)
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """Order Entry — build and commit customer orders interactively"""
    try:
        settings = Settings.from_env()
        overrides: dict[str, object] = {}
        if data_dir is not None:
            overrides["data_dir"] = data_dir
        if log_level is not None:
            overrides["log_level"] = log_level.upper()
        settings = dataclasses.replace(settings, **overrides)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))

    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Place orders."""


@cli.group()
def catalog() -> None:
    """Browse products."""


@cli.group()
def customer() -> None:
    """Browse customers."""


@cli.group()
def data() -> None:
    """Manage the data store."""


# Register subcommands
order.add_command(order_place)
catalog.add_command(product_list)
customer.add_command(customer_list)
data.add_command(data_seed)
