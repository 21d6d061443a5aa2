"""CLI commands for placing orders."""

from __future__ import annotations

import dataclasses

import click

from orderentry.application.confirmation import Decision
from orderentry.application.dto import OrderDTO
from orderentry.domain.exceptions import DomainException
from orderentry.infrastructure import bootstrap
from orderentry.infrastructure.cli.terminal import ClickTerminal
from orderentry.infrastructure.config import ConfigurationError, Settings


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer:    {dto.customer_name}")
    click.echo(f"Salesperson: {dto.salesperson}")
    click.echo(f"Placed:      {dto.placed_at}")
    click.echo()
    click.echo(f"  {'Product':<34} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*62}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<34} {line.quantity:>5} {line.unit_price:>10} {line.subtotal:>10}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Order Total':<40} {dto.total:>21}")


@click.command("place")
@click.option("--salesperson", default=None, help="Identity recorded on the order.")
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=None,
    help="Give up after this many invalid answers to one prompt.",
)
@click.option("--cancel-token", default=None, help="Answer that cancels the session.")
@click.option(
    "--release-stock-on-abort/--keep-stock-on-abort",
    default=None,
    help="Return stock taken during the session when the purchase is aborted.",
)
@click.pass_obj
def order_place(
    settings: Settings,
    salesperson: str | None,
    max_attempts: int | None,
    cancel_token: str | None,
    release_stock_on_abort: bool | None,
) -> None:
    """Interactively build an order and commit or abort it."""
    overrides = {
        "salesperson": salesperson,
        "max_attempts": max_attempts,
        "cancel_token": cancel_token,
        "release_stock_on_abort": release_stock_on_abort,
    }
    try:
        settings = dataclasses.replace(
            settings, **{k: v for k, v in overrides.items() if v is not None}
        )
        handler = bootstrap.place_order_handler(settings, ClickTerminal())
        result = handler.handle()
    except (ConfigurationError, DomainException) as exc:
        raise click.ClickException(str(exc))

    if result.decision == Decision.COMMIT.value:
        click.echo()
        _display_order(result.order)
        click.echo("Completed satisfactorily")
