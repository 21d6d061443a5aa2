"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from orderentry.application.place_order import PlaceOrderHandler
from orderentry.application.terminal import Terminal
from orderentry.infrastructure.config import Settings
from orderentry.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def unit_of_work(settings: Settings) -> JsonUnitOfWork:
    return JsonUnitOfWork(settings.data_dir)


def place_order_handler(settings: Settings, terminal: Terminal) -> PlaceOrderHandler:
    return PlaceOrderHandler(
        uow=unit_of_work(settings),
        terminal=terminal,
        salesperson=settings.salesperson,
        policy=settings.prompt_policy,
        release_stock_on_abort=settings.release_stock_on_abort,
    )
