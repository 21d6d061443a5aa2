"""Application service: Place Order use case.

Runs one interactive order-entry session inside a single unit of work:

1. Load customers and products.
2. Select the customer.
3. Open a draft order and build it line by line.
4. Commit or abort at the confirmation gate.

Any exception leaving this handler rolls the unit of work back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from orderentry.application.confirmation import ConfirmationGate, Decision
from orderentry.application.dto import OrderDTO, PlacementResult
from orderentry.application.order_builder import OrderBuilder
from orderentry.application.prompting import UNBOUNDED, PromptPolicy
from orderentry.application.select_customer import CustomerSelector
from orderentry.application.terminal import Terminal
from orderentry.domain.exceptions import ValidationError
from orderentry.domain.model.catalog import Catalog, CustomerDirectory
from orderentry.domain.model.order import Order
from orderentry.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlaceOrderHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        terminal: Terminal,
        salesperson: str,
        policy: PromptPolicy = UNBOUNDED,
        release_stock_on_abort: bool = False,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow = uow
        self._terminal = terminal
        self._salesperson = salesperson
        self._policy = policy
        self._release_stock_on_abort = release_stock_on_abort
        self._clock = clock

    def handle(self) -> PlacementResult:
        with self._uow:
            directory = CustomerDirectory(self._uow.customers.list_all())
            catalog = Catalog(self._uow.products.list_all())
            if len(catalog) == 0:
                raise ValidationError("The catalog is empty; nothing can be ordered")
            logger.debug(
                "Loaded %d customer(s) and %d product(s)", len(directory), len(catalog)
            )

            customer = CustomerSelector(self._terminal, self._policy).select_customer(directory)
            order = Order.open(customer, self._salesperson, self._clock())

            OrderBuilder(self._terminal, self._policy).build(order, catalog)

            if not order.lines:
                order.abort()
                self._terminal.say("No products were added. Nothing to purchase.")
                return PlacementResult(Decision.ABORT.value, OrderDTO.from_order(order))

            gate = ConfirmationGate(
                self._terminal,
                self._uow,
                self._policy,
                release_stock_on_abort=self._release_stock_on_abort,
            )
            decision = gate.confirm_purchase(order, catalog)
            return PlacementResult(decision.value, OrderDTO.from_order(order))
