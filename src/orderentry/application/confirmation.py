"""Application service: the final commit-or-abort decision.

On commit the order, its lines and the products whose stock changed are
saved through the unit of work, which is then committed.  On abort the
draft is discarded and the unit of work rolled back, so nothing reaches
storage.

Stock already taken from the in-memory catalog during the session is
left as it is on abort unless ``release_stock_on_abort`` is set.  The
stored stock is never affected by an abort because nothing is written.
"""

from __future__ import annotations

import logging
from enum import Enum

from orderentry.application.prompting import UNBOUNDED, PromptPolicy, ask_yes_no
from orderentry.application.terminal import Terminal
from orderentry.domain.model.catalog import Catalog
from orderentry.domain.model.order import Order
from orderentry.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class Decision(Enum):
    COMMIT = "COMMIT"
    ABORT = "ABORT"


class ConfirmationGate:

    def __init__(
        self,
        terminal: Terminal,
        uow: UnitOfWork,
        policy: PromptPolicy = UNBOUNDED,
        release_stock_on_abort: bool = False,
    ) -> None:
        self._terminal = terminal
        self._uow = uow
        self._policy = policy
        self._release_stock_on_abort = release_stock_on_abort

    def confirm_purchase(self, order: Order, catalog: Catalog) -> Decision:
        self._terminal.say(f"Order total: {order.total}")
        if ask_yes_no(self._terminal, "Complete this purchase?", self._policy):
            self._commit(order, catalog)
            return Decision.COMMIT
        self._abort(order, catalog)
        return Decision.ABORT

    def _commit(self, order: Order, catalog: Catalog) -> None:
        self._terminal.say("Purchasing")
        touched = {line.product_upc for line in order.lines}
        order.commit()
        self._uow.orders.save_all([order])
        self._uow.products.save_all([catalog.get(upc) for upc in sorted(touched)])
        self._uow.commit()
        logger.info(
            "Committed order #%s for customer %s: %d line(s), total %s",
            order.id, order.customer.id, len(order.lines), order.total,
        )
        self._terminal.say(f"Order #{order.id} committed. Total: {order.total}")

    def _abort(self, order: Order, catalog: Catalog) -> None:
        discarded = order.abort()
        if self._release_stock_on_abort:
            for line in discarded:
                catalog.get(line.product_upc).restock(line.quantity)
        self._uow.rollback()
        logger.info(
            "Aborted order for customer %s; discarded %d line(s), stock %s",
            order.customer.id,
            len(discarded),
            "released" if self._release_stock_on_abort else "left decremented",
        )
        self._terminal.say("Order aborted. Nothing was saved.")
