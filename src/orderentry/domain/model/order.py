"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from orderentry.domain.exceptions import ValidationError
from orderentry.domain.model.customer import Customer
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    DRAFT = "DRAFT"
    COMMITTED = "COMMITTED"
    ABORTED = "ABORTED"


@dataclass(frozen=True)
class OrderLine:
    """Captures the price snapshot of a product at the time it was added."""

    product_upc: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked when the line is confirmed

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for a customer order.

    Use ``Order.open()`` for new orders.  The ``__init__`` is left simple so
    the repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer: Customer
    salesperson: str
    lines: list[OrderLine] = field(default_factory=list)
    status: OrderStatus = OrderStatus.DRAFT
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def open(
        customer: Customer | None,
        salesperson: str,
        placed_at: datetime | None = None,
    ) -> Order:
        """Open a draft order for *customer*."""
        if customer is None:
            raise ValidationError("An order requires a customer")
        if not salesperson or not salesperson.strip():
            raise ValidationError("Salesperson identity is required")
        order = Order(id=None, customer=customer, salesperson=salesperson.strip())
        if placed_at is not None:
            order.placed_at = placed_at
        return order

    # --- Line items -----------------------------------------------------------

    def add_line(self, product: Product, quantity: Quantity) -> OrderLine:
        """Append a line for *quantity* units of *product* and take the stock.

        Stock is checked before anything changes, so a rejected quantity
        leaves both the order and the product untouched.
        """
        self._assert_draft()
        product.check_available(quantity)
        line = OrderLine(
            product_upc=product.upc,
            product_name=product.name,
            quantity=quantity,
            unit_price=product.unit_list_price,
        )
        product.remove_stock(quantity)
        self.lines.append(line)
        return line

    # --- State transitions ----------------------------------------------------

    def commit(self) -> None:
        """Transition DRAFT -> COMMITTED."""
        self._assert_draft()
        if not self.lines:
            raise ValidationError("Cannot commit an order with no line items")
        self.status = OrderStatus.COMMITTED

    def abort(self) -> list[OrderLine]:
        """Transition DRAFT -> ABORTED, discarding and returning the lines.

        Product stock is not touched here; restoring it is the caller's
        decision.
        """
        self._assert_draft()
        discarded, self.lines = self.lines, []
        self.status = OrderStatus.ABORTED
        return discarded

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result

    # --- Internal helpers -----------------------------------------------------

    def _assert_draft(self) -> None:
        if self.status != OrderStatus.DRAFT:
            raise ValidationError(
                f"Order is {self.status.value}, expected DRAFT"
            )
