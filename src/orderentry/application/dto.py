"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderentry.domain.model.order import Order


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line item as displayed to the user."""

    upc: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$9.97"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as it stood at the end of the session."""

    id: int | None
    customer_name: str
    salesperson: str
    status: str
    lines: list[OrderLineDTO]
    total: str
    placed_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer.name,
            salesperson=order.salesperson,
            status=order.status.value,
            lines=[
                OrderLineDTO(
                    upc=line.product_upc,
                    product_name=line.product_name,
                    quantity=line.quantity.value,
                    unit_price=str(line.unit_price),
                    subtotal=str(line.subtotal),
                )
                for line in order.lines
            ],
            total=str(order.total),
            placed_at=order.placed_at.strftime("%m/%d/%Y %H:%M:%S"),
        )


@dataclass(frozen=True)
class PlacementResult:
    """Output: how an order-entry session ended."""

    decision: str  # "COMMIT" or "ABORT"
    order: OrderDTO
