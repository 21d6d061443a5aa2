"""JSON-file-backed implementation of OrderRepository.

Orders and their lines are kept as two record sets, ``orders.json`` and
``order_lines.json``; each line carries the ``order_id`` it belongs to.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation

from orderentry.domain.exceptions import DomainException, PersistenceError
from orderentry.domain.model.order import Order, OrderLine, OrderStatus
from orderentry.domain.model.value_objects import Money, Quantity
from orderentry.domain.repository.customer_repository import CustomerRepository
from orderentry.domain.repository.order_repository import OrderRepository
from orderentry.infrastructure.persistence.json_file import JsonRecordFile


class JsonOrderRepository(OrderRepository):

    def __init__(
        self,
        orders: JsonRecordFile,
        lines: JsonRecordFile,
        customers: CustomerRepository,
    ) -> None:
        self.orders = orders
        self.lines = lines
        self._customers = customers

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        customers = {c.id: c for c in self._customers.list_all()}
        lines_by_order: dict[int, list[dict]] = {}
        for raw in self.lines.load():
            lines_by_order.setdefault(raw["order_id"], []).append(raw)
        return [
            self._to_domain(raw, lines_by_order.get(raw["id"], []), customers)
            for raw in self.orders.load()
        ]

    def save_all(self, orders: list[Order]) -> None:
        order_records = self.orders.load()
        line_records = self.lines.load()

        for order in orders:
            if order.id is None:
                order.id = max([r["id"] for r in order_records], default=0) + 1

            # Upsert: replace the order and all of its lines
            order_records = [r for r in order_records if r["id"] != order.id]
            order_records.append(self._order_to_raw(order))
            line_records = [r for r in line_records if r["order_id"] != order.id]
            line_records.extend(
                self._line_to_raw(order.id, number, line)
                for number, line in enumerate(order.lines, start=1)
            )

        self.orders.stage(order_records)
        self.lines.stage(line_records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _order_to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer.id,
            "salesperson": order.salesperson,
            "status": order.status.value,
            "placed_at": order.placed_at.isoformat(),
        }

    @staticmethod
    def _line_to_raw(order_id: int, number: int, line: OrderLine) -> dict:
        return {
            "order_id": order_id,
            "line_number": number,
            "upc": line.product_upc,
            "product_name": line.product_name,
            "quantity": line.quantity.value,
            "unit_price": str(line.unit_price.amount),
            "currency": line.unit_price.currency,
        }

    @staticmethod
    def _to_domain(raw: dict, raw_lines: list[dict], customers: dict) -> Order:
        customer = customers.get(raw["customer_id"])
        if customer is None:
            raise PersistenceError(
                f"Order #{raw['id']} refers to unknown customer {raw['customer_id']!r}"
            )
        try:
            lines = [
                OrderLine(
                    product_upc=l["upc"],
                    product_name=l["product_name"],
                    quantity=Quantity(l["quantity"]),
                    unit_price=Money(Decimal(str(l["unit_price"])), l.get("currency", "USD")),
                )
                for l in sorted(raw_lines, key=lambda l: l["line_number"])
            ]
            return Order(
                id=raw["id"],
                customer=customer,
                salesperson=raw["salesperson"],
                lines=lines,
                status=OrderStatus(raw["status"]),
                placed_at=datetime.fromisoformat(raw["placed_at"]),
            )
        except KeyError as exc:
            raise PersistenceError(f"Order #{raw['id']} missing field {exc}") from exc
        except (InvalidOperation, ValueError, DomainException) as exc:
            raise PersistenceError(f"Invalid order #{raw['id']}: {exc}") from exc
