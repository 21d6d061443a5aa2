"""In-memory fakes for testing.

The fake repositories implement the same abstract interfaces as the JSON
repositories but keep everything in dicts.  Saves are staged until the
fake unit of work commits, like the real one.  No file I/O, no side
effects.
"""

from __future__ import annotations

from orderentry.application.terminal import Terminal
from orderentry.domain.exceptions import PersistenceError
from orderentry.domain.model.customer import Customer
from orderentry.domain.model.order import Order
from orderentry.domain.model.product import Product
from orderentry.domain.repository.customer_repository import CustomerRepository
from orderentry.domain.repository.order_repository import OrderRepository
from orderentry.domain.repository.product_repository import ProductRepository
from orderentry.domain.repository.unit_of_work import UnitOfWork


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {c.id: c for c in customers or []}

    def list_all(self) -> list[Customer]:
        return list(self._store.values())

    def save_all(self, customers: list[Customer]) -> None:
        for c in customers:
            self._store[c.id] = c


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {p.upc: p for p in products or []}
        self.pending: dict[str, Product] = {}
        self.saved_stock: dict[str, int] = {p.upc: p.units_in_stock for p in products or []}

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save_all(self, products: list[Product]) -> None:
        for p in products:
            self.pending[p.upc] = p

    def commit_pending(self) -> None:
        for upc, p in self.pending.items():
            self._store[upc] = p
            self.saved_stock[upc] = p.units_in_stock
        self.pending.clear()


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self.pending: list[Order] = []
        self._next_id = 1

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save_all(self, orders: list[Order]) -> None:
        for order in orders:
            if order.id is None:
                order.id = self._next_id
                self._next_id += 1
            self.pending.append(order)

    def commit_pending(self) -> None:
        for order in self.pending:
            self._store[order.id] = order
        self.pending.clear()


class FakeUnitOfWork(UnitOfWork):

    def __init__(
        self,
        customers: list[Customer] | None = None,
        products: list[Product] | None = None,
        fail_on_commit: bool = False,
    ) -> None:
        self.customers = FakeCustomerRepository(customers)
        self.products = FakeProductRepository(products)
        self.orders = FakeOrderRepository()
        self.fail_on_commit = fail_on_commit
        self.commits = 0
        self.rollbacks = 0

    def _commit(self) -> None:
        if self.fail_on_commit:
            raise PersistenceError("disk full")
        self.products.commit_pending()
        self.orders.commit_pending()
        self.commits += 1

    def rollback(self) -> None:
        self.products.pending.clear()
        self.orders.pending.clear()
        self.rollbacks += 1


class ScriptedTerminal(Terminal):
    """Answers prompts from a fixed list and records everything shown."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise AssertionError(f"No scripted answer left for prompt {prompt!r}")
        return self._answers.pop(0)

    def say(self, message: str = "") -> None:
        self.lines.append(message)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    @property
    def remaining(self) -> int:
        return len(self._answers)
