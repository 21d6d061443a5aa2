"""Transaction boundary around the session's repositories.

A unit of work is begun before the customer is selected and is committed
only after the purchase is confirmed.  Leaving the ``with`` block without
committing rolls everything back, so an aborted or failed session never
leaves partial records behind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.repository.customer_repository import CustomerRepository
from orderentry.domain.repository.order_repository import OrderRepository
from orderentry.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    customers: CustomerRepository
    products: ProductRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        self._committed = False
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._committed:
            self.rollback()

    def commit(self) -> None:
        """Make every staged save durable.

        Raises PersistenceError if anything fails; nothing is written in
        that case.
        """
        self._commit()
        self._committed = True

    @abstractmethod
    def _commit(self) -> None:
        """Write staged changes."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged changes."""
