"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every persisted order with its lines."""

    @abstractmethod
    def save_all(self, orders: list[Order]) -> None:
        """Persist new or updated orders together with their lines.

        Orders without an ID are assigned one.
        """
