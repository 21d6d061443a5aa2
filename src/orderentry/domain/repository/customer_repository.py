"""Abstract repository for the Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every known customer."""

    @abstractmethod
    def save_all(self, customers: list[Customer]) -> None:
        """Insert or update each customer, keyed by ID."""
