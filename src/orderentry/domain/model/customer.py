"""Customer aggregate.

Customers are loaded once at session start and only ever read by the
order-entry workflow.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    id: str
    last_name: str
    first_name: str
    street: str
    zip_code: str
    phone: str

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def address(self) -> str:
        return f"{self.street}, {self.zip_code}"

    def __str__(self) -> str:
        return f"{self.id:<4} {self.name:<20} {self.address:<24} {self.phone}"
