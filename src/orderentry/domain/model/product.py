"""Product aggregate.

Products live independently of orders. The only mutation the order-entry
workflow performs on them is the stock decrement when a line is confirmed.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderentry.domain.exceptions import InvalidQuantityError, ValidationError
from orderentry.domain.model.value_objects import Money, Quantity


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``units_in_stock`` is never negative
    - ``unit_list_price`` is a non-negative Money (enforced by Money)
    """

    upc: str
    name: str
    manufacturer: str
    model: str
    unit_list_price: Money
    units_in_stock: int

    def __post_init__(self) -> None:
        if self.units_in_stock < 0:
            raise ValidationError(
                f"Units in stock for {self.name} cannot be negative"
            )

    def can_supply(self, quantity: Quantity) -> bool:
        return quantity.value <= self.units_in_stock

    def check_available(self, quantity: Quantity) -> None:
        """Raise InvalidQuantityError if *quantity* exceeds current stock."""
        if not self.can_supply(quantity):
            raise InvalidQuantityError(
                f"Quantity of {quantity} not available for {self.name}"
            )

    def remove_stock(self, quantity: Quantity) -> None:
        """Take *quantity* units out of stock."""
        self.check_available(quantity)
        self.units_in_stock -= quantity.value

    def restock(self, quantity: Quantity) -> None:
        self.units_in_stock += quantity.value

    def __str__(self) -> str:
        return (
            f"{self.upc:<6} {self.name:<34} {self.manufacturer:<14} "
            f"{str(self.unit_list_price):>9} {self.units_in_stock:>6}"
        )
