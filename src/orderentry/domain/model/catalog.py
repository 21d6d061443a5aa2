"""In-memory lookup tables built once per session.

Both collections are keyed by identifier.  Identifiers are unique, so a
lookup either finds the one matching record or raises
EntityNotFoundError.
"""

from __future__ import annotations

from collections.abc import Iterable

from orderentry.domain.exceptions import EntityNotFoundError, ValidationError
from orderentry.domain.model.customer import Customer
from orderentry.domain.model.product import Product


class Catalog:
    """The products available for selection, with live stock counts."""

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            if product.upc in self._products:
                raise ValidationError(f"Duplicate UPC '{product.upc}' in catalog")
            self._products[product.upc] = product

    def get(self, upc: str) -> Product:
        product = self._products.get(upc.strip())
        if product is None:
            raise EntityNotFoundError(f"No product with UPC '{upc.strip()}'")
        return product

    def list_all(self) -> list[Product]:
        return list(self._products.values())

    def __len__(self) -> int:
        return len(self._products)


class CustomerDirectory:
    """The customers an order can be placed for."""

    def __init__(self, customers: Iterable[Customer]) -> None:
        self._customers: dict[str, Customer] = {}
        for customer in customers:
            if customer.id in self._customers:
                raise ValidationError(f"Duplicate customer ID '{customer.id}'")
            self._customers[customer.id] = customer

    def get(self, customer_id: str) -> Customer:
        customer = self._customers.get(customer_id.strip())
        if customer is None:
            raise EntityNotFoundError(f"No customer with ID '{customer_id.strip()}'")
        return customer

    def list_all(self) -> list[Customer]:
        return list(self._customers.values())

    def __len__(self) -> int:
        return len(self._customers)
