"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from orderentry.domain.exceptions import DomainException, PersistenceError
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money
from orderentry.domain.repository.product_repository import ProductRepository
from orderentry.infrastructure.persistence.json_file import JsonRecordFile


class JsonProductRepository(ProductRepository):

    def __init__(self, records: JsonRecordFile) -> None:
        self.records = records

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self.records.load()]

    def save_all(self, products: list[Product]) -> None:
        by_upc = {str(raw["upc"]): raw for raw in self.records.load()}
        for product in products:
            by_upc[product.upc] = self._to_raw(product)
        self.records.stage(list(by_upc.values()))

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "upc": product.upc,
            "name": product.name,
            "manufacturer": product.manufacturer,
            "model": product.model,
            "unit_list_price": str(product.unit_list_price.amount),
            "currency": product.unit_list_price.currency,
            "units_in_stock": product.units_in_stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        try:
            return Product(
                upc=str(raw["upc"]),
                name=raw["name"],
                manufacturer=raw["manufacturer"],
                model=raw["model"],
                unit_list_price=Money(
                    Decimal(str(raw["unit_list_price"])), raw.get("currency", "USD")
                ),
                units_in_stock=int(raw["units_in_stock"]),
            )
        except KeyError as exc:
            raise PersistenceError(f"Product record missing field {exc}") from exc
        except (InvalidOperation, ValueError, DomainException) as exc:
            raise PersistenceError(
                f"Invalid product record {raw.get('upc')!r}: {exc}"
            ) from exc
