"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from orderentry.domain.exceptions import PersistenceError
from orderentry.domain.model.customer import Customer
from orderentry.domain.repository.customer_repository import CustomerRepository
from orderentry.infrastructure.persistence.json_file import JsonRecordFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, records: JsonRecordFile) -> None:
        self.records = records

    # --- CustomerRepository interface -----------------------------------------

    def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self.records.load()]

    def save_all(self, customers: list[Customer]) -> None:
        by_id = {str(raw["id"]): raw for raw in self.records.load()}
        for customer in customers:
            by_id[customer.id] = self._to_raw(customer)
        self.records.stage(list(by_id.values()))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "last_name": customer.last_name,
            "first_name": customer.first_name,
            "street": customer.street,
            "zip": customer.zip_code,
            "phone": customer.phone,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        try:
            return Customer(
                id=str(raw["id"]),
                last_name=raw["last_name"],
                first_name=raw["first_name"],
                street=raw["street"],
                zip_code=raw["zip"],
                phone=raw["phone"],
            )
        except KeyError as exc:
            raise PersistenceError(f"Customer record missing field {exc}") from exc
