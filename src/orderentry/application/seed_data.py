"""Application service: load the sample customers and products."""

from __future__ import annotations

import logging

from orderentry.domain.exceptions import ValidationError
from orderentry.domain.model.customer import Customer
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money
from orderentry.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def sample_products() -> list[Product]:
    return [
        Product("123", "16 oz. hickory hammer", "Stanely Tools", "1", Money.of("9.97"), 50),
        Product("124", "19 oz. Smooth Face Fiberglass", "Milwaukee", "2", Money.of("25.88"), 10),
        Product("125", "20 oz. Fiberglass Rip Claw Hammer", "Crescent", "3", Money.of("19.97"), 5),
        Product("126", "3 lbs Fiberglass Drilling Hammer", "Milwaukee", "4", Money.of("18.97"), 10),
    ]


def sample_customers() -> list[Customer]:
    return [
        Customer("1", "Smith", "Bob", "123 Street", "12345", "012-345-6789"),
        Customer("2", "Akhras", "Walid", "124 Street", "90621", "741-532-1111"),
        Customer("3", "West", "Kanye", "125 Street", "90742", "321-344-6789"),
        Customer("4", "Last", "First", "126 Street", "12345", "012-532-6789"),
    ]


class SeedDataHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, force: bool = False) -> tuple[int, int]:
        """Save the sample records and return (customers, products) written.

        Refuses to touch a store that already holds data unless *force*
        is set, in which case records with the same keys are overwritten.
        """
        with self._uow:
            if not force and (self._uow.customers.list_all() or self._uow.products.list_all()):
                raise ValidationError(
                    "Customers or products already exist; use --force to overwrite"
                )
            customers = sample_customers()
            products = sample_products()
            self._uow.customers.save_all(customers)
            self._uow.products.save_all(products)
            self._uow.commit()

        logger.info("Seeded %d customers and %d products", len(customers), len(products))
        return len(customers), len(products)
