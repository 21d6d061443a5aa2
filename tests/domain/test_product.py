"""Unit tests for the Product aggregate."""

import pytest

from orderentry.domain.exceptions import InvalidQuantityError, ValidationError
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money, Quantity


def _hammer(stock: int = 50) -> Product:
    return Product("123", "16 oz. hickory hammer", "Stanely Tools", "1", Money.of("9.97"), stock)


class TestProductStock:

    def test_remove_stock(self):
        p = _hammer()
        p.remove_stock(Quantity(2))
        assert p.units_in_stock == 48

    def test_remove_all_stock(self):
        p = _hammer(stock=5)
        p.remove_stock(Quantity(5))
        assert p.units_in_stock == 0

    def test_remove_more_than_stock_rejected(self):
        p = _hammer()
        with pytest.raises(InvalidQuantityError, match="Quantity of 60 not available for 16 oz. hickory hammer"):
            p.remove_stock(Quantity(60))
        assert p.units_in_stock == 50

    def test_can_supply(self):
        p = _hammer(stock=10)
        assert p.can_supply(Quantity(10))
        assert not p.can_supply(Quantity(11))

    def test_restock(self):
        p = _hammer(stock=48)
        p.restock(Quantity(2))
        assert p.units_in_stock == 50

    def test_negative_stock_rejected_on_creation(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _hammer(stock=-1)
