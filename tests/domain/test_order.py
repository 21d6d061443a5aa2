"""Unit tests for the Order aggregate."""

from datetime import datetime, timezone

import pytest

from orderentry.domain.exceptions import InvalidQuantityError, ValidationError
from orderentry.domain.model.customer import Customer
from orderentry.domain.model.order import Order, OrderStatus
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money, Quantity

BOB = Customer("1", "Smith", "Bob", "123 Street", "12345", "012-345-6789")


def _hammer(stock: int = 50) -> Product:
    return Product("123", "16 oz. hickory hammer", "Stanely Tools", "1", Money.of("9.97"), stock)


def _claw(stock: int = 5) -> Product:
    return Product("125", "20 oz. Fiberglass Rip Claw Hammer", "Crescent", "3", Money.of("19.97"), stock)


class TestOrderOpen:

    def test_open_creates_empty_draft(self):
        order = Order.open(BOB, "test")
        assert order.status == OrderStatus.DRAFT
        assert order.lines == []
        assert order.total == Money.zero()
        assert order.id is None

    def test_open_uses_given_timestamp(self):
        when = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        assert Order.open(BOB, "test", placed_at=when).placed_at == when

    def test_customer_required(self):
        with pytest.raises(ValidationError, match="requires a customer"):
            Order.open(None, "test")

    def test_salesperson_required(self):
        with pytest.raises(ValidationError, match="Salesperson"):
            Order.open(BOB, "  ")


class TestAddLine:

    def test_add_line_takes_stock_and_prices_line(self):
        order = Order.open(BOB, "test")
        hammer = _hammer()
        line = order.add_line(hammer, Quantity(2))
        assert line.subtotal == Money.of("19.94")
        assert hammer.units_in_stock == 48
        assert order.total == Money.of("19.94")

    def test_total_is_sum_of_subtotals(self):
        order = Order.open(BOB, "test")
        order.add_line(_hammer(), Quantity(2))
        order.add_line(_claw(), Quantity(3))
        assert order.total == Money.of("79.85")
        subtotal_sum = Money.zero()
        for line in order.lines:
            subtotal_sum = subtotal_sum + line.subtotal
        assert order.total == subtotal_sum

    def test_same_product_twice_accumulates_against_current_stock(self):
        order = Order.open(BOB, "test")
        claw = _claw(stock=5)
        order.add_line(claw, Quantity(3))
        with pytest.raises(InvalidQuantityError):
            order.add_line(claw, Quantity(3))
        assert claw.units_in_stock == 2
        assert len(order.lines) == 1

    def test_rejected_line_changes_nothing(self):
        order = Order.open(BOB, "test")
        hammer = _hammer()
        with pytest.raises(InvalidQuantityError):
            order.add_line(hammer, Quantity(60))
        assert hammer.units_in_stock == 50
        assert order.lines == []

    def test_unit_price_is_snapshotted(self):
        order = Order.open(BOB, "test")
        hammer = _hammer()
        order.add_line(hammer, Quantity(1))
        hammer.unit_list_price = Money.of("99.99")
        assert order.total == Money.of("9.97")


class TestTransitions:

    def test_commit(self):
        order = Order.open(BOB, "test")
        order.add_line(_hammer(), Quantity(1))
        order.commit()
        assert order.status == OrderStatus.COMMITTED

    def test_commit_empty_order_rejected(self):
        with pytest.raises(ValidationError, match="no line items"):
            Order.open(BOB, "test").commit()

    def test_abort_discards_lines_but_not_stock(self):
        order = Order.open(BOB, "test")
        hammer = _hammer()
        order.add_line(hammer, Quantity(2))
        discarded = order.abort()
        assert order.status == OrderStatus.ABORTED
        assert len(discarded) == 1
        assert order.lines == []
        assert hammer.units_in_stock == 48

    def test_no_lines_after_commit(self):
        order = Order.open(BOB, "test")
        order.add_line(_hammer(), Quantity(1))
        order.commit()
        with pytest.raises(ValidationError, match="expected DRAFT"):
            order.add_line(_hammer(), Quantity(1))

    def test_cannot_abort_committed_order(self):
        order = Order.open(BOB, "test")
        order.add_line(_hammer(), Quantity(1))
        order.commit()
        with pytest.raises(ValidationError, match="COMMITTED"):
            order.abort()
