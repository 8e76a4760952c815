"""Unit tests for the Order aggregate and order items."""

import pytest

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.order import Order, OrderItem, OrderStatus
from backoffice.domain.model.value_objects import Money, Quantity


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create("  Jane ", Money.of("250"))
        assert order.id is None  # assigned by repository
        assert order.customer_name == "Jane"
        assert order.status == OrderStatus.PENDING
        assert order.total_amount == Money.of("250")
        assert order.created_at.tzinfo is not None

    def test_blank_customer_rejected(self):
        with pytest.raises(ValidationError, match="Customer name"):
            Order.create("   ", Money.of("10"))


class TestOrderStatus:

    def test_pending_to_paid(self):
        order = Order.create("Jane", Money.of("10"))
        order.update_status(OrderStatus.PAID)
        assert order.is_paid

    def test_same_status_rejected(self):
        order = Order.create("Jane", Money.of("10"))
        with pytest.raises(ValidationError, match="already pending"):
            order.update_status(OrderStatus.PENDING)

    @pytest.mark.parametrize("raw", ["not paid", "NOT_PAID", "not-paid", " Not Paid "])
    def test_parse_spellings(self, raw):
        assert OrderStatus.parse(raw) == OrderStatus.NOT_PAID

    def test_parse_unknown(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            OrderStatus.parse("refunded")


class TestOrderItem:

    def test_line_total(self):
        item = OrderItem(
            order_id=1,
            product_id=7,
            product_name="Keyboard",
            price=Money.of("1299"),
            quantity=Quantity(3),
        )
        assert item.line_total == Money.of("3897")

    def test_items_are_immutable(self):
        item = OrderItem(1, 7, "Keyboard", Money.of("1299"), Quantity(1))
        with pytest.raises(AttributeError):
            item.price = Money.of("1")
