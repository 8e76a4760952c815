"""Integration tests for order listing, viewing and status updates."""

from datetime import date, datetime, timezone

import pytest

from backoffice.application.list_orders import ListOrdersHandler
from backoffice.application.show_order import ShowOrderHandler
from backoffice.application.update_order_status import UpdateOrderStatusHandler
from backoffice.domain.exceptions import EntityNotFoundError, ValidationError
from backoffice.domain.model.order import Order, OrderItem, OrderStatus
from backoffice.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderItemRepository, FakeOrderRepository


def _order(name: str, amount: str, day: int, status=OrderStatus.PENDING) -> Order:
    return Order(
        id=None,
        customer_name=name,
        total_amount=Money.of(amount),
        status=status,
        created_at=datetime(2024, 1, day, 9, 30, tzinfo=timezone.utc),
    )


def _repo() -> FakeOrderRepository:
    return FakeOrderRepository([
        _order("John Doe", "5500", 15, OrderStatus.PAID),
        _order("Jane Smith", "3200", 16),
        _order("Bob Johnson", "8900", 17, OrderStatus.NOT_PAID),
        _order("Alice Brown", "2100", 18, OrderStatus.PAID),
    ])


class TestListOrders:

    def test_all_orders_and_total(self):
        result = ListOrdersHandler(_repo()).handle()
        assert len(result.orders) == 4
        assert result.total_sales == "₱19,700.00"

    def test_inclusive_date_range(self):
        result = ListOrdersHandler(_repo()).handle(start=date(2024, 1, 16), end=date(2024, 1, 17))
        assert [o.customer_name for o in result.orders] == ["Jane Smith", "Bob Johnson"]
        assert result.total_sales == "₱12,100.00"

    def test_open_ended_range(self):
        result = ListOrdersHandler(_repo()).handle(start=date(2024, 1, 18))
        assert [o.id for o in result.orders] == [4]

    def test_status_filter(self):
        result = ListOrdersHandler(_repo()).handle(status=OrderStatus.PAID)
        assert [o.id for o in result.orders] == [1, 4]

    def test_reversed_range_rejected(self):
        with pytest.raises(ValidationError, match="Start date"):
            ListOrdersHandler(_repo()).handle(start=date(2024, 2, 1), end=date(2024, 1, 1))


class TestUpdateOrderStatus:

    def test_mark_paid(self):
        repo = _repo()
        UpdateOrderStatusHandler(repo).handle(2, "paid")
        order = repo.get_by_id(2)
        assert order.status == OrderStatus.PAID
        assert order.total_amount == Money.of("3200")

    def test_same_status_rejected(self):
        with pytest.raises(ValidationError, match="already paid"):
            UpdateOrderStatusHandler(_repo()).handle(1, OrderStatus.PAID)

    def test_missing_order(self):
        with pytest.raises(EntityNotFoundError):
            UpdateOrderStatusHandler(_repo()).handle(99, "paid")


class TestShowOrder:

    def test_includes_items(self):
        items = FakeOrderItemRepository([
            OrderItem(2, 5, "Keyboard", Money.of("1299"), Quantity(2)),
            OrderItem(3, 6, "Mouse", Money.of("799"), Quantity(1)),
        ])
        dto = ShowOrderHandler(_repo(), items).handle(2)
        assert dto.customer_name == "Jane Smith"
        assert [(i.product_name, i.line_total) for i in dto.items] == [("Keyboard", "₱2,598.00")]
        assert dto.created_at == "2024-01-16 09:30 UTC"

    def test_missing(self):
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(_repo(), FakeOrderItemRepository()).handle(7)
