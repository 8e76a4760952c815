"""Unit tests for the sales aggregation domain service."""

from datetime import datetime, timezone

from backoffice.domain.model.order import Order, OrderItem, OrderStatus
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.service.sales_aggregation import (
    UNKNOWN_PRODUCT,
    revenue_by_month,
    top_products_by_revenue,
    total_sales,
)


def _order(oid: int, amount: str, status: OrderStatus = OrderStatus.PAID,
           month: int = 1, year: int = 2024) -> Order:
    return Order(
        id=oid,
        customer_name=f"Customer {oid}",
        total_amount=Money.of(amount),
        status=status,
        created_at=datetime(year, month, 15, 10, 0, tzinfo=timezone.utc),
    )


def _item(oid: int, pid: int, price: str, qty: int) -> OrderItem:
    return OrderItem(
        order_id=oid,
        product_id=pid,
        product_name=f"P{pid}",
        price=Money.of(price),
        quantity=Quantity(qty),
    )


NAMES = {1: "P1", 2: "P2", 3: "P3"}


class TestTopProducts:

    def test_groups_and_ranks_by_revenue(self):
        orders = [_order(1, "200"), _order(2, "100"), _order(3, "250")]
        items = [_item(1, 1, "100", 2), _item(2, 1, "100", 1), _item(3, 2, "50", 5)]

        ranked = top_products_by_revenue(orders, items, NAMES)

        assert [(r.product_name, r.revenue) for r in ranked] == [
            ("P1", Money.of("300")),
            ("P2", Money.of("250")),
        ]

    def test_only_paid_orders_count(self):
        orders = [_order(1, "100"), _order(2, "999", OrderStatus.PENDING),
                  _order(3, "999", OrderStatus.NOT_PAID)]
        items = [_item(1, 1, "100", 1), _item(2, 2, "999", 1), _item(3, 3, "999", 1)]

        ranked = top_products_by_revenue(orders, items, NAMES)

        assert [r.product_id for r in ranked] == [1]

    def test_truncates_to_limit(self):
        orders = [_order(1, "0")]
        items = [_item(1, pid, str(pid * 10), 1) for pid in range(1, 9)]

        ranked = top_products_by_revenue(orders, items, {}, limit=5)

        assert [r.product_id for r in ranked] == [8, 7, 6, 5, 4]

    def test_missing_product_is_unknown(self):
        ranked = top_products_by_revenue([_order(1, "10")], [_item(1, 99, "10", 1)], NAMES)
        assert ranked[0].product_name == UNKNOWN_PRODUCT

    def test_ties_broken_by_product_id(self):
        orders = [_order(1, "200")]
        items = [_item(1, 3, "100", 1), _item(1, 2, "100", 1)]

        ranked = top_products_by_revenue(orders, items, NAMES)

        assert [r.product_id for r in ranked] == [2, 3]

    def test_no_paid_orders(self):
        assert top_products_by_revenue([], [_item(1, 1, "10", 1)], NAMES) == []


class TestRevenueByMonth:

    def test_calendar_order_and_paid_only(self):
        orders = [
            _order(1, "200", month=3),
            _order(2, "999", OrderStatus.NOT_PAID, month=2),
            _order(3, "100", month=1),
        ]

        buckets = revenue_by_month(orders)

        assert [(b.label, b.revenue) for b in buckets] == [
            ("Jan", Money.of("100")),
            ("Mar", Money.of("200")),
        ]

    def test_sums_within_month(self):
        orders = [_order(1, "100", month=6), _order(2, "50.50", month=6)]
        assert revenue_by_month(orders)[0].revenue == Money.of("150.50")

    def test_same_month_of_different_years_shares_bucket(self):
        orders = [_order(1, "100", month=5, year=2023), _order(2, "100", month=5, year=2024)]
        buckets = revenue_by_month(orders)
        assert len(buckets) == 1
        assert buckets[0].revenue == Money.of("200")

    def test_year_filter(self):
        orders = [_order(1, "100", month=5, year=2023), _order(2, "70", month=5, year=2024)]
        buckets = revenue_by_month(orders, year=2024)
        assert [(b.label, b.revenue) for b in buckets] == [("May", Money.of("70"))]

    def test_december_label(self):
        assert revenue_by_month([_order(1, "1", month=12)])[0].label == "Dec"


class TestTotalSales:

    def test_sums_paid_orders_only(self):
        orders = [_order(1, "100"), _order(2, "50"), _order(3, "999", OrderStatus.PENDING)]
        assert total_sales(orders) == Money.of("150")

    def test_empty(self):
        assert total_sales([]).is_zero
