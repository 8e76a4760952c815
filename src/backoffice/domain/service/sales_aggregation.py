"""Domain service: sales aggregation.

Pure projections over persisted orders and order items, used by the
dashboard and reports. Only ``paid`` orders count toward revenue. Each
call recomputes from the rows it is given and keeps no state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from backoffice.domain.model.order import Order, OrderItem
from backoffice.domain.model.value_objects import Money

UNKNOWN_PRODUCT = "Unknown"
DEFAULT_TOP_LIMIT = 5

# Fixed English labels so output does not depend on the process locale.
MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class ProductRevenue:
    product_id: int
    product_name: str
    revenue: Money


@dataclass(frozen=True)
class MonthlyRevenue:
    month: int  # 1..12
    revenue: Money

    @property
    def label(self) -> str:
        return MONTH_LABELS[self.month - 1]


def paid_orders(orders: Iterable[Order]) -> list[Order]:
    return [order for order in orders if order.is_paid]


def total_sales(orders: Iterable[Order]) -> Money:
    """Sum of ``total_amount`` over paid orders."""
    total = Money.zero()
    for order in paid_orders(orders):
        total = total + order.total_amount
    return total


def top_products_by_revenue(
    orders: Iterable[Order],
    items: Iterable[OrderItem],
    product_names: Mapping[int, str],
    limit: int = DEFAULT_TOP_LIMIT,
) -> list[ProductRevenue]:
    """Rank products by revenue earned in paid orders.

    Items whose order is not paid (or not among ``orders``) are ignored.
    Names come from ``product_names``; a product that no longer exists
    is labelled ``Unknown``. Equal revenues are ordered by product ID.
    """
    paid_ids = {order.id for order in paid_orders(orders)}

    revenue: dict[int, Money] = {}
    for item in items:
        if item.order_id not in paid_ids:
            continue
        current = revenue.get(item.product_id, Money.zero(item.price.currency))
        revenue[item.product_id] = current + item.line_total

    ranked = sorted(revenue.items(), key=lambda pair: (-pair[1].amount, pair[0]))
    return [
        ProductRevenue(
            product_id=product_id,
            product_name=product_names.get(product_id) or UNKNOWN_PRODUCT,
            revenue=amount,
        )
        for product_id, amount in ranked[: max(limit, 0)]
    ]


def revenue_by_month(
    orders: Iterable[Order],
    year: int | None = None,
) -> list[MonthlyRevenue]:
    """Sum paid order totals per calendar month, in calendar order.

    Months without a paid order are omitted. Without ``year`` the same
    month of different years falls into one bucket.
    """
    buckets: dict[int, Money] = {}
    for order in paid_orders(orders):
        if year is not None and order.created_at.year != year:
            continue
        month = order.created_at.month
        current = buckets.get(month, Money.zero(order.total_amount.currency))
        buckets[month] = current + order.total_amount

    return [
        MonthlyRevenue(month=month, revenue=buckets[month])
        for month in sorted(buckets)
    ]
