"""Application service: sales reports for the dashboard (queries).

Fetches orders, order items and product names from the store and runs
the sales aggregation over them. A failed read yields a store-error
outcome carrying an empty result, so charts render empty rather than
break.
"""

from __future__ import annotations

import logging

from backoffice.application.dto import (
    DashboardSummaryDTO,
    MonthlyRevenueDTO,
    ProductRevenueDTO,
)
from backoffice.application.outcome import Outcome, workflow
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.order_repository import (
    OrderItemRepository,
    OrderRepository,
)
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.service import sales_aggregation

logger = logging.getLogger("backoffice.reports")


def _empty_summary() -> DashboardSummaryDTO:
    return DashboardSummaryDTO(total_sales=str(Money.zero()), total_products=0, total_orders=0)


class SalesReportHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        order_item_repo: OrderItemRepository,
        product_repo: ProductRepository,
        top_limit: int = sales_aggregation.DEFAULT_TOP_LIMIT,
    ) -> None:
        self._order_repo = order_repo
        self._order_item_repo = order_item_repo
        self._product_repo = product_repo
        self._top_limit = top_limit

    @workflow("fetch top products", empty=list)
    def top_products(self, limit: int | None = None) -> Outcome:
        paid = self._order_repo.list_by_status(OrderStatus.PAID)
        if not paid:
            return Outcome.success("No paid orders yet", [])

        items = self._order_item_repo.list_for_orders(order.id for order in paid)
        names = {p.id: p.name for p in self._product_repo.list_all()}

        ranked = sales_aggregation.top_products_by_revenue(
            paid, items, names, limit=self._top_limit if limit is None else limit
        )
        logger.debug("Top products computed from %d items", len(items))
        return Outcome.success(
            f"Top {len(ranked)} products by revenue",
            [
                ProductRevenueDTO(
                    product_id=row.product_id,
                    name=row.product_name,
                    revenue=str(row.revenue),
                )
                for row in ranked
            ],
        )

    @workflow("fetch revenue data", empty=list)
    def monthly_revenue(self, year: int | None = None) -> Outcome:
        paid = self._order_repo.list_by_status(OrderStatus.PAID)
        buckets = sales_aggregation.revenue_by_month(paid, year=year)
        return Outcome.success(
            f"Revenue for {len(buckets)} months",
            [MonthlyRevenueDTO(month=b.label, revenue=str(b.revenue)) for b in buckets],
        )

    @workflow("fetch dashboard data", empty=_empty_summary)
    def dashboard_summary(self) -> Outcome:
        orders = self._order_repo.list_all()
        summary = DashboardSummaryDTO(
            total_sales=str(sales_aggregation.total_sales(orders)),
            total_products=self._product_repo.count(),
            total_orders=len(orders),
        )
        return Outcome.success("Dashboard data loaded", summary)
