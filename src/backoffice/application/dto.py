"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money values are
pre-formatted strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    customer_name: str
    lines: list[CartLineDTO]
    total: str


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single sold line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "₱100.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as displayed to the user."""

    id: int
    customer_name: str
    status: str
    total: str
    created_at: str
    items: list[OrderItemDTO] = field(default_factory=list)


@dataclass(frozen=True)
class OrderListDTO:
    orders: list[OrderDTO]
    total_sales: str


@dataclass(frozen=True)
class CheckoutReceipt:
    """Result of a checkout that got at least as far as creating the order.

    ``items`` is empty when the order row was written but its items were
    not; ``failed_products`` lists products whose stock was not
    decremented.
    """

    order_id: int
    customer_name: str
    total: str
    items: list[OrderItemDTO] = field(default_factory=list)
    failed_products: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class ProductRevenueDTO:
    product_id: int
    name: str
    revenue: str


@dataclass(frozen=True)
class MonthlyRevenueDTO:
    month: str  # "Jan", "Feb", ...
    revenue: str


@dataclass(frozen=True)
class DashboardSummaryDTO:
    total_sales: str
    total_products: int
    total_orders: int
