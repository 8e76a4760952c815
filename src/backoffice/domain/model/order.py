"""Order aggregate and its line items.

An Order is created once at checkout with status ``pending`` and a
total that equals the sum of its items. After creation only the status
may change; the amount and the items are fixed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    NOT_PAID = "not paid"

    @classmethod
    def parse(cls, raw: str) -> OrderStatus:
        """Accept ``paid``, ``not paid``, ``not_paid`` or ``NOT-PAID``."""
        normalized = raw.strip().lower().replace("_", " ").replace("-", " ")
        for status in cls:
            if status.value == normalized:
                return status
        allowed = ", ".join(s.value for s in cls)
        raise ValidationError(f"Unknown order status '{raw}' (expected one of: {allowed})")


@dataclass(frozen=True)
class OrderItem:
    """One sold product within an order.

    ``product_name`` and ``price`` are snapshots taken at checkout, so
    renaming or repricing the product later never rewrites history.
    """

    order_id: int
    product_id: int
    product_name: str
    price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for sales orders.

    Use ``Order.create()`` for new orders. The ``__init__`` stays simple
    so repositories can reconstitute stored rows without re-validating.
    """

    id: int | None
    customer_name: str
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer_name: str, total_amount: Money) -> Order:
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        return Order(
            id=None,
            customer_name=customer_name.strip(),
            total_amount=total_amount,
        )

    # --- State transitions ----------------------------------------------------

    def update_status(self, new_status: OrderStatus) -> None:
        if new_status == self.status:
            raise ValidationError(f"Order is already {self.status.value}")
        self.status = new_status

    # --- Computed properties --------------------------------------------------

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID
