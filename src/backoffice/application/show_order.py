"""Application service: Show Order use case (query)."""

from __future__ import annotations

from backoffice.application.dto import OrderDTO, OrderItemDTO
from backoffice.domain.exceptions import EntityNotFoundError
from backoffice.domain.model.order import Order, OrderItem
from backoffice.domain.repository.order_repository import (
    OrderItemRepository,
    OrderRepository,
)


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        order_item_repo: OrderItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._order_item_repo = order_item_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        items = self._order_item_repo.list_for_orders([order_id])
        return to_order_dto(order, items)


def to_order_dto(order: Order, items: list[OrderItem] | None = None) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        status=order.status.value,
        total=str(order.total_amount),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in items or []
        ],
    )
