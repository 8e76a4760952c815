"""Application service: Update Order Status use case.

Status is the only column of an order that may change after checkout.
"""

from __future__ import annotations

import logging

from backoffice.domain.exceptions import EntityNotFoundError
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.repository.order_repository import OrderRepository

logger = logging.getLogger("backoffice.orders")


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, status: OrderStatus | str) -> None:
        if isinstance(status, str):
            status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.update_status(status)
        self._order_repo.update_status(order_id, order.status)
        logger.info(
            "Order #%s status %s -> %s", order_id, previous.value, order.status.value
        )
