"""Application service: List Orders use case (query).

Backs both the orders table and the sales report: an optional
inclusive date range, plus the summed total of what is shown.
"""

from __future__ import annotations

from datetime import date

from backoffice.application.dto import OrderDTO, OrderListDTO
from backoffice.application.show_order import to_order_dto
from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.order import Order, OrderStatus
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        start: date | None = None,
        end: date | None = None,
        status: OrderStatus | None = None,
    ) -> OrderListDTO:
        if start is not None and end is not None and start > end:
            raise ValidationError("Start date must not be after end date")

        if status is None:
            orders = self._order_repo.list_all()
        else:
            orders = self._order_repo.list_by_status(status)

        selected = [o for o in orders if self._in_range(o, start, end)]

        total = Money.zero()
        for order in selected:
            total = total + order.total_amount

        dtos: list[OrderDTO] = [to_order_dto(order) for order in selected]
        return OrderListDTO(orders=dtos, total_sales=str(total))

    @staticmethod
    def _in_range(order: Order, start: date | None, end: date | None) -> bool:
        day = order.created_at.date()
        if start is not None and day < start:
            return False
        if end is not None and day > end:
            return False
        return True
