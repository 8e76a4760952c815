"""JSON-file-backed implementations of OrderRepository and OrderItemRepository."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from backoffice.domain.exceptions import StoreWriteError
from backoffice.domain.model.order import Order, OrderItem, OrderStatus
from backoffice.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from backoffice.domain.repository.order_repository import (
    OrderItemRepository,
    OrderRepository,
)
from backoffice.infrastructure.persistence.json_table import JsonTable


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._table = JsonTable(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        rows = self._table.load()
        with self._table.decoding():
            for raw in rows:
                if raw["id"] == order_id:
                    return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        rows = self._table.load()
        with self._table.decoding():
            return [self._to_domain(raw) for raw in rows]

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        rows = self._table.load()
        with self._table.decoding():
            return [
                self._to_domain(raw) for raw in rows if raw["status"] == status.value
            ]

    def count(self) -> int:
        return len(self._table.load())

    def add(self, order: Order) -> int:
        rows = self._table.load()
        order.id = self._table.next_id(rows)
        rows.append(self._to_raw(order))
        self._table.persist(rows)
        return order.id

    def update_status(self, order_id: int, status: OrderStatus) -> None:
        rows = self._table.load()
        for raw in rows:
            if raw.get("id") == order_id:
                raw["status"] = status.value
                self._table.persist(rows)
                return
        raise StoreWriteError(f"no order row with id {order_id}")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            total_amount=Money(
                Decimal(raw["total_amount"]), raw.get("currency", DEFAULT_CURRENCY)
            ),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )


class JsonOrderItemRepository(OrderItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._table = JsonTable(file_path)

    def add_many(self, items: list[OrderItem]) -> None:
        rows = self._table.load()
        next_id = self._table.next_id(rows)
        for offset, item in enumerate(items):
            rows.append(self._to_raw(next_id + offset, item))
        self._table.persist(rows)

    def list_for_orders(self, order_ids: Iterable[int]) -> list[OrderItem]:
        wanted = set(order_ids)
        rows = self._table.load()
        with self._table.decoding():
            return [self._to_domain(raw) for raw in rows if raw["order_id"] in wanted]

    @staticmethod
    def _to_raw(row_id: int, item: OrderItem) -> dict:
        return {
            "id": row_id,
            "order_id": item.order_id,
            "product_id": item.product_id,
            "product_name": item.product_name,
            "price": str(item.price.amount),
            "currency": item.price.currency,
            "quantity": item.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> OrderItem:
        return OrderItem(
            order_id=raw["order_id"],
            product_id=raw["product_id"],
            product_name=raw["product_name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY)),
            quantity=Quantity(raw["quantity"]),
        )
