"""Abstract repositories for orders and their line items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from backoffice.domain.model.order import Order, OrderItem, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[Order]:
        """Return the orders currently in ``status``."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of orders."""

    @abstractmethod
    def add(self, order: Order) -> int:
        """Insert a new order row, assign its ID and return it."""

    @abstractmethod
    def update_status(self, order_id: int, status: OrderStatus) -> None:
        """Change the status column of an existing order."""


class OrderItemRepository(ABC):

    @abstractmethod
    def add_many(self, items: list[OrderItem]) -> None:
        """Insert all rows in a single write."""

    @abstractmethod
    def list_for_orders(self, order_ids: Iterable[int]) -> list[OrderItem]:
        """Return the items belonging to any of ``order_ids``."""
