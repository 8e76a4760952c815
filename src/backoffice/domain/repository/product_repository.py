"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Implementations raise StoreReadError / StoreWriteError
when the backing table cannot serve a request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in store order."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of products in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> int:
        """Insert a new product, assign its ID and return it."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Replace every column of an existing product."""

    @abstractmethod
    def update_quantity(self, product_id: int, quantity: int) -> None:
        """Partial update of the on-hand quantity only."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product from the catalog."""
