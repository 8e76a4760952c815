"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from backoffice.domain.exceptions import StoreWriteError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import DEFAULT_CURRENCY, Money
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.infrastructure.persistence.json_table import JsonTable


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._table = JsonTable(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        rows = self._table.load()
        with self._table.decoding():
            for raw in rows:
                if raw["id"] == product_id:
                    return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        rows = self._table.load()
        with self._table.decoding():
            for raw in rows:
                if raw["name"].lower() == name.lower():
                    return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        rows = self._table.load()
        with self._table.decoding():
            return [self._to_domain(raw) for raw in rows]

    def count(self) -> int:
        return len(self._table.load())

    def add(self, product: Product) -> int:
        rows = self._table.load()
        product.id = self._table.next_id(rows)
        rows.append(self._to_raw(product))
        self._table.persist(rows)
        return product.id

    def save(self, product: Product) -> None:
        rows = self._table.load()
        index = self._index_of(rows, product.id)
        rows[index] = self._to_raw(product)
        self._table.persist(rows)

    def update_quantity(self, product_id: int, quantity: int) -> None:
        rows = self._table.load()
        index = self._index_of(rows, product_id)
        rows[index]["quantity"] = quantity
        self._table.persist(rows)

    def delete(self, product_id: int) -> None:
        rows = self._table.load()
        index = self._index_of(rows, product_id)
        del rows[index]
        self._table.persist(rows)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _index_of(rows: list[dict], product_id: int | None) -> int:
        for i, raw in enumerate(rows):
            if raw.get("id") == product_id:
                return i
        raise StoreWriteError(f"no product row with id {product_id}")

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "srp_price": str(product.srp_price.amount),
            "currency": product.price.currency,
            "quantity": product.quantity,
            "image": product.image,
            "description": product.description,
            "category_id": product.category_id,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), currency),
            srp_price=Money(Decimal(raw.get("srp_price", raw["price"])), currency),
            quantity=raw.get("quantity", 0),
            image=raw.get("image"),
            description=raw.get("description", ""),
            category_id=raw.get("category_id"),
        )
