"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from pathlib import Path

from backoffice.domain.exceptions import StoreWriteError
from backoffice.domain.model.category import Category
from backoffice.domain.repository.category_repository import CategoryRepository
from backoffice.infrastructure.persistence.json_table import JsonTable


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._table = JsonTable(file_path)

    def get_by_id(self, category_id: int) -> Category | None:
        rows = self._table.load()
        with self._table.decoding():
            for raw in rows:
                if raw["id"] == category_id:
                    return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Category | None:
        rows = self._table.load()
        with self._table.decoding():
            for raw in rows:
                if raw["name"].lower() == name.lower():
                    return self._to_domain(raw)
        return None

    def list_all(self) -> list[Category]:
        rows = self._table.load()
        with self._table.decoding():
            return [self._to_domain(raw) for raw in rows]

    def add(self, category: Category) -> int:
        rows = self._table.load()
        category.id = self._table.next_id(rows)
        rows.append(self._to_raw(category))
        self._table.persist(rows)
        return category.id

    def save(self, category: Category) -> None:
        rows = self._table.load()
        for i, raw in enumerate(rows):
            if raw.get("id") == category.id:
                rows[i] = self._to_raw(category)
                self._table.persist(rows)
                return
        raise StoreWriteError(f"no category row with id {category.id}")

    def delete(self, category_id: int) -> None:
        rows = self._table.load()
        remaining = [raw for raw in rows if raw.get("id") != category_id]
        if len(remaining) == len(rows):
            raise StoreWriteError(f"no category row with id {category_id}")
        self._table.persist(remaining)

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name,
            "description": category.description,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
        )
