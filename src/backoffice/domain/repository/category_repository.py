"""Abstract repository for the Category aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Category | None:
        """Return a category by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    def add(self, category: Category) -> int:
        """Insert a new category, assign its ID and return it."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Replace an existing category."""

    @abstractmethod
    def delete(self, category_id: int) -> None:
        """Remove a category."""
