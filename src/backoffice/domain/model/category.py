"""Category aggregate: a named grouping of catalog products."""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.domain.exceptions import ValidationError


@dataclass
class Category:

    id: int | None
    name: str
    description: str = ""

    @staticmethod
    def create(name: str, description: str = "") -> Category:
        category = Category(id=None, name="", description="")
        category.rename(name, description)
        return category

    def rename(self, name: str, description: str = "") -> None:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        self.name = name.strip()
        self.description = (description or "").strip()
