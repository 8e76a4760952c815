"""Application services: Category use cases (add, update, delete)."""

from __future__ import annotations

from backoffice.domain.exceptions import EntityNotFoundError, ValidationError
from backoffice.domain.model.category import Category
from backoffice.domain.repository.category_repository import CategoryRepository
from backoffice.domain.repository.product_repository import ProductRepository


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, description: str = "") -> Category:
        category = Category.create(name, description)
        if self._category_repo.get_by_name(category.name) is not None:
            raise ValidationError(f"Category '{category.name}' already exists")
        self._category_repo.add(category)
        return category


class UpdateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int, name: str, description: str = "") -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID {category_id} not found")

        clash = self._category_repo.get_by_name(name.strip()) if name else None
        if clash is not None and clash.id != category_id:
            raise ValidationError(f"Category '{name.strip()}' already exists")

        category.rename(name, description)
        self._category_repo.save(category)
        return category


class DeleteCategoryHandler:
    """Delete a category and detach it from every product that used it."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo

    def handle(self, category_id: int) -> int:
        """Return the number of products that were detached."""
        if self._category_repo.get_by_id(category_id) is None:
            raise EntityNotFoundError(f"Category with ID {category_id} not found")

        detached = 0
        for product in self._product_repo.list_all():
            if product.category_id == category_id:
                product.category_id = None
                self._product_repo.save(product)
                detached += 1

        self._category_repo.delete(category_id)
        return detached
