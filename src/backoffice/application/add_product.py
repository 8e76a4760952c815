"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from backoffice.domain.exceptions import EntityNotFoundError, ValidationError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.category_repository import CategoryRepository
from backoffice.domain.repository.product_repository import ProductRepository

logger = logging.getLogger("backoffice.catalog")


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        name: str,
        quantity: int,
        price: str,
        srp_price: str,
        description: str = "",
        image: str | None = None,
        category_id: int | None = None,
    ) -> Product:
        """Add a new product to the catalog; the store assigns its ID."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        if self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        if category_id is not None:
            if self._category_repo is None or self._category_repo.get_by_id(category_id) is None:
                raise EntityNotFoundError(f"Category with ID {category_id} not found")

        product = Product.create(
            name=name,
            price=Money.of(price),
            srp_price=Money.of(srp_price),
            quantity=quantity,
            description=description,
            image=image,
            category_id=category_id,
        )
        self._product_repo.add(product)
        logger.info("Product #%s '%s' added", product.id, product.name)
        return product
