"""Application service: Delete Product use case.

Order items keep their denormalized product name, so history survives
the deletion; sales reports label the product ``Unknown``.
"""

from __future__ import annotations

from backoffice.domain.exceptions import EntityNotFoundError
from backoffice.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        self._product_repo.delete(product_id)
