"""Application service: Update Product use case."""

from __future__ import annotations

from backoffice.domain.exceptions import EntityNotFoundError, ValidationError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        quantity: int | None = None,
        price: str | None = None,
        srp_price: str | None = None,
        description: str | None = None,
    ) -> Product:
        """Update a product's details; omitted fields keep their value.

        This does NOT affect any existing orders — their items captured
        the name and price at sale time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        if name is not None and name.strip().lower() != product.name.lower():
            clash = self._product_repo.get_by_name(name.strip())
            if clash is not None and clash.id != product.id:
                raise ValidationError(f"Product '{name.strip()}' already exists")

        product.update_details(
            name=product.name if name is None else name,
            price=product.price if price is None else Money.of(price),
            srp_price=product.srp_price if srp_price is None else Money.of(srp_price),
            quantity=product.quantity if quantity is None else quantity,
            description=product.description if description is None else description,
        )
        self._product_repo.save(product)
        return product
