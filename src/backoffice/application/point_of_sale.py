"""Application service: the point-of-sale session.

One session per cashier screen. It owns the cart, looks up products and
their current stock in the catalog cache, and hands the finished cart
to the checkout handler. Every operation returns an Outcome.
"""

from __future__ import annotations

import logging

from backoffice.application.catalog_cache import CatalogCache
from backoffice.application.checkout import CheckoutHandler
from backoffice.application.dto import CartDTO, CartLineDTO
from backoffice.application.outcome import Outcome, workflow
from backoffice.domain.exceptions import EntityNotFoundError
from backoffice.domain.model.cart import Cart
from backoffice.domain.model.product import Product

logger = logging.getLogger("backoffice.pos")


class PointOfSaleSession:

    def __init__(
        self,
        catalog: CatalogCache,
        checkout_handler: CheckoutHandler,
        cart: Cart | None = None,
    ) -> None:
        self._catalog = catalog
        self._checkout = checkout_handler
        self._cart = cart if cart is not None else Cart()

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def catalog(self) -> CatalogCache:
        return self._catalog

    def load_catalog(self) -> Outcome:
        return self._catalog.refresh()

    # --- Cart operations ------------------------------------------------------

    @workflow("add to cart")
    def add_item(self, product_id: int) -> Outcome:
        product = self._product(product_id)
        line = self._cart.add_item(product)
        if line.quantity == 1:
            return Outcome.success("Added to cart", self.snapshot())
        return Outcome.success(
            f"{product.name} × {line.quantity}", self.snapshot()
        )

    @workflow("update cart quantity")
    def adjust_quantity(self, product_id: int, delta: int) -> Outcome:
        line = self._cart.find(product_id)
        if line is None:
            raise EntityNotFoundError(f"Product ID {product_id} is not in the cart")
        product = self._catalog.get(product_id)
        on_hand = product.quantity if product is not None else line.stock
        line = self._cart.adjust_quantity(product_id, delta, on_hand)
        return Outcome.success(
            f"{line.product_name} × {line.quantity}", self.snapshot()
        )

    @workflow("remove from cart")
    def remove_item(self, product_id: int) -> Outcome:
        line = self._cart.remove_item(product_id)
        if line is None:
            return Outcome.info("Item was not in the cart", self.snapshot())
        return Outcome.info("Removed from cart", self.snapshot())

    def set_customer(self, name: str) -> None:
        self._cart.customer_name = name or ""

    def abandon(self) -> Outcome:
        self._cart.clear()
        logger.debug("Cart abandoned")
        return Outcome.info("Cart cleared", self.snapshot())

    def checkout(self) -> Outcome:
        return self._checkout.handle(self._cart, self._catalog)

    # --- Queries --------------------------------------------------------------

    def total(self) -> str:
        return str(self._cart.compute_total())

    def snapshot(self) -> CartDTO:
        return CartDTO(
            customer_name=self._cart.customer_name,
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in self._cart.lines
            ],
            total=self.total(),
        )

    # --- Internal helpers -----------------------------------------------------

    def _product(self, product_id: int) -> Product:
        product = self._catalog.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product ID {product_id} not found")
        return product
