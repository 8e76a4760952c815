"""Catalog cache: the point of sale's in-memory view of the product table.

The cache is filled by ``refresh()`` and then serves reads, pages and
searches without touching the store. Checkout writes new on-hand counts
back into it after each successful stock decrement.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from backoffice.application.outcome import Outcome, workflow
from backoffice.domain.model.product import Product
from backoffice.domain.repository.product_repository import ProductRepository

logger = logging.getLogger("backoffice.catalog")

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Page:
    items: list[Product]
    number: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self.page_size))

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 1


class CatalogCache:

    def __init__(
        self,
        product_repo: ProductRepository,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._product_repo = product_repo
        self._page_size = page_size
        self._products: list[Product] = []

    @workflow("load products", empty=list)
    def refresh(self) -> Outcome:
        """Reload every product from the store.

        On a read failure the previously cached rows are kept.
        """
        self._products = self._product_repo.list_all()
        logger.debug("Catalog cache loaded %d products", len(self._products))
        return Outcome.success(f"Loaded {len(self._products)} products", self.products)

    # --- Reads ----------------------------------------------------------------

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def get(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def page(self, number: int = 1) -> Page:
        """Return a 1-based page; out-of-range numbers are clamped."""
        total = len(self._products)
        last = max(1, math.ceil(total / self._page_size))
        number = min(max(number, 1), last)
        start = (number - 1) * self._page_size
        return Page(
            items=self._products[start : start + self._page_size],
            number=number,
            page_size=self._page_size,
            total_items=total,
        )

    def search(self, term: str) -> list[Product]:
        needle = (term or "").strip().lower()
        if not needle:
            return self.products
        return [p for p in self._products if needle in p.name.lower()]

    # --- Writes ---------------------------------------------------------------

    def apply_stock(self, product_id: int, quantity: int) -> None:
        product = self.get(product_id)
        if product is None:
            logger.debug("Product %s not cached; stock update ignored", product_id)
            return
        product.set_stock(quantity)
