"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from backoffice.application.catalog_cache import CatalogCache
from backoffice.application.checkout import CheckoutHandler
from backoffice.application.point_of_sale import PointOfSaleSession
from backoffice.application.sales_report import SalesReportHandler
from backoffice.infrastructure import settings
from backoffice.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from backoffice.infrastructure.persistence.json_order_repository import (
    JsonOrderItemRepository,
    JsonOrderRepository,
)
from backoffice.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else settings.log_level()
    logging.basicConfig(level=level, format=settings.LOG_FORMAT, force=True)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir() / "products.json")


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(settings.data_dir() / "categories.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir() / "orders.json")


def order_item_repository() -> JsonOrderItemRepository:
    return JsonOrderItemRepository(settings.data_dir() / "order_items.json")


def catalog_cache() -> CatalogCache:
    return CatalogCache(product_repository(), page_size=settings.page_size())


def point_of_sale(catalog: CatalogCache | None = None) -> PointOfSaleSession:
    checkout = CheckoutHandler(
        order_repo=order_repository(),
        order_item_repo=order_item_repository(),
        product_repo=product_repository(),
    )
    return PointOfSaleSession(catalog or catalog_cache(), checkout)


def sales_report() -> SalesReportHandler:
    return SalesReportHandler(
        order_repo=order_repository(),
        order_item_repo=order_item_repository(),
        product_repo=product_repository(),
        top_limit=settings.top_products_limit(),
    )
