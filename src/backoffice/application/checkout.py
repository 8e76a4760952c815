"""Application service: Checkout use case.

Commits a finished cart to the store as an order, its order items and
one stock decrement per line, in that order. Each step only runs if
the previous one succeeded.

The steps are not one transaction. If writing the items fails, the
order row already written stays behind without compensation. Stock
decrements are independent of each other: one failing product does not
stop the rest, and the sale is still reported as completed with a
warning. Moving all three steps into a single server-side transaction
would close these gaps.
"""

from __future__ import annotations

import logging

from backoffice.application.catalog_cache import CatalogCache
from backoffice.application.dto import CheckoutReceipt, OrderItemDTO
from backoffice.application.outcome import Outcome, workflow
from backoffice.domain.exceptions import EntityNotFoundError, StoreError, ValidationError
from backoffice.domain.model.cart import Cart, CartLine
from backoffice.domain.model.order import Order, OrderItem
from backoffice.domain.model.value_objects import Quantity
from backoffice.domain.repository.order_repository import (
    OrderItemRepository,
    OrderRepository,
)
from backoffice.domain.repository.product_repository import ProductRepository

logger = logging.getLogger("backoffice.checkout")


class CheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        order_item_repo: OrderItemRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._order_item_repo = order_item_repo
        self._product_repo = product_repo

    @workflow("complete the transaction")
    def handle(self, cart: Cart, catalog: CatalogCache) -> Outcome:
        """Run the checkout sequence for ``cart``.

        Steps:
        1. Validate locally (non-empty cart, customer name, stock).
        2. Insert the order row with status ``pending``.
        3. Insert one order item per cart line.
        4. Decrement each product's stock independently.
        5. Refresh the catalog cache and clear the cart.
        """
        self._validate(cart, catalog)

        total = cart.compute_total()
        order = Order.create(customer_name=cart.customer_name, total_amount=total)

        # Step 1: order row
        try:
            order_id = self._order_repo.add(order)
        except StoreError as exc:
            logger.error("Checkout aborted, order insert failed: %s", exc)
            return Outcome.store_error(f"Failed to create order: {exc}")
        logger.info(
            "Order #%s created for %s (total %s)", order_id, order.customer_name, total
        )

        # Step 2: order items
        items = [self._to_order_item(order_id, line) for line in cart.lines]
        try:
            self._order_item_repo.add_many(items)
        except StoreError as exc:
            logger.error(
                "Order #%s has no items: item insert failed: %s", order_id, exc
            )
            receipt = CheckoutReceipt(
                order_id=order_id,
                customer_name=order.customer_name,
                total=str(total),
            )
            return Outcome.store_error(
                f"Order #{order_id} was created but its items could not be saved: {exc}",
                receipt,
            )

        # Step 3: stock decrements, one write per product
        warnings: list[str] = []
        failed: list[int] = []
        for line in cart.lines:
            try:
                remaining = self._decrement_stock(line)
            except (StoreError, EntityNotFoundError) as exc:
                logger.error(
                    "Stock decrement failed for product %s on order #%s: %s",
                    line.product_id, order_id, exc,
                )
                failed.append(line.product_id)
                warnings.append(f"Failed to update stock for {line.product_name}: {exc}")
                continue

            # Step 4: keep the cache in line with what the store now holds
            catalog.apply_stock(line.product_id, remaining)
            if remaining <= 0:
                warnings.append(f"{line.product_name} is now out of stock. Please restock.")

        receipt = CheckoutReceipt(
            order_id=order_id,
            customer_name=order.customer_name,
            total=str(total),
            items=[self._to_item_dto(item) for item in items],
            failed_products=failed,
        )
        cart.clear()
        return Outcome.success(
            "Transaction completed successfully!", receipt, tuple(warnings)
        )

    # --- Steps ----------------------------------------------------------------

    @staticmethod
    def _validate(cart: Cart, catalog: CatalogCache) -> None:
        if cart.is_empty:
            raise ValidationError("Cart is empty")
        if not cart.customer_name or not cart.customer_name.strip():
            raise ValidationError("Please enter customer name")
        for line in cart.lines:
            product = catalog.get(line.product_id)
            on_hand = product.quantity if product is not None else line.stock
            if line.quantity > on_hand:
                raise ValidationError(
                    f"Not enough stock for {line.product_name} "
                    f"(in cart {line.quantity}, on hand {on_hand})"
                )

    def _decrement_stock(self, line: CartLine) -> int:
        """Write the product's new on-hand quantity and return it.

        Reads the current row first so the decrement starts from the
        store's value rather than the cart's snapshot. Nothing locks the
        row between that read and the write.
        """
        product = self._product_repo.get_by_id(line.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product ID {line.product_id} no longer exists")

        remaining = product.quantity - line.quantity
        if remaining < 0:
            logger.warning(
                "Stock for %s would go negative (%d); clamping to zero",
                product.name, remaining,
            )
            remaining = 0
        self._product_repo.update_quantity(line.product_id, remaining)
        return remaining

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_order_item(order_id: int, line: CartLine) -> OrderItem:
        return OrderItem(
            order_id=order_id,
            product_id=line.product_id,
            product_name=line.product_name,
            price=line.unit_price,  # <-- price snapshot
            quantity=Quantity(line.quantity),
        )

    @staticmethod
    def _to_item_dto(item: OrderItem) -> OrderItemDTO:
        return OrderItemDTO(
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity.value,
            unit_price=str(item.price),
            line_total=str(item.line_total),
        )
