"""Integration tests for the Checkout use case.

Uses in-memory fake repositories — no file I/O.
"""

from unittest.mock import patch

from backoffice.application.catalog_cache import CatalogCache
from backoffice.application.checkout import CheckoutHandler
from backoffice.application.outcome import OutcomeKind
from backoffice.domain.model.cart import Cart
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderItemRepository, FakeOrderRepository, FakeProductRepository


def _setup(stock_a: int = 10, stock_b: int = 10):
    """Products A (100, stock_a) and B (50, stock_b), loaded into a catalog."""
    product_repo = FakeProductRepository([
        Product(id=1, name="A", price=Money.of("100"), srp_price=Money.of("110"), quantity=stock_a),
        Product(id=2, name="B", price=Money.of("50"), srp_price=Money.of("55"), quantity=stock_b),
    ])
    order_repo = FakeOrderRepository()
    item_repo = FakeOrderItemRepository()
    catalog = CatalogCache(product_repo)
    catalog.refresh()
    handler = CheckoutHandler(order_repo, item_repo, product_repo)
    return handler, catalog, order_repo, item_repo, product_repo


def _fill(cart: Cart, catalog: CatalogCache, wanted: dict[int, int]) -> Cart:
    for product_id, qty in wanted.items():
        product = catalog.get(product_id)
        cart.add_item(product)
        if qty > 1:
            cart.adjust_quantity(product_id, qty - 1, product.quantity)
    return cart


class TestCheckoutHappyPath:

    def test_jane_scenario(self):
        handler, catalog, order_repo, item_repo, product_repo = _setup()
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 2, 2: 1})

        outcome = handler.handle(cart, catalog)

        assert outcome.kind == OutcomeKind.SUCCESS
        receipt = outcome.payload
        order = order_repo.get_by_id(receipt.order_id)
        assert order.customer_name == "Jane"
        assert order.total_amount == Money.of("250")
        assert order.status == OrderStatus.PENDING

        items = item_repo.list_for_orders([receipt.order_id])
        assert [(i.product_id, i.product_name, i.price, i.quantity) for i in items] == [
            (1, "A", Money.of("100"), Quantity(2)),
            (2, "B", Money.of("50"), Quantity(1)),
        ]

        assert product_repo.stock_of(1) == 8
        assert product_repo.stock_of(2) == 9

    def test_cart_cleared_and_catalog_updated(self):
        handler, catalog, *_ = _setup()
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 2})

        handler.handle(cart, catalog)

        assert cart.is_empty
        assert cart.customer_name == ""
        assert catalog.get(1).quantity == 8

    def test_receipt(self):
        handler, catalog, *_ = _setup()
        cart = _fill(Cart(customer_name="  Jane "), catalog, {1: 1, 2: 3})

        receipt = handler.handle(cart, catalog).payload

        assert receipt.customer_name == "Jane"
        assert receipt.total == "₱250.00"
        assert [i.line_total for i in receipt.items] == ["₱100.00", "₱150.00"]
        assert receipt.failed_products == []

    def test_selling_last_unit_warns_to_restock(self):
        handler, catalog, *_ = _setup(stock_a=2)
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 2, 2: 1})

        outcome = handler.handle(cart, catalog)

        assert outcome.kind == OutcomeKind.SUCCESS
        assert outcome.warnings == ("A is now out of stock. Please restock.",)


class TestCheckoutValidation:

    def test_empty_cart_writes_nothing(self):
        handler, catalog, order_repo, item_repo, product_repo = _setup()

        outcome = handler.handle(Cart(customer_name="Jane"), catalog)

        assert outcome.kind == OutcomeKind.VALIDATION_ERROR
        assert outcome.message == "Cart is empty"
        assert order_repo.insert_calls == 0
        assert item_repo.insert_calls == 0
        assert product_repo.quantity_updates == []

    def test_blank_customer_writes_nothing(self):
        handler, catalog, order_repo, item_repo, product_repo = _setup()
        cart = _fill(Cart(customer_name="   "), catalog, {1: 1})

        outcome = handler.handle(cart, catalog)

        assert outcome.kind == OutcomeKind.VALIDATION_ERROR
        assert "customer name" in outcome.message
        assert order_repo.insert_calls == 0
        assert item_repo.insert_calls == 0
        assert product_repo.quantity_updates == []
        assert not cart.is_empty

    def test_stock_dropped_since_cart_was_filled(self):
        handler, catalog, order_repo, *_ = _setup(stock_a=5)
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 4})
        catalog.apply_stock(1, 3)

        outcome = handler.handle(cart, catalog)

        assert outcome.kind == OutcomeKind.VALIDATION_ERROR
        assert "Not enough stock" in outcome.message
        assert order_repo.insert_calls == 0


class TestCheckoutPartialFailure:

    def test_order_insert_failure_stops_everything(self):
        handler, catalog, order_repo, item_repo, product_repo = _setup()
        order_repo.fail_inserts = True
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 1})

        outcome = handler.handle(cart, catalog)

        assert outcome.kind == OutcomeKind.STORE_ERROR
        assert item_repo.insert_calls == 0
        assert product_repo.quantity_updates == []
        assert not cart.is_empty

    def test_item_insert_failure_leaves_order_behind(self):
        handler, catalog, order_repo, item_repo, product_repo = _setup()
        item_repo.fail_inserts = True
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 1})

        outcome = handler.handle(cart, catalog)

        assert outcome.kind == OutcomeKind.STORE_ERROR
        assert outcome.payload.order_id == 1
        assert outcome.payload.items == []
        assert order_repo.count() == 1  # no compensating delete
        assert product_repo.quantity_updates == []
        assert not cart.is_empty

    def test_one_failed_decrement_does_not_block_others(self):
        handler, catalog, order_repo, item_repo, product_repo = _setup()
        product_repo.fail_updates_for = {1}
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 2, 2: 3})

        outcome = handler.handle(cart, catalog)

        assert outcome.kind == OutcomeKind.SUCCESS
        assert outcome.payload.failed_products == [1]
        assert any("Failed to update stock for A" in w for w in outcome.warnings)
        assert product_repo.stock_of(1) == 10
        assert product_repo.stock_of(2) == 7
        assert catalog.get(1).quantity == 10
        assert catalog.get(2).quantity == 7
        assert cart.is_empty

    def test_product_deleted_before_decrement(self):
        handler, catalog, _, _, product_repo = _setup()
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 1, 2: 1})
        product_repo.delete(1)

        outcome = handler.handle(cart, catalog)

        assert outcome.ok
        assert outcome.payload.failed_products == [1]
        assert product_repo.stock_of(2) == 9

    def test_decrement_starts_from_store_value_and_clamps_at_zero(self):
        handler, catalog, _, _, product_repo = _setup(stock_a=5)
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 4})
        # another till sold 3 in the meantime
        product_repo.update_quantity(1, 2)

        outcome = handler.handle(cart, catalog)

        assert outcome.ok
        assert product_repo.stock_of(1) == 0
        assert catalog.get(1).quantity == 0
        assert "Please restock" in outcome.warnings[0]

    def test_unexpected_error_is_reported_not_raised(self):
        handler, catalog, order_repo, *_ = _setup()
        cart = _fill(Cart(customer_name="Jane"), catalog, {1: 1})

        with patch.object(order_repo, "add", side_effect=RuntimeError("boom")):
            outcome = handler.handle(cart, catalog)

        assert outcome.kind == OutcomeKind.UNEXPECTED_ERROR
        assert "unexpected error" in outcome.message
