"""Product aggregate.

Products live independently of orders. Prices and descriptions change
through catalog management; the on-hand quantity changes through catalog
management and through stock decrements at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``price`` is the unit selling price used at the point of sale;
    ``srp_price`` is the suggested retail price shown for reference.
    ``id`` is None until the store assigns one.
    """

    id: int | None
    name: str
    price: Money
    srp_price: Money
    quantity: int = 0
    image: str | None = None
    description: str = ""
    category_id: int | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        srp_price: Money,
        quantity: int,
        description: str = "",
        image: str | None = None,
        category_id: int | None = None,
    ) -> Product:
        """Create a new catalog entry, enforcing all invariants."""
        _check_price(price)
        return Product(
            id=None,
            name=_clean_name(name),
            price=price,
            srp_price=srp_price,
            quantity=_check_stock(quantity),
            image=image or None,
            description=(description or "").strip(),
            category_id=category_id,
        )

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self,
        name: str,
        price: Money,
        srp_price: Money,
        quantity: int,
        description: str = "",
    ) -> None:
        """Replace the editable fields of the product in one step.

        Existing orders are unaffected: order items captured the name and
        price at sale time.
        """
        _check_price(price)
        self.name = _clean_name(name)
        self.price = price
        self.srp_price = srp_price
        self.quantity = _check_stock(quantity)
        self.description = (description or "").strip()

    def set_stock(self, quantity: int) -> None:
        self.quantity = _check_stock(quantity)

    # --- Computed properties --------------------------------------------------

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()


def _check_price(price: Money) -> None:
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")


def _check_stock(quantity: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Stock quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Stock quantity cannot be negative")
    return quantity
