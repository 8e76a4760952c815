"""Cart aggregate: the in-progress sale at the point of sale.

The cart never holds two lines for the same product, and a line's
quantity never exceeds the on-hand stock seen at the last accepted check. Totals are recomputed on every read.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from backoffice.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    OutOfStockError,
    ValidationError,
)
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money


@dataclass
class CartLine:
    """One product in the cart with its captured unit price."""

    product_id: int
    product_name: str
    unit_price: Money  # captured when the line was created
    quantity: int
    stock: int  # on-hand quantity at the last accepted stock check

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    """The in-progress sale: a customer name and one line per product.

    Rejected mutations leave every line untouched.
    """

    customer_name: str = ""
    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> CartLine:
        """Add one unit of ``product``.

        A second add for the same product increments the existing line.
        Raises OutOfStockError when nothing is on hand and
        InsufficientStockError when the line is already at the stock limit.
        """
        if product.id is None:
            raise ValidationError(f"Product '{product.name}' has not been saved")
        if product.quantity <= 0:
            raise OutOfStockError(f"{product.name} is out of stock")

        line = self.find(product.id)
        if line is None:
            line = CartLine(
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,
                quantity=1,
                stock=product.quantity,
            )
            self.lines.append(line)
            return line

        if line.quantity + 1 > product.quantity:
            raise InsufficientStockError(
                f"Not enough stock for {product.name} "
                f"(in cart {line.quantity}, on hand {product.quantity})"
            )
        line.quantity += 1
        line.stock = product.quantity
        return line

    def adjust_quantity(self, product_id: int, delta: int, on_hand: int) -> CartLine:
        """Apply ``delta`` to a line, checked against ``on_hand``.

        Results of zero or below are rejected rather than removing the
        line; removal is always explicit via ``remove_item``.
        """
        line = self.find(product_id)
        if line is None:
            raise EntityNotFoundError(f"Product ID {product_id} is not in the cart")

        new_quantity = line.quantity + delta
        if new_quantity <= 0:
            raise ValidationError(
                f"Quantity of {line.product_name} must stay above zero; "
                f"remove the item instead"
            )
        if new_quantity > on_hand:
            raise InsufficientStockError(
                f"Not enough stock for {line.product_name} "
                f"(requested {new_quantity}, on hand {on_hand})"
            )
        line.quantity = new_quantity
        line.stock = on_hand
        return line

    def remove_item(self, product_id: int) -> CartLine | None:
        line = self.find(product_id)
        if line is not None:
            self.lines.remove(line)
        return line

    def clear(self) -> None:
        self.lines.clear()
        self.customer_name = ""

    # --- Queries --------------------------------------------------------------

    def compute_total(self) -> Money:
        total = Money.zero()
        for line in self.lines:
            total = total + line.line_total
        return total

    def find(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
