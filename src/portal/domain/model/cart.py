"""Shopping cart held by a single browsing session.

The cart is never persisted. It lives on the ``CustomerSession`` that
owns it and is handed to the checkout handler explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from portal.domain.exceptions import ValidationError
from portal.domain.model.product import Product
from portal.domain.model.value_objects import Money


@dataclass
class CartLine:
    product_id: str
    product_name: str
    size: str
    unit_price: Money  # carton price captured when the line was added
    quantity: int = 1
    sku: str = ""
    unit: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return self.product_id, self.size

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


class Cart:
    """Cart lines keyed by (product id, size).

    Invariant: at most one line per (product, size) pair.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    def add_line(self, product: Product, size: str) -> CartLine:
        """Add one carton of *product* in *size*."""
        if not size or not size.strip():
            raise ValidationError("Please choose a size")
        size = size.strip()

        line = self._find(product.id, size)
        if line is not None:
            line.quantity += 1
            return line

        line = CartLine(
            product_id=product.id,
            product_name=product.name,
            size=size,
            unit_price=product.carton_price,
            sku=product.sku,
            unit=product.packaging.unit,
        )
        self._lines.append(line)
        return line

    def update_quantity(self, product_id: str, size: str, quantity: int) -> None:
        """Set a line's quantity.

        Negative values are ignored. Zero keeps the line in the cart
        until it is removed explicitly.
        """
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Cart quantity must be a whole number, got {quantity!r}"
            )
        if quantity < 0:
            return
        line = self._find(product_id, size)
        if line is not None:
            line.quantity = quantity

    def remove_line(self, product_id: str, size: str) -> None:
        self._lines = [l for l in self._lines if l.key != (product_id, size)]

    def clear(self) -> None:
        self._lines = []

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.subtotal
        return result

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return self.line_count

    def _find(self, product_id: str, size: str) -> CartLine | None:
        for line in self._lines:
            if line.key == (product_id, size):
                return line
        return None


@dataclass
class CustomerSession:
    """The signed-in customer and the cart they are building."""

    customer_id: str
    email: str = ""
    cart: Cart = field(default_factory=Cart)
