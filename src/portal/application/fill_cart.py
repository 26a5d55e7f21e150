"""Application service: put catalog items into a session's cart."""

from __future__ import annotations

from dataclasses import dataclass

from portal.domain.exceptions import EntityNotFoundError, ValidationError
from portal.domain.model.cart import Cart
from portal.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer picked (SKU + size + cartons)."""

    sku: str
    size: str
    quantity: int = 1


class FillCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, cart: Cart, specs: list[CartItemSpec]) -> None:
        """Add each spec to *cart*, summing repeats of the same size."""
        for spec in specs:
            if spec.quantity < 0:
                raise ValidationError(f"Quantity for '{spec.sku}' cannot be negative")

            product = self._product_repo.get_by_sku(spec.sku)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{spec.sku}'")
            size = spec.size.strip()
            if product.variants and size and size not in product.variants:
                raise ValidationError(
                    f"Size '{size}' is not available for {product.name} "
                    f"(choose from {', '.join(product.variants)})"
                )

            line = cart.add_line(product, size)
            cart.update_quantity(product.id, line.size, line.quantity - 1 + spec.quantity)
