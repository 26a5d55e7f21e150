"""Application service: Update Product use case."""

from __future__ import annotations

from portal.domain.exceptions import EntityNotFoundError, ValidationError
from portal.domain.model.product import Product, Specifications
from portal.domain.model.value_objects import Money
from portal.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        base_price: str | None = None,
        sku: str | None = None,
        category: str | None = None,
        image_url: str | None = None,
        specifications: dict[str, object] | None = None,
        variants: list[str] | None = None,
    ) -> Product:
        """Update the given fields of a product; None leaves a field as is.

        This does NOT affect any existing orders or carts; they
        captured a price snapshot.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None:
            product.rename(name)
        if base_price is not None:
            product.update_price(Money.of(base_price))
        if sku is not None:
            sku = sku.strip()
            other = self._product_repo.get_by_sku(sku) if sku else None
            if other is not None and other.id != product.id:
                raise ValidationError(f"Product with SKU '{sku}' already exists")
            product.sku = sku
        if category is not None:
            product.category = category.strip()
        if image_url is not None:
            product.image_url = image_url.strip()
        if specifications is not None:
            product.specifications = Specifications.from_mapping(specifications)
        if variants is not None:
            product.variants = [v.strip() for v in variants if v and v.strip()]

        self._product_repo.save(product)
        return product
