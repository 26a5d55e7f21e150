"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from portal.domain.exceptions import ValidationError
from portal.domain.model.product import Product, Specifications
from portal.domain.model.value_objects import Money
from portal.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        base_price: str,
        sku: str = "",
        category: str = "",
        image_url: str = "",
        specifications: dict[str, object] | None = None,
        variants: list[str] | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        sku = (sku or "").strip()
        if sku and self._product_repo.get_by_sku(sku) is not None:
            raise ValidationError(f"Product with SKU '{sku}' already exists")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            base_price=Money.of(base_price),
            sku=sku,
            category=(category or "").strip(),
            image_url=(image_url or "").strip(),
            specifications=Specifications.from_mapping(specifications),
            variants=[v.strip() for v in variants or [] if v and v.strip()],
        )
        self._product_repo.save(product)
        logger.info("Added product %s (%s)", product.name, product.sku or product.id)
        return product
