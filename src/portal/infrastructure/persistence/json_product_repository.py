"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from portal.domain.model.product import Product, Specifications
from portal.domain.model.value_objects import DEFAULT_CURRENCY, Money
from portal.domain.repository.product_repository import ProductRepository
from portal.infrastructure.persistence.json_collection import JsonCollection


class JsonProductRepository(JsonCollection, ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._load_raw() if str(raw["id"]).isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_sku(self, sku: str) -> Product | None:
        for raw in self._load_raw():
            if raw.get("sku") and raw["sku"].lower() == sku.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._load_raw()]
        return sorted(products, key=lambda p: p.name.lower())

    def save(self, product: Product) -> None:
        records = self._load_raw()
        self._upsert_raw(records, self._to_raw(product))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "sku": product.sku,
            "category": product.category,
            "base_price": str(product.base_price.amount),
            "currency": product.base_price.currency,
            "image_url": product.image_url,
            "specifications": product.specifications.to_mapping(),
            "variants": list(product.variants),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            sku=raw.get("sku", ""),
            category=raw.get("category", ""),
            base_price=Money(
                Decimal(str(raw.get("base_price", "0"))),
                raw.get("currency", DEFAULT_CURRENCY),
            ),
            image_url=raw.get("image_url", ""),
            specifications=Specifications.from_mapping(raw.get("specifications")),
            variants=list(raw.get("variants") or []),
        )
