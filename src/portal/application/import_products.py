"""Application service: Bulk Import Products use case (admin).

Each spreadsheet row is upserted by SKU. A row that cannot be turned
into a product is counted as failed; the import carries on with the
next row and only the totals are reported.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Mapping

from portal.application.dto import ImportReport
from portal.domain.exceptions import DomainException, ValidationError
from portal.domain.model.product import (
    DISPENSERS_PER_CARTON_KEY,
    ITEMS_PER_DISPENSER_KEY,
    UNIT_KEY,
    Product,
    Specifications,
)
from portal.domain.model.value_objects import Money
from portal.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

IMPORT_COLUMNS = (
    "name",
    "sku",
    "category",
    "base_price",
    "image_url",
    UNIT_KEY,
    ITEMS_PER_DISPENSER_KEY,
    DISPENSERS_PER_CARTON_KEY,
    "specifications",
    "variants",
)


def parse_specifications(raw: object) -> dict[str, str]:
    """Read a JSON object, or fall back to 'key:value, key:value'."""
    text = _text(raw)
    if not text:
        return {}
    try:
        parsed = json.loads(text)
    except ValueError:
        parsed = None
    if isinstance(parsed, dict):
        return {str(k): str(v) for k, v in parsed.items() if v is not None}

    specs: dict[str, str] = {}
    for pair in text.split(","):
        if ":" not in pair:
            continue
        key, value = pair.split(":", 1)
        if key.strip():
            specs[key.strip()] = value.strip()
    return specs


def parse_variants(raw: object) -> list[str]:
    return [v.strip() for v in _text(raw).split(",") if v.strip()]


class ImportProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, rows: Iterable[Mapping[str, object]]) -> ImportReport:
        succeeded = failed = 0
        for number, row in enumerate(rows, start=1):
            try:
                self._upsert(row)
            except DomainException as exc:
                failed += 1
                logger.warning("Import row %d skipped: %s", number, exc)
            else:
                succeeded += 1

        logger.info("Product import finished: %d succeeded, %d failed", succeeded, failed)
        return ImportReport(succeeded=succeeded, failed=failed)

    def _upsert(self, row: Mapping[str, object]) -> None:
        name = _text(row.get("name"))
        sku = _text(row.get("sku"))
        if not name:
            raise ValidationError("Product name is required")
        if not sku:
            raise ValidationError("SKU is required for import")

        raw_specs: dict[str, object] = dict(parse_specifications(row.get("specifications")))
        for key in (UNIT_KEY, ITEMS_PER_DISPENSER_KEY, DISPENSERS_PER_CARTON_KEY):
            value = row.get(key)
            if _text(value):
                raw_specs[key] = _count_text(value)

        price = Money.of(_text(row.get("base_price")) or "0")
        specifications = Specifications.from_mapping(raw_specs)
        variants = parse_variants(row.get("variants"))

        product = self._product_repo.get_by_sku(sku)
        if product is None:
            product = Product(
                id=self._product_repo.next_id(),
                name=name,
                base_price=price,
                sku=sku,
            )
        else:
            product.rename(name)
            product.update_price(price)

        product.category = _text(row.get("category"))
        product.image_url = _text(row.get("image_url"))
        product.specifications = specifications
        product.variants = variants
        self._product_repo.save(product)


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _count_text(value: object) -> str:
    """Spreadsheets hand integers back as floats (6.0); store '6'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return _text(value)
