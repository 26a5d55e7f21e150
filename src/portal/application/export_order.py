"""Application service: Export Order use case.

Builds the ``OrderDocument`` once and hands it to a format-specific
exporter (PDF, spreadsheet). Export is read-only.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path

from portal.domain.exceptions import EntityNotFoundError
from portal.domain.repository.order_repository import OrderRepository
from portal.domain.repository.product_repository import ProductRepository
from portal.domain.repository.profile_repository import ProfileRepository
from portal.domain.service.order_document import (
    DEFAULT_VAT_RATE,
    Issuer,
    OrderDocument,
    build_order_document,
)

logger = logging.getLogger(__name__)


class DocumentExporter(ABC):

    extension: str = ""

    @abstractmethod
    def render(self, document: OrderDocument) -> bytes:
        """Return the encoded file contents."""

    def write(self, document: OrderDocument, directory: Path) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{document.file_stem}.{self.extension}"
        path.write_bytes(self.render(document))
        return path


class ExportOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        profile_repo: ProfileRepository,
        product_repo: ProductRepository,
        issuer: Issuer,
        vat_rate: Decimal = DEFAULT_VAT_RATE,
    ) -> None:
        self._order_repo = order_repo
        self._profile_repo = profile_repo
        self._product_repo = product_repo
        self._issuer = issuer
        self._vat_rate = vat_rate

    def document(self, order_id: str, customer_id: str | None = None) -> OrderDocument:
        order = self._order_repo.get_by_id(order_id)
        if order is None or (customer_id is not None and order.customer_id != customer_id):
            raise EntityNotFoundError(f"Order #{order_id} not found")

        skus = {}
        for item in order.items:
            if not item.sku:
                product = self._product_repo.get_by_id(item.product_id)
                if product is not None:
                    skus[item.product_id] = product.sku

        return build_order_document(
            order,
            buyer=self._profile_repo.get_by_id(order.customer_id),
            issuer=self._issuer,
            vat_rate=self._vat_rate,
            skus=skus,
        )

    def handle(
        self,
        order_id: str,
        exporter: DocumentExporter,
        directory: Path,
        customer_id: str | None = None,
    ) -> Path:
        document = self.document(order_id, customer_id)
        path = exporter.write(document, directory)
        logger.info("Exported order %s to %s", document.order_number, path)
        return path
