"""Domain service: the printable view of an order.

Both export formats and the on-screen invoice render the same
``OrderDocument`` so they can never disagree on totals. Net is the sum
of the line items; VAT and gross are derived at render time and never
stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from portal.domain.model.order import STATUS_LABELS, Order, ShippingSnapshot
from portal.domain.model.profile import CustomerProfile
from portal.domain.model.value_objects import Money

DEFAULT_VAT_RATE = Decimal("0.27")
COLUMNS = ("SKU", "Product", "Size", "Qty", "Unit price", "Total")


@dataclass(frozen=True)
class Issuer:
    name: str
    address: str
    tax_id: str
    email: str


@dataclass(frozen=True)
class InvoiceTotals:
    net: Money
    vat: Money
    gross: Money
    vat_rate: Decimal

    @staticmethod
    def from_net(net: Money, vat_rate: Decimal = DEFAULT_VAT_RATE) -> InvoiceTotals:
        return InvoiceTotals(
            net=net,
            vat=net.scaled(vat_rate),
            gross=net.scaled(Decimal("1") + vat_rate),
            vat_rate=vat_rate,
        )

    @property
    def vat_label(self) -> str:
        return f"VAT ({self.vat_rate * 100:.0f}%)"


@dataclass(frozen=True)
class DocumentRow:
    sku: str
    product_name: str
    size: str
    quantity: int
    unit: str
    unit_price: Money
    line_total: Money

    def as_text(self) -> tuple[str, str, str, str, str, str]:
        return (
            self.sku or "-",
            self.product_name,
            self.size,
            f"{self.quantity} {self.unit}".strip(),
            str(self.unit_price),
            str(self.line_total),
        )


@dataclass(frozen=True)
class OrderDocument:
    order_number: str
    created_at: datetime
    status_label: str
    issuer: Issuer
    buyer: CustomerProfile
    shipping: ShippingSnapshot | None
    rows: list[DocumentRow]
    totals: InvoiceTotals
    comment: str = ""

    @property
    def file_stem(self) -> str:
        return f"Order_{self.order_number}"

    @property
    def date_label(self) -> str:
        return self.created_at.strftime("%Y.%m.%d.")


def build_order_document(
    order: Order,
    buyer: CustomerProfile | None,
    issuer: Issuer,
    vat_rate: Decimal = DEFAULT_VAT_RATE,
    skus: dict[str, str] | None = None,
) -> OrderDocument:
    """Assemble the document for *order*.

    ``skus`` maps product id to the catalog's current SKU, used for
    line items stored before SKUs were snapshotted.
    """
    skus = skus or {}
    rows = [
        DocumentRow(
            sku=item.sku or skus.get(item.product_id, ""),
            product_name=item.product_name,
            size=item.size,
            quantity=item.quantity.value,
            unit=item.unit or "db",
            unit_price=item.unit_price,
            line_total=item.line_total,
        )
        for item in order.items
    ]
    net = Money.zero()
    for row in rows:
        net = net + row.line_total

    return OrderDocument(
        order_number=order.order_number or order.id or "",
        created_at=order.created_at,
        status_label=STATUS_LABELS[order.status],
        issuer=issuer,
        buyer=buyer or CustomerProfile(id=order.customer_id),
        shipping=order.shipping_address,
        rows=rows,
        totals=InvoiceTotals.from_net(net, vat_rate),
        comment=order.comment,
    )
