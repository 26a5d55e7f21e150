"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from portal.domain.model.order import Order


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    size: str
    quantity: int
    unit_price: str  # formatted, e.g. "87 000 Ft"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order header with its items as displayed to the user."""

    id: str
    order_number: str
    customer_id: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    shipping: str
    comment: str
    created_at: str


@dataclass(frozen=True)
class ImportReport:
    """Output: aggregate result of a bulk product import."""

    succeeded: int
    failed: int

    @property
    def total(self) -> int:
        return self.succeeded + self.failed


def order_to_dto(order: Order) -> OrderDTO:
    shipping = ""
    if order.shipping_address is not None:
        shipping = f"{order.shipping_address.site_name}, {order.shipping_address.address}"
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.display_number,
        customer_id=order.customer_id,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_name=item.product_name,
                size=item.size,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        shipping=shipping,
        comment=order.comment,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
