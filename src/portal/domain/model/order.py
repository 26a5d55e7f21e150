"""Order aggregate.

The Order is an aggregate root that owns its line items. Line items are
written once at submission; afterwards the only mutation is a status
change by an administrator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from portal.domain.exceptions import ValidationError
from portal.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    DRAFT = "draft"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    COMPLETED = "completed"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status '{raw}' (expected one of: {allowed})"
            ) from exc


# Administrators may move an order to any other status, backwards
# included. Narrow a row here to restrict a transition.
STATUS_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    status: frozenset(s for s in OrderStatus if s != status)
    for status in OrderStatus
}


STATUS_LABELS = {
    OrderStatus.DRAFT: "Draft",
    OrderStatus.PENDING: "Pending",
    OrderStatus.CONFIRMED: "Confirmed",
    OrderStatus.SHIPPED: "Shipped",
    OrderStatus.COMPLETED: "Completed",
}


@dataclass(frozen=True)
class ShippingSnapshot:
    """Copy of the delivery address taken when the order was submitted.

    Later edits to the customer's saved address never reach this copy.
    """

    site_name: str
    address: str
    contact_name: str = ""
    address_id: str | None = None


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product and its price at order-creation time."""

    product_id: str
    product_name: str
    size: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    sku: str = ""
    unit: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__``
    is intentionally simple so the repository can reconstitute
    persisted orders without re-validating.
    """

    id: str | None
    customer_id: str
    order_number: str
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PENDING
    shipping_address: ShippingSnapshot | None = None
    comment: str = ""
    total_amount: Money = field(default_factory=Money.zero)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        order_number: str,
        items: list[OrderLineItem],
        status: OrderStatus,
        shipping_address: ShippingSnapshot | None = None,
        comment: str = "",
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_id:
            raise ValidationError("Customer is required")
        if not order_number:
            raise ValidationError("Order number is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        if status not in (OrderStatus.PENDING, OrderStatus.DRAFT):
            raise ValidationError(
                f"New orders must be pending or draft, got {status.value}"
            )
        if status == OrderStatus.PENDING and shipping_address is None:
            raise ValidationError("A delivery address is required to submit an order")

        order = Order(
            id=None,
            customer_id=customer_id,
            order_number=order_number,
            items=list(items),
            status=status,
            shipping_address=shipping_address,
            comment=(comment or "").strip(),
        )
        order.total_amount = order.items_total
        return order

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> bool:
        """Move to *new_status*; returns False when nothing changed."""
        if new_status == self.status:
            return False
        if new_status not in STATUS_TRANSITIONS[self.status]:
            raise ValidationError(
                f"Cannot move order from {self.status.value} to {new_status.value}"
            )
        self.status = new_status
        return True

    def submit_draft(self, shipping_address: ShippingSnapshot) -> None:
        """Turn a saved draft into a pending order."""
        if self.status != OrderStatus.DRAFT:
            raise ValidationError(
                f"Only draft orders can be submitted, order is {self.status.value}"
            )
        self.shipping_address = shipping_address
        self.status = OrderStatus.PENDING

    # --- Computed properties --------------------------------------------------

    @property
    def items_total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def display_number(self) -> str:
        return self.order_number or (self.id or "")[:8]

    @property
    def is_draft(self) -> bool:
        return self.status == OrderStatus.DRAFT
