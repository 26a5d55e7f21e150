"""Application service: Submit Order use case.

Turns the session's cart into a persisted order. Header and line items
are written in a single repository call, so a store failure leaves
nothing behind and the cart intact for a retry.
"""

from __future__ import annotations

import logging
from typing import Callable

from portal.application.dto import OrderDTO, order_to_dto
from portal.application.notifications import NotificationKind, NotificationService
from portal.application.shipping import resolve_shipping
from portal.domain.exceptions import ValidationError
from portal.domain.model.cart import CustomerSession
from portal.domain.model.order import Order, OrderLineItem, OrderStatus
from portal.domain.model.value_objects import Quantity
from portal.domain.repository.address_repository import AddressRepository
from portal.domain.repository.order_repository import OrderRepository
from portal.domain.repository.settings_repository import SettingsRepository
from portal.domain.service.order_number import OrderNumberGenerator

logger = logging.getLogger(__name__)

DEFAULT_NUMBER_ATTEMPTS = 5


class SubmitOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        address_repo: AddressRepository,
        settings_repo: SettingsRepository,
        notifications: NotificationService,
        order_numbers: Callable[[], str] | None = None,
        number_attempts: int = DEFAULT_NUMBER_ATTEMPTS,
    ) -> None:
        self._order_repo = order_repo
        self._address_repo = address_repo
        self._settings_repo = settings_repo
        self._notifications = notifications
        self._order_numbers = order_numbers or OrderNumberGenerator()
        self._number_attempts = max(1, number_attempts)

    def handle(
        self,
        session: CustomerSession,
        address_id: str | None,
        status: OrderStatus = OrderStatus.PENDING,
        comment: str = "",
    ) -> OrderDTO | None:
        """Submit the cart as a pending order or save it as a draft.

        Steps:
        1. An empty cart is a no-op.
        2. Resolve the delivery address into a snapshot (required
           unless saving a draft).
        3. Drop zero-quantity lines and build the Order aggregate.
        4. Persist header and items together.
        5. Clear the cart; notify the office for pending orders.
        """
        cart = session.cart
        if cart.is_empty:
            logger.info("Cart of customer %s is empty, nothing to submit", session.customer_id)
            return None

        if status not in (OrderStatus.PENDING, OrderStatus.DRAFT):
            raise ValidationError("Orders can only be submitted as pending or saved as draft")

        shipping = resolve_shipping(
            session.customer_id, address_id, self._address_repo, self._settings_repo
        )
        if status == OrderStatus.PENDING and shipping is None:
            raise ValidationError("Please select a delivery address to submit the order")

        items = [
            OrderLineItem(
                product_id=line.product_id,
                product_name=line.product_name,
                size=line.size,
                quantity=Quantity(line.quantity),
                unit_price=line.unit_price,  # <-- price snapshot
                sku=line.sku,
                unit=line.unit,
            )
            for line in cart.lines
            if line.quantity > 0
        ]
        if not items:
            raise ValidationError("Every cart line has zero quantity")

        order = Order.create(
            customer_id=session.customer_id,
            order_number=self._unique_order_number(),
            items=items,
            status=status,
            shipping_address=shipping,
            comment=comment,
        )
        self._order_repo.add(order)
        logger.info(
            "Order %s saved as %s for customer %s (%s)",
            order.order_number, status.value, session.customer_id, order.total_amount,
        )

        cart.clear()

        if status == OrderStatus.PENDING:
            self._notifications.notify(
                NotificationKind.NEW_ORDER,
                {
                    "order_number": order.order_number,
                    "total_amount": str(order.total_amount),
                    "user_email": session.email,
                    "order_id": order.id,
                },
            )

        return order_to_dto(order)

    def _unique_order_number(self) -> str:
        for _ in range(self._number_attempts):
            number = self._order_numbers()
            if self._order_repo.get_by_number(number) is None:
                return number
            logger.warning("Order number %s already taken, generating another", number)
        raise ValidationError("Could not allocate a unique order number, please retry")
