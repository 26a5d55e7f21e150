"""Application service: Submit a saved draft order."""

from __future__ import annotations

import logging

from portal.application.dto import OrderDTO, order_to_dto
from portal.application.notifications import NotificationKind, NotificationService
from portal.application.shipping import resolve_shipping
from portal.domain.exceptions import EntityNotFoundError, ValidationError
from portal.domain.model.cart import CustomerSession
from portal.domain.repository.address_repository import AddressRepository
from portal.domain.repository.order_repository import OrderRepository
from portal.domain.repository.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class SubmitDraftHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        address_repo: AddressRepository,
        settings_repo: SettingsRepository,
        notifications: NotificationService,
    ) -> None:
        self._order_repo = order_repo
        self._address_repo = address_repo
        self._settings_repo = settings_repo
        self._notifications = notifications

    def handle(self, session: CustomerSession, order_id: str, address_id: str | None) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None or order.customer_id != session.customer_id:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        shipping = resolve_shipping(
            session.customer_id, address_id, self._address_repo, self._settings_repo
        )
        if shipping is None:
            shipping = order.shipping_address
        if shipping is None:
            raise ValidationError("Please select a delivery address to submit the order")

        order.submit_draft(shipping)
        self._order_repo.save(order)
        logger.info("Draft %s submitted by customer %s", order.order_number, session.customer_id)

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
