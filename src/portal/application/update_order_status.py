"""Application service: Update Order Status use case (admin).

Any status may be chosen, backwards included. When the status actually
changes, the owning customer is notified on a best-effort basis.
"""

from __future__ import annotations

import logging

from portal.application.notifications import (
    NotificationKind,
    NotificationService,
    recipient_profile,
)
from portal.domain.exceptions import EntityNotFoundError
from portal.domain.model.order import OrderStatus
from portal.domain.repository.order_repository import OrderRepository
from portal.domain.repository.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        profile_repo: ProfileRepository,
        notifications: NotificationService,
    ) -> None:
        self._order_repo = order_repo
        self._profile_repo = profile_repo
        self._notifications = notifications

    def handle(self, order_id: str, new_status: str) -> bool:
        """Set the order's status. Returns False if it was already set."""
        status = OrderStatus.parse(new_status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        if not order.change_status(status):
            return False
        self._order_repo.save(order)
        logger.info(
            "Order %s moved from %s to %s", order.order_number, previous.value, status.value
        )

        profile = recipient_profile(self._profile_repo, order.customer_id)
        self._notifications.notify(
            NotificationKind.ORDER_STATUS,
            {
                "order_number": order.order_number,
                "user_email": profile.email if profile else "",
                "status": status.value,
            },
        )
        return True
