"""Best-effort customer and office notifications.

A notification is a ``{type, data}`` payload handed to an external
messaging function. When an active template exists for the kind, its
rendered subject and body travel in the payload as well. Delivery
failures are logged and never reach the action that triggered them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from portal.domain.exceptions import NotificationError, StoreError
from portal.domain.model.email_template import EmailTemplate
from portal.domain.model.profile import CustomerProfile
from portal.domain.repository.email_template_repository import (
    EmailTemplateRepository,
)
from portal.domain.repository.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


def recipient_profile(
    profile_repo: ProfileRepository, customer_id: str
) -> CustomerProfile | None:
    """Look up who a notification is about, or None if the store fails.

    Called after the triggering change is already saved, so a failed
    lookup only degrades the payload.
    """
    try:
        return profile_repo.get_by_id(customer_id)
    except StoreError as exc:
        logger.warning("Could not load profile %s for notification: %s", customer_id, exc)
        return None


class NotificationKind(Enum):
    NEW_ORDER = "new_order"
    ORDER_STATUS = "order_status"
    NEW_TICKET = "new_ticket"


class Notifier(ABC):

    @abstractmethod
    def send(self, kind: NotificationKind, data: dict[str, object]) -> None:
        """Deliver a payload; raise NotificationError on failure."""


class NullNotifier(Notifier):
    """Used when no messaging function is configured."""

    def send(self, kind: NotificationKind, data: dict[str, object]) -> None:
        logger.debug("Notifications disabled, dropping %s", kind.value)


class NotificationService:

    def __init__(
        self,
        notifier: Notifier,
        template_repo: EmailTemplateRepository | None = None,
    ) -> None:
        self._notifier = notifier
        self._template_repo = template_repo

    def notify(self, kind: NotificationKind, data: dict[str, object]) -> bool:
        """Fire and forget. Returns whether delivery succeeded."""
        payload = dict(data)
        try:
            template = self._find_template(kind)
            if template is not None and template.is_active:
                payload["subject"], payload["html"] = template.render(data)
            self._notifier.send(kind, payload)
        except (NotificationError, StoreError) as exc:
            logger.warning("Could not send %s notification: %s", kind.value, exc)
            return False
        logger.info("Sent %s notification", kind.value)
        return True

    def _find_template(self, kind: NotificationKind) -> EmailTemplate | None:
        if self._template_repo is None:
            return None
        return self._template_repo.get_by_slug(kind.value)
