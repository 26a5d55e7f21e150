"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from portal.application.notifications import NotificationService, Notifier, NullNotifier
from portal.infrastructure.config import get_settings
from portal.infrastructure.notifications.http_notifier import HttpNotifier
from portal.infrastructure.persistence.json_address_repository import (
    JsonAddressRepository,
)
from portal.infrastructure.persistence.json_email_template_repository import (
    JsonEmailTemplateRepository,
)
from portal.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from portal.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from portal.infrastructure.persistence.json_profile_repository import (
    JsonProfileRepository,
)
from portal.infrastructure.persistence.json_settings_repository import (
    JsonSettingsRepository,
)
from portal.infrastructure.persistence.json_ticket_repository import (
    JsonTicketRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().data_dir / "orders.json")


def address_repository() -> JsonAddressRepository:
    return JsonAddressRepository(get_settings().data_dir / "addresses.json")


def profile_repository() -> JsonProfileRepository:
    return JsonProfileRepository(get_settings().data_dir / "profiles.json")


def ticket_repository() -> JsonTicketRepository:
    return JsonTicketRepository(get_settings().data_dir / "tickets.json")


def email_template_repository() -> JsonEmailTemplateRepository:
    return JsonEmailTemplateRepository(get_settings().data_dir / "email_templates.json")


def settings_repository() -> JsonSettingsRepository:
    return JsonSettingsRepository(get_settings().data_dir / "settings.json")


def notifier() -> Notifier:
    settings = get_settings()
    if not settings.notify_url:
        return NullNotifier()
    return HttpNotifier(
        settings.notify_url,
        token=settings.notify_token,
        timeout=settings.notify_timeout,
    )


def notification_service() -> NotificationService:
    return NotificationService(notifier(), email_template_repository())
