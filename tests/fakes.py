"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import uuid

from portal.application.notifications import NotificationKind, Notifier
from portal.domain.exceptions import NotificationError, StoreError
from portal.domain.model.address import DeliveryAddress
from portal.domain.model.email_template import EmailTemplate
from portal.domain.model.order import Order
from portal.domain.model.product import Product
from portal.domain.model.profile import CustomerProfile
from portal.domain.model.ticket import SupportTicket
from portal.domain.repository.address_repository import AddressRepository
from portal.domain.repository.email_template_repository import (
    EmailTemplateRepository,
)
from portal.domain.repository.order_repository import OrderRepository
from portal.domain.repository.product_repository import ProductRepository
from portal.domain.repository.profile_repository import ProfileRepository
from portal.domain.repository.settings_repository import SettingsRepository
from portal.domain.repository.ticket_repository import TicketRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self, fail_on_add: bool = False) -> None:
        self._store: dict[str, Order] = {}
        self._next_id = 1
        self.fail_on_add = fail_on_add
        self.add_calls = 0

    def add(self, order: Order) -> None:
        self.add_calls += 1
        if self.fail_on_add:
            raise StoreError("connection reset")
        if order.id is None:
            order.id = f"order-{self._next_id}"
            self._next_id += 1
        self._store[order.id] = order

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def get_by_number(self, order_number: str) -> Order | None:
        for o in self._store.values():
            if o.order_number == order_number:
                return o
        return None

    def list_for_customer(self, customer_id: str) -> list[Order]:
        return [o for o in self.list_all() if o.customer_id == customer_id]

    def list_all(self) -> list[Order]:
        return sorted(self._store.values(), key=lambda o: o.created_at, reverse=True)

    def save(self, order: Order) -> None:
        self._store[order.id] = order


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        ids = [int(pid) for pid in self._store if pid.isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_sku(self, sku: str) -> Product | None:
        for p in self._store.values():
            if p.sku and p.sku.lower() == sku.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeAddressRepository(AddressRepository):

    def __init__(self, addresses: list[DeliveryAddress] | None = None) -> None:
        self._store: dict[str, DeliveryAddress] = {}
        for a in addresses or []:
            self.save(a)

    def get_by_id(self, address_id: str) -> DeliveryAddress | None:
        return self._store.get(address_id)

    def list_for_customer(self, customer_id: str) -> list[DeliveryAddress]:
        return [a for a in self._store.values() if a.customer_id == customer_id]

    def save(self, address: DeliveryAddress) -> None:
        if address.id is None:
            address.id = str(uuid.uuid4())
        self._store[address.id] = address

    def delete(self, address_id: str) -> None:
        self._store.pop(address_id, None)


class FakeProfileRepository(ProfileRepository):

    def __init__(self, profiles: list[CustomerProfile] | None = None) -> None:
        self._store: dict[str, CustomerProfile] = {}
        for p in profiles or []:
            self._store[p.id] = p

    def get_by_id(self, customer_id: str) -> CustomerProfile | None:
        return self._store.get(customer_id)

    def save(self, profile: CustomerProfile) -> None:
        self._store[profile.id] = profile


class FakeTicketRepository(TicketRepository):

    def __init__(self) -> None:
        self._store: dict[str, SupportTicket] = {}

    def get_by_id(self, ticket_id: str) -> SupportTicket | None:
        return self._store.get(ticket_id)

    def list_for_customer(self, customer_id: str) -> list[SupportTicket]:
        return [t for t in self.list_all() if t.customer_id == customer_id]

    def list_all(self) -> list[SupportTicket]:
        return sorted(self._store.values(), key=lambda t: t.created_at, reverse=True)

    def save(self, ticket: SupportTicket) -> None:
        if ticket.id is None:
            ticket.id = str(uuid.uuid4())
        self._store[ticket.id] = ticket


class FakeEmailTemplateRepository(EmailTemplateRepository):

    def __init__(self, templates: list[EmailTemplate] | None = None) -> None:
        self._store: dict[str, EmailTemplate] = {}
        for t in templates or []:
            self._store[t.slug] = t

    def get_by_slug(self, slug: str) -> EmailTemplate | None:
        return self._store.get(slug)

    def list_all(self) -> list[EmailTemplate]:
        return list(self._store.values())

    def save(self, template: EmailTemplate) -> None:
        self._store[template.slug] = template


class FakeSettingsRepository(SettingsRepository):

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value


class RecordingNotifier(Notifier):

    def __init__(self) -> None:
        self.sent: list[tuple[NotificationKind, dict[str, object]]] = []

    def send(self, kind: NotificationKind, data: dict[str, object]) -> None:
        self.sent.append((kind, data))

    @property
    def kinds(self) -> list[NotificationKind]:
        return [kind for kind, _ in self.sent]


class FailingNotifier(Notifier):

    def __init__(self) -> None:
        self.attempts = 0

    def send(self, kind: NotificationKind, data: dict[str, object]) -> None:
        self.attempts += 1
        raise NotificationError("messaging function returned 500")


class UnreachableProfileRepository(FakeProfileRepository):
    """Profile store that fails every lookup."""

    def get_by_id(self, customer_id: str) -> CustomerProfile | None:
        raise StoreError("profiles.json: connection reset")
