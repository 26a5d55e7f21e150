"""Tests for the JSON-file repositories against a temporary directory."""

import os
from datetime import datetime, timedelta, timezone

import pytest

from portal.domain.exceptions import StoreError
from portal.domain.model.address import DeliveryAddress
from portal.domain.model.email_template import EmailTemplate
from portal.domain.model.order import Order, OrderLineItem, OrderStatus, ShippingSnapshot
from portal.domain.model.product import Product, Specifications
from portal.domain.model.profile import CustomerProfile
from portal.domain.model.ticket import SupportTicket, TicketStatus
from portal.domain.model.value_objects import Money, Quantity
from portal.infrastructure.persistence.json_address_repository import JsonAddressRepository
from portal.infrastructure.persistence.json_email_template_repository import (
    JsonEmailTemplateRepository,
)
from portal.infrastructure.persistence.json_order_repository import JsonOrderRepository
from portal.infrastructure.persistence.json_product_repository import JsonProductRepository
from portal.infrastructure.persistence.json_profile_repository import JsonProfileRepository
from portal.infrastructure.persistence.json_settings_repository import JsonSettingsRepository
from portal.infrastructure.persistence.json_ticket_repository import JsonTicketRepository


def _order(number: str, customer: str = "cust-1", day: int = 1) -> Order:
    order = Order.create(
        customer,
        number,
        [OrderLineItem("1", "Nitrile", "M", Quantity(2), Money.of("87000"), sku="NIT-100", unit="karton")],
        OrderStatus.PENDING,
        ShippingSnapshot("Clinic A", "1051 Budapest", "Dr. Kiss", "addr-1"),
        comment="Back door",
    )
    order.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(days=day)
    return order


class TestJsonOrderRepository:

    def test_creates_file(self, tmp_path):
        JsonOrderRepository(tmp_path / "data" / "orders.json")
        assert (tmp_path / "data" / "orders.json").read_text(encoding="utf-8") == "[]"

    def test_add_and_reload(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order("ORD-1")
        repo.add(order)
        assert order.id is not None

        loaded = JsonOrderRepository(tmp_path / "orders.json").get_by_id(order.id)
        assert loaded.order_number == "ORD-1"
        assert loaded.total_amount == Money.of("174000")
        assert loaded.items[0].unit_price == Money.of("87000")
        assert loaded.items[0].quantity.value == 2
        assert loaded.items[0].unit == "karton"
        assert loaded.shipping_address == ShippingSnapshot("Clinic A", "1051 Budapest", "Dr. Kiss", "addr-1")
        assert loaded.comment == "Back door"
        assert loaded.created_at == order.created_at

    def test_duplicate_number_rejected(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.add(_order("ORD-1"))
        with pytest.raises(StoreError, match="duplicate order number"):
            repo.add(_order("ORD-1"))
        assert len(repo.list_all()) == 1

    def test_get_by_number(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.add(_order("ORD-1"))
        assert repo.get_by_number("ORD-1") is not None
        assert repo.get_by_number("ORD-2") is None

    def test_lists_newest_first(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.add(_order("ORD-1", day=1))
        repo.add(_order("ORD-3", customer="cust-2", day=3))
        repo.add(_order("ORD-2", day=2))
        assert [o.order_number for o in repo.list_all()] == ["ORD-3", "ORD-2", "ORD-1"]
        assert [o.order_number for o in repo.list_for_customer("cust-1")] == ["ORD-2", "ORD-1"]

    def test_save_status(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order("ORD-1")
        repo.add(order)
        order.change_status(OrderStatus.SHIPPED)
        repo.save(order)
        assert repo.get_by_id(order.id).status == OrderStatus.SHIPPED

    def test_save_unadded_rejected(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        with pytest.raises(StoreError):
            repo.save(_order("ORD-1"))

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError, match="orders.json"):
            JsonOrderRepository(path).list_all()


class TestJsonProductRepository:

    def _product(self, pid: str, sku: str, name: str = "Glove") -> Product:
        return Product(
            id=pid,
            name=name,
            base_price=Money.of("14500"),
            sku=sku,
            specifications=Specifications.from_mapping(
                {"Material": "Nitrile", "items_per_dispenser": 50, "dispensers_per_carton": 6}
            ),
            variants=["S", "M"],
        )

    def test_next_id(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert repo.next_id() == "1"
        repo.save(self._product("9", "A"))
        assert repo.next_id() == "10"

    def test_roundtrip_keeps_pricing(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(self._product("1", "NIT-100"))
        loaded = repo.get_by_id("1")
        assert loaded.carton_price == Money.of("87000")
        assert loaded.unit_price == Money.of("290")
        assert loaded.specifications.attributes == {"Material": "Nitrile"}
        assert loaded.variants == ["S", "M"]

    def test_get_by_sku_case_insensitive(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(self._product("1", "NIT-100"))
        assert repo.get_by_sku("nit-100").id == "1"
        assert repo.get_by_sku("VIN-1") is None

    def test_save_overwrites(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(self._product("1", "NIT-100", name="Old"))
        repo.save(self._product("1", "NIT-100", name="New"))
        assert [p.name for p in repo.list_all()] == ["New"]


class TestJsonAddressRepository:

    def test_default_listed_first_and_delete(self, tmp_path):
        repo = JsonAddressRepository(tmp_path / "addresses.json")
        a = DeliveryAddress(None, "cust-1", "Clinic A", "Addr A")
        b = DeliveryAddress(None, "cust-1", "Clinic B", "Addr B", is_default=True)
        repo.save(a)
        repo.save(b)
        repo.save(DeliveryAddress(None, "cust-2", "Other", "Addr O"))

        assert [x.site_name for x in repo.list_for_customer("cust-1")] == ["Clinic B", "Clinic A"]
        repo.delete(a.id)
        assert repo.get_by_id(a.id) is None
        assert len(repo.list_for_customer("cust-1")) == 1


class TestSmallRepositories:

    def test_profile(self, tmp_path):
        repo = JsonProfileRepository(tmp_path / "profiles.json")
        repo.save(CustomerProfile(id="cust-1", company_name="Clinic Kft.", zip="1051"))
        assert repo.get_by_id("cust-1").company_name == "Clinic Kft."
        assert repo.get_by_id("nobody") is None

    def test_ticket(self, tmp_path):
        repo = JsonTicketRepository(tmp_path / "tickets.json")
        ticket = SupportTicket.open("cust-1", "Subject", "Message")
        repo.save(ticket)
        ticket.status = TicketStatus.CLOSED
        repo.save(ticket)
        loaded = repo.list_for_customer("cust-1")
        assert len(loaded) == 1
        assert loaded[0].status == TicketStatus.CLOSED

    def test_email_template(self, tmp_path):
        repo = JsonEmailTemplateRepository(tmp_path / "email_templates.json")
        repo.save(EmailTemplate("new_order", "New order", "S {{x}}", "B", variables_hint=["x"]))
        loaded = repo.get_by_slug("new_order")
        assert loaded.variables == ["x"]
        assert loaded.is_active is True

    def test_settings(self, tmp_path):
        repo = JsonSettingsRepository(tmp_path / "settings.json")
        assert repo.get("warehouse_address") is None
        repo.set("warehouse_address", "Budaors")
        repo.set("warehouse_address", "Budaors, Raktar utca 5.")
        assert repo.get("warehouse_address") == "Budaors, Raktar utca 5."


class TestAtomicWrite:

    def test_failed_swap_leaves_no_temp_file(self, tmp_path, monkeypatch):
        repo = JsonSettingsRepository(tmp_path / "settings.json")
        repo.set("warehouse_address", "Budaors")

        def refuse(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", refuse)
        with pytest.raises(StoreError, match="disk full"):
            repo.set("warehouse_address", "Gyor")
        monkeypatch.undo()

        assert list(tmp_path.glob("*.tmp")) == []
        assert repo.get("warehouse_address") == "Budaors"
