"""Integration tests for the order history queries."""

from datetime import datetime, timedelta, timezone

import pytest

from portal.application.list_orders import ListOrdersHandler
from portal.application.show_order import ShowOrderHandler
from portal.domain.exceptions import EntityNotFoundError, ValidationError
from portal.domain.model.order import Order, OrderLineItem, OrderStatus, ShippingSnapshot
from portal.domain.model.profile import CustomerProfile
from portal.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository, FakeProfileRepository

BASE = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def _add(repo: FakeOrderRepository, customer: str, number: str, status: OrderStatus, day: int) -> Order:
    order = Order.create(
        customer,
        number,
        [OrderLineItem("1", "Nitrile", "M", Quantity(1), Money.of("9800"))],
        OrderStatus.PENDING,
        ShippingSnapshot("Site", "Addr"),
    )
    order.status = status
    order.created_at = BASE + timedelta(days=day)
    repo.add(order)
    return order


def _setup():
    order_repo = FakeOrderRepository()
    _add(order_repo, "cust-1", "ORD-000001-1", OrderStatus.PENDING, 0)
    _add(order_repo, "cust-1", "ORD-000002-2", OrderStatus.SHIPPED, 1)
    _add(order_repo, "cust-2", "ORD-000003-3", OrderStatus.PENDING, 2)
    profile_repo = FakeProfileRepository([
        CustomerProfile(id="cust-1", company_name="Szent Janos Klinika", email="a@klinika.hu"),
        CustomerProfile(id="cust-2", company_name="Dental Kft.", email="office@dental.hu"),
    ])
    return ListOrdersHandler(order_repo, profile_repo), order_repo


class TestListOrders:

    def test_customer_sees_own_orders_newest_first(self):
        handler, _ = _setup()
        numbers = [o.order_number for o in handler.handle(customer_id="cust-1")]
        assert numbers == ["ORD-000002-2", "ORD-000001-1"]

    def test_admin_sees_everything(self):
        handler, _ = _setup()
        assert len(handler.handle()) == 3

    def test_status_filter(self):
        handler, _ = _setup()
        result = handler.handle(status="pending")
        assert {o.order_number for o in result} == {"ORD-000001-1", "ORD-000003-3"}

    def test_search_by_company(self):
        handler, _ = _setup()
        result = handler.handle(search="dental")
        assert [o.order_number for o in result] == ["ORD-000003-3"]

    def test_search_by_order_number(self):
        handler, _ = _setup()
        result = handler.handle(search="000002")
        assert [o.customer_id for o in result] == ["cust-1"]

    def test_search_by_email(self):
        handler, _ = _setup()
        assert len(handler.handle(search="@klinika.hu")) == 2

    def test_bad_status_filter_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle(status="archived")


class TestShowOrder:

    def test_show_own_order(self):
        _, order_repo = _setup()
        order = order_repo.get_by_number("ORD-000001-1")
        dto = ShowOrderHandler(order_repo).handle(order.id, customer_id="cust-1")
        assert dto.order_number == "ORD-000001-1"
        assert dto.items[0].line_total == "9 800 Ft"
        assert dto.created_at == "2024-05-01 09:00 UTC"

    def test_other_customers_order_hidden(self):
        _, order_repo = _setup()
        order = order_repo.get_by_number("ORD-000001-1")
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(order_repo).handle(order.id, customer_id="cust-2")

    def test_admin_sees_any_order(self):
        _, order_repo = _setup()
        order = order_repo.get_by_number("ORD-000003-3")
        assert ShowOrderHandler(order_repo).handle(order.id).customer_id == "cust-2"
