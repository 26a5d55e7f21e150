"""Integration tests for the admin and customer dashboards."""

from datetime import datetime, timezone

from portal.application.show_dashboard import (
    ShowAdminDashboardHandler,
    ShowCustomerDashboardHandler,
)
from portal.domain.model.order import Order, OrderLineItem, OrderStatus, ShippingSnapshot
from portal.domain.model.profile import CustomerProfile
from portal.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository, FakeProfileRepository


def _add(repo, customer: str, amount: str, status: OrderStatus, day: int, number: str) -> None:
    order = Order.create(
        customer,
        number,
        [OrderLineItem("1", "Nitrile", "M", Quantity(1), Money.of(amount))],
        OrderStatus.PENDING,
        ShippingSnapshot("Site", "Addr"),
    )
    order.status = status
    order.created_at = datetime(2024, 6, day, 12, 0, tzinfo=timezone.utc)
    repo.add(order)


def _setup():
    repo = FakeOrderRepository()
    _add(repo, "cust-1", "100000", OrderStatus.PENDING, 1, "ORD-1")
    _add(repo, "cust-1", "50000", OrderStatus.COMPLETED, 2, "ORD-2")
    _add(repo, "cust-2", "20000", OrderStatus.SHIPPED, 2, "ORD-3")
    _add(repo, "cust-3", "999999", OrderStatus.DRAFT, 3, "ORD-4")
    profiles = FakeProfileRepository([
        CustomerProfile(id="cust-1", company_name="Clinic Kft.", email="a@clinic.hu"),
    ])
    return repo, profiles


class TestAdminDashboard:

    def test_kpis_ignore_drafts(self):
        dash = ShowAdminDashboardHandler(*_setup()).handle()
        assert dash.total_orders == 3
        assert dash.pending_orders == 1
        assert dash.completed_orders == 2
        assert dash.total_revenue == "170 000 Ft"

    def test_revenue_by_day_in_date_order(self):
        dash = ShowAdminDashboardHandler(*_setup()).handle()
        assert dash.revenue_by_day == [
            ("2024-06-01", "100 000 Ft"),
            ("2024-06-02", "70 000 Ft"),
        ]

    def test_top_customers(self):
        dash = ShowAdminDashboardHandler(*_setup()).handle()
        first, second = dash.top_customers
        assert (first.name, first.email, first.revenue, first.order_count) == (
            "Clinic Kft.", "a@clinic.hu", "150 000 Ft", 2,
        )
        assert (second.name, second.email) == ("Unknown partner", "N/A")

    def test_top_customers_capped_at_five(self):
        repo = FakeOrderRepository()
        for i in range(7):
            _add(repo, f"cust-{i}", str(1000 * (i + 1)), OrderStatus.PENDING, 1, f"ORD-{i}")
        dash = ShowAdminDashboardHandler(repo, FakeProfileRepository()).handle()
        assert len(dash.top_customers) == 5
        assert dash.top_customers[0].revenue == "7 000 Ft"

    def test_empty(self):
        dash = ShowAdminDashboardHandler(FakeOrderRepository(), FakeProfileRepository()).handle()
        assert dash.total_orders == 0
        assert dash.total_revenue == "0 Ft"
        assert dash.top_customers == []


class TestCustomerDashboard:

    def test_pending_and_recent(self):
        dash = ShowCustomerDashboardHandler(*_setup()).handle("cust-1")
        assert dash.company_name == "Clinic Kft."
        assert dash.pending_orders == 1
        assert dash.recent_orders == [
            ("ORD-2", "completed", "50 000 Ft"),
            ("ORD-1", "pending", "100 000 Ft"),
        ]
