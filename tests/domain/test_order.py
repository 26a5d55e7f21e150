"""Unit tests for the Order aggregate and its status rules."""

import pytest

from portal.domain.exceptions import ValidationError
from portal.domain.model.order import (
    STATUS_TRANSITIONS,
    Order,
    OrderLineItem,
    OrderStatus,
    ShippingSnapshot,
)
from portal.domain.model.value_objects import Money, Quantity

SHIPPING = ShippingSnapshot(site_name="Clinic A", address="1051 Budapest, Fo utca 1.")


def _make_item(name: str = "Nitrile", qty: int = 1, price: str = "87000") -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id="1",
        product_name=name,
        size="M",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


def _order(status: OrderStatus = OrderStatus.PENDING) -> Order:
    return Order.create("cust-1", "ORD-123456-7", [_make_item()], status, SHIPPING)


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(
            customer_id="cust-1",
            order_number="ORD-123456-7",
            items=[_make_item(qty=2, price="9800")],
            status=OrderStatus.PENDING,
            shipping_address=SHIPPING,
            comment="  leave at reception ",
        )
        assert order.status == OrderStatus.PENDING
        assert order.total_amount == Money.of("19600")
        assert order.comment == "leave at reception"
        assert order.id is None  # assigned by repository

    def test_total_is_sum_of_line_items(self):
        items = [_make_item(qty=3, price="9800"), _make_item(qty=1, price="87000")]
        order = Order.create("cust-1", "ORD-1-1", items, OrderStatus.PENDING, SHIPPING)
        assert order.total_amount == Money.of("116400")

    def test_draft_without_address_allowed(self):
        order = Order.create("cust-1", "ORD-1-1", [_make_item()], OrderStatus.DRAFT)
        assert order.is_draft
        assert order.shipping_address is None

    def test_pending_without_address_rejected(self):
        with pytest.raises(ValidationError, match="delivery address"):
            Order.create("cust-1", "ORD-1-1", [_make_item()], OrderStatus.PENDING)

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create("cust-1", "ORD-1-1", [], OrderStatus.PENDING, SHIPPING)

    def test_missing_customer_rejected(self):
        with pytest.raises(ValidationError, match="Customer"):
            Order.create("", "ORD-1-1", [_make_item()], OrderStatus.PENDING, SHIPPING)

    def test_other_initial_status_rejected(self):
        with pytest.raises(ValidationError, match="pending or draft"):
            Order.create("cust-1", "ORD-1-1", [_make_item()], OrderStatus.SHIPPED, SHIPPING)


class TestStatusChanges:

    def test_forward(self):
        order = _order()
        assert order.change_status(OrderStatus.CONFIRMED) is True
        assert order.status == OrderStatus.CONFIRMED

    def test_backwards_allowed(self):
        order = _order()
        order.change_status(OrderStatus.COMPLETED)
        assert order.change_status(OrderStatus.PENDING) is True
        assert order.status == OrderStatus.PENDING

    def test_same_status_is_no_op(self):
        order = _order()
        assert order.change_status(OrderStatus.PENDING) is False

    def test_every_transition_listed(self):
        for status in OrderStatus:
            others = {s for s in OrderStatus if s != status}
            assert STATUS_TRANSITIONS[status] == others

    def test_parse_is_case_insensitive(self):
        assert OrderStatus.parse(" Shipped ") == OrderStatus.SHIPPED

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            OrderStatus.parse("cancelled")


class TestSubmitDraft:

    def test_draft_becomes_pending(self):
        order = Order.create("cust-1", "ORD-1-1", [_make_item()], OrderStatus.DRAFT)
        order.submit_draft(SHIPPING)
        assert order.status == OrderStatus.PENDING
        assert order.shipping_address == SHIPPING

    def test_only_drafts(self):
        order = _order()
        with pytest.raises(ValidationError, match="Only draft"):
            order.submit_draft(SHIPPING)


class TestDisplayNumber:

    def test_uses_order_number(self):
        assert _order().display_number == "ORD-123456-7"

    def test_falls_back_to_id_prefix(self):
        order = Order(id="0f9c1a2b-3c4d", customer_id="c", order_number="", items=[])
        assert order.display_number == "0f9c1a2b"
