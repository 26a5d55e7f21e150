"""JSON-file-backed implementation of OrderRepository.

Line items are embedded in their order's record, so adding an order
writes header and items in the same file replacement.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from portal.domain.exceptions import StoreError
from portal.domain.model.order import Order, OrderLineItem, OrderStatus, ShippingSnapshot
from portal.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from portal.domain.repository.order_repository import OrderRepository
from portal.infrastructure.persistence.json_collection import JsonCollection


class JsonOrderRepository(JsonCollection, OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        orders = self._load_raw()
        if any(raw.get("order_number") == order.order_number for raw in orders):
            raise StoreError(f"duplicate order number {order.order_number}")

        order_id = order.id or str(uuid.uuid4())
        raw = self._to_raw(order)
        raw["id"] = order_id
        orders.append(raw)
        self._persist_raw(orders)
        order.id = order_id

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_by_number(self, order_number: str) -> Order | None:
        for raw in self._load_raw():
            if raw.get("order_number") == order_number:
                return self._to_domain(raw)
        return None

    def list_for_customer(self, customer_id: str) -> list[Order]:
        return [o for o in self.list_all() if o.customer_id == customer_id]

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._load_raw()]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def save(self, order: Order) -> None:
        if order.id is None:
            raise StoreError("cannot update an order that was never added")
        orders = self._load_raw()
        self._upsert_raw(orders, self._to_raw(order))
        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        shipping = None
        if order.shipping_address is not None:
            shipping = {
                "site_name": order.shipping_address.site_name,
                "address": order.shipping_address.address,
                "contact_name": order.shipping_address.contact_name,
                "id": order.shipping_address.address_id,
            }
        return {
            "id": order.id,
            "user_id": order.customer_id,
            "order_number": order.order_number,
            "status": order.status.value,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "shipping_address": shipping,
            "comment": order.comment,
            "created_at": order.created_at.isoformat(),
            "order_items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "size": item.size,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "sku": item.sku,
                    "unit": item.unit,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                size=i.get("size", ""),
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(str(i["unit_price"])), currency),
                sku=i.get("sku", ""),
                unit=i.get("unit", ""),
            )
            for i in raw.get("order_items", [])
        ]
        shipping = None
        if raw.get("shipping_address"):
            sa = raw["shipping_address"]
            shipping = ShippingSnapshot(
                site_name=sa.get("site_name", ""),
                address=sa.get("address", ""),
                contact_name=sa.get("contact_name") or "",
                address_id=sa.get("id"),
            )
        return Order(
            id=raw["id"],
            customer_id=raw["user_id"],
            order_number=raw.get("order_number", ""),
            items=items,
            status=OrderStatus(raw["status"]),
            shipping_address=shipping,
            comment=raw.get("comment") or "",
            total_amount=Money(Decimal(str(raw.get("total_amount", "0"))), currency),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
