"""Delivery addresses saved by a customer."""

from __future__ import annotations

from dataclasses import dataclass

from portal.domain.exceptions import ValidationError
from portal.domain.model.order import ShippingSnapshot

# Sentinel accepted at checkout instead of a saved address id.
PICKUP_ADDRESS_ID = "PICKUP"
PICKUP_SITE_NAME = "Warehouse pickup"


@dataclass
class DeliveryAddress:
    """A delivery site. At most one per customer should be the default;
    the application layer keeps that true, the store does not.
    """

    id: str | None
    customer_id: str
    site_name: str
    address: str
    contact_name: str = ""
    is_default: bool = False

    @staticmethod
    def create(
        customer_id: str,
        site_name: str,
        address: str,
        contact_name: str = "",
        is_default: bool = False,
    ) -> DeliveryAddress:
        if not site_name or not site_name.strip():
            raise ValidationError("Site name is required")
        if not address or not address.strip():
            raise ValidationError("Address is required")
        return DeliveryAddress(
            id=None,
            customer_id=customer_id,
            site_name=site_name.strip(),
            address=address.strip(),
            contact_name=(contact_name or "").strip(),
            is_default=is_default,
        )

    def snapshot(self) -> ShippingSnapshot:
        return ShippingSnapshot(
            site_name=self.site_name,
            address=self.address,
            contact_name=self.contact_name,
            address_id=self.id,
        )


def pickup_snapshot(warehouse_address: str) -> ShippingSnapshot:
    return ShippingSnapshot(site_name=PICKUP_SITE_NAME, address=warehouse_address)
