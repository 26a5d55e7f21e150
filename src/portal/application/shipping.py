"""Resolve the checkout address choice into a shipping snapshot."""

from __future__ import annotations

from portal.domain.exceptions import EntityNotFoundError, ValidationError
from portal.domain.model.address import PICKUP_ADDRESS_ID, pickup_snapshot
from portal.domain.model.order import ShippingSnapshot
from portal.domain.repository.address_repository import AddressRepository
from portal.domain.repository.settings_repository import (
    WAREHOUSE_ADDRESS_KEY,
    SettingsRepository,
)


def resolve_shipping(
    customer_id: str,
    address_id: str | None,
    address_repo: AddressRepository,
    settings_repo: SettingsRepository,
) -> ShippingSnapshot | None:
    """Return a snapshot for *address_id*, or None when nothing was chosen.

    ``PICKUP`` selects the configured warehouse; any other value must be
    one of the customer's own saved addresses.
    """
    if not address_id:
        return None

    if address_id == PICKUP_ADDRESS_ID:
        warehouse = (settings_repo.get(WAREHOUSE_ADDRESS_KEY) or "").strip()
        if not warehouse:
            raise ValidationError("Warehouse pickup is not available: no pickup address configured")
        return pickup_snapshot(warehouse)

    address = address_repo.get_by_id(address_id)
    if address is None or address.customer_id != customer_id:
        raise EntityNotFoundError(f"Delivery address '{address_id}' not found")
    return address.snapshot()
