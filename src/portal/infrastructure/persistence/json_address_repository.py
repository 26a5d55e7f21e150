"""JSON-file-backed implementation of AddressRepository."""

from __future__ import annotations

import uuid

from portal.domain.model.address import DeliveryAddress
from portal.domain.repository.address_repository import AddressRepository
from portal.infrastructure.persistence.json_collection import JsonCollection


class JsonAddressRepository(JsonCollection, AddressRepository):

    def get_by_id(self, address_id: str) -> DeliveryAddress | None:
        for raw in self._load_raw():
            if raw["id"] == address_id:
                return self._to_domain(raw)
        return None

    def list_for_customer(self, customer_id: str) -> list[DeliveryAddress]:
        addresses = [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["user_id"] == customer_id
        ]
        return sorted(addresses, key=lambda a: not a.is_default)

    def save(self, address: DeliveryAddress) -> None:
        if address.id is None:
            address.id = str(uuid.uuid4())
        records = self._load_raw()
        self._upsert_raw(records, self._to_raw(address))
        self._persist_raw(records)

    def delete(self, address_id: str) -> None:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != address_id]
        if len(remaining) != len(records):
            self._persist_raw(remaining)

    @staticmethod
    def _to_raw(address: DeliveryAddress) -> dict:
        return {
            "id": address.id,
            "user_id": address.customer_id,
            "site_name": address.site_name,
            "address": address.address,
            "contact_name": address.contact_name,
            "is_default": address.is_default,
        }

    @staticmethod
    def _to_domain(raw: dict) -> DeliveryAddress:
        return DeliveryAddress(
            id=raw["id"],
            customer_id=raw["user_id"],
            site_name=raw["site_name"],
            address=raw["address"],
            contact_name=raw.get("contact_name") or "",
            is_default=bool(raw.get("is_default", False)),
        )
