"""JSON-file-backed implementation of ProfileRepository."""

from __future__ import annotations

from dataclasses import asdict

from portal.domain.model.profile import CustomerProfile
from portal.domain.repository.profile_repository import ProfileRepository
from portal.infrastructure.persistence.json_collection import JsonCollection


class JsonProfileRepository(JsonCollection, ProfileRepository):

    def get_by_id(self, customer_id: str) -> CustomerProfile | None:
        for raw in self._load_raw():
            if raw["id"] == customer_id:
                return CustomerProfile(
                    id=raw["id"],
                    company_name=raw.get("company_name") or "",
                    email=raw.get("email") or "",
                    tax_id=raw.get("tax_id") or "",
                    address=raw.get("address") or "",
                    city=raw.get("city") or "",
                    zip=raw.get("zip") or "",
                    phone=raw.get("phone") or "",
                )
        return None

    def save(self, profile: CustomerProfile) -> None:
        records = self._load_raw()
        self._upsert_raw(records, asdict(profile))
        self._persist_raw(records)
