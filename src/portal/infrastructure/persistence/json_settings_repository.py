"""JSON-file-backed implementation of SettingsRepository."""

from __future__ import annotations

from portal.domain.repository.settings_repository import SettingsRepository
from portal.infrastructure.persistence.json_collection import JsonCollection


class JsonSettingsRepository(JsonCollection, SettingsRepository):

    def get(self, key: str) -> str | None:
        for raw in self._load_raw():
            if raw["key"] == key:
                return raw.get("value")
        return None

    def set(self, key: str, value: str) -> None:
        records = self._load_raw()
        self._upsert_raw(records, {"key": key, "value": value}, key="key")
        self._persist_raw(records)
