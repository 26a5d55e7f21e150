"""Application service: warehouse pickup address setting (admin)."""

from __future__ import annotations

from portal.domain.repository.settings_repository import (
    WAREHOUSE_ADDRESS_KEY,
    SettingsRepository,
)


class WarehouseAddressHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def get(self) -> str:
        return self._settings_repo.get(WAREHOUSE_ADDRESS_KEY) or ""

    def set(self, address: str) -> None:
        """Store the pickup address; an empty value disables pickup."""
        self._settings_repo.set(WAREHOUSE_ADDRESS_KEY, (address or "").strip())
