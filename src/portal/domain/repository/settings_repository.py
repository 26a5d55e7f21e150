"""Abstract repository for application settings (key/value rows)."""

from __future__ import annotations

from abc import ABC, abstractmethod

WAREHOUSE_ADDRESS_KEY = "warehouse_address"


class SettingsRepository(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under *key*."""
