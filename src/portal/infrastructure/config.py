"""Runtime settings, read from ``PORTAL_*`` environment variables or ``.env``."""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from portal.domain.service.order_document import Issuer


class PortalSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PORTAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    export_dir: Path = Path("exports")
    log_level: str = "INFO"

    # Messaging function that delivers e-mails; empty disables notifications.
    notify_url: str = ""
    notify_token: str = ""
    notify_timeout: float = 10.0

    vat_rate: Decimal = Field(default=Decimal("0.27"), ge=0)
    order_number_attempts: int = Field(default=5, ge=1)

    issuer_name: str = "HARPS Global Kft."
    issuer_address: str = "1044 Budapest, Ezred utca 2."
    issuer_tax_id: str = "25487770-2-41"
    issuer_email: str = "office@harps.hu"

    @property
    def issuer(self) -> Issuer:
        return Issuer(
            name=self.issuer_name,
            address=self.issuer_address,
            tax_id=self.issuer_tax_id,
            email=self.issuer_email,
        )


@lru_cache(maxsize=1)
def get_settings() -> PortalSettings:
    return PortalSettings()
