"""Abstract repository for saved delivery addresses."""

from __future__ import annotations

from abc import ABC, abstractmethod

from portal.domain.model.address import DeliveryAddress


class AddressRepository(ABC):

    @abstractmethod
    def get_by_id(self, address_id: str) -> DeliveryAddress | None:
        """Return an address by its ID, or None if not found."""

    @abstractmethod
    def list_for_customer(self, customer_id: str) -> list[DeliveryAddress]:
        """Return a customer's addresses, default first."""

    @abstractmethod
    def save(self, address: DeliveryAddress) -> None:
        """Persist a new or updated address. Assigns ``address.id``."""

    @abstractmethod
    def delete(self, address_id: str) -> None:
        """Remove an address; no-op if it does not exist."""
