"""Abstract repository for customer profiles."""

from __future__ import annotations

from abc import ABC, abstractmethod

from portal.domain.model.profile import CustomerProfile


class ProfileRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> CustomerProfile | None:
        """Return a profile by customer ID, or None if not found."""

    @abstractmethod
    def save(self, profile: CustomerProfile) -> None:
        """Persist a new or updated profile."""
