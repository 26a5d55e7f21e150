"""Application service: Update Profile use case."""

from __future__ import annotations

from portal.domain.model.profile import CustomerProfile
from portal.domain.repository.profile_repository import ProfileRepository

EDITABLE_FIELDS = ("company_name", "email", "tax_id", "address", "city", "zip", "phone")


class UpdateProfileHandler:

    def __init__(self, profile_repo: ProfileRepository) -> None:
        self._profile_repo = profile_repo

    def handle(self, customer_id: str, **changes: str | None) -> CustomerProfile:
        """Apply the given fields; unknown names raise TypeError."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown profile fields: {', '.join(sorted(unknown))}")

        profile = self._profile_repo.get_by_id(customer_id) or CustomerProfile(id=customer_id)
        for field_name, value in changes.items():
            if value is not None:
                setattr(profile, field_name, value.strip())
        self._profile_repo.save(profile)
        return profile
