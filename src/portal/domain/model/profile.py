"""Customer profile: the buyer block printed on order documents."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_PARTNER = "Unknown partner"


@dataclass
class CustomerProfile:
    id: str
    company_name: str = ""
    email: str = ""
    tax_id: str = ""
    address: str = ""
    city: str = ""
    zip: str = ""
    phone: str = ""

    @property
    def display_name(self) -> str:
        return self.company_name or UNKNOWN_PARTNER

    @property
    def postal_line(self) -> str:
        """'1044 Budapest, Ezred utca 2.' or '' when nothing is filled in."""
        head = f"{self.zip} {self.city}".strip()
        if head and self.address:
            return f"{head}, {self.address}"
        return head or self.address
