"""Support ticket raised by a customer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from portal.domain.exceptions import ValidationError


class TicketStatus(Enum):
    OPEN = "open"
    RESOLVED = "resolved"
    CLOSED = "closed"

    @staticmethod
    def parse(raw: str) -> TicketStatus:
        try:
            return TicketStatus(raw.strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown ticket status '{raw}'") from exc


@dataclass
class SupportTicket:
    id: str | None
    customer_id: str
    subject: str
    message: str
    status: TicketStatus = TicketStatus.OPEN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def open(customer_id: str, subject: str, message: str) -> SupportTicket:
        if not subject or not subject.strip():
            raise ValidationError("Ticket subject is required")
        if not message or not message.strip():
            raise ValidationError("Ticket message is required")
        return SupportTicket(
            id=None,
            customer_id=customer_id,
            subject=subject.strip(),
            message=message.strip(),
        )
