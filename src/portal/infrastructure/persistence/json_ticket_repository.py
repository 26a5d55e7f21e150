"""JSON-file-backed implementation of TicketRepository."""

from __future__ import annotations

import uuid
from datetime import datetime

from portal.domain.model.ticket import SupportTicket, TicketStatus
from portal.domain.repository.ticket_repository import TicketRepository
from portal.infrastructure.persistence.json_collection import JsonCollection


class JsonTicketRepository(JsonCollection, TicketRepository):

    def get_by_id(self, ticket_id: str) -> SupportTicket | None:
        for raw in self._load_raw():
            if raw["id"] == ticket_id:
                return self._to_domain(raw)
        return None

    def list_for_customer(self, customer_id: str) -> list[SupportTicket]:
        return [t for t in self.list_all() if t.customer_id == customer_id]

    def list_all(self) -> list[SupportTicket]:
        tickets = [self._to_domain(raw) for raw in self._load_raw()]
        return sorted(tickets, key=lambda t: t.created_at, reverse=True)

    def save(self, ticket: SupportTicket) -> None:
        if ticket.id is None:
            ticket.id = str(uuid.uuid4())
        records = self._load_raw()
        self._upsert_raw(records, {
            "id": ticket.id,
            "user_id": ticket.customer_id,
            "subject": ticket.subject,
            "message": ticket.message,
            "status": ticket.status.value,
            "created_at": ticket.created_at.isoformat(),
        })
        self._persist_raw(records)

    @staticmethod
    def _to_domain(raw: dict) -> SupportTicket:
        return SupportTicket(
            id=raw["id"],
            customer_id=raw["user_id"],
            subject=raw["subject"],
            message=raw["message"],
            status=TicketStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
