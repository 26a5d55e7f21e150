"""Abstract repository for support tickets."""

from __future__ import annotations

from abc import ABC, abstractmethod

from portal.domain.model.ticket import SupportTicket


class TicketRepository(ABC):

    @abstractmethod
    def get_by_id(self, ticket_id: str) -> SupportTicket | None:
        """Return a ticket by its ID, or None if not found."""

    @abstractmethod
    def list_for_customer(self, customer_id: str) -> list[SupportTicket]:
        """Return a customer's tickets, newest first."""

    @abstractmethod
    def list_all(self) -> list[SupportTicket]:
        """Return every ticket, newest first."""

    @abstractmethod
    def save(self, ticket: SupportTicket) -> None:
        """Persist a new or updated ticket. Assigns ``ticket.id``."""
