"""Application services: support tickets.

Customers open tickets (the office is notified); administrators list
every ticket and move it between open, resolved and closed.
"""

from __future__ import annotations

import logging

from portal.application.notifications import (
    NotificationKind,
    NotificationService,
    recipient_profile,
)
from portal.domain.exceptions import EntityNotFoundError
from portal.domain.model.profile import UNKNOWN_PARTNER
from portal.domain.model.ticket import SupportTicket, TicketStatus
from portal.domain.repository.profile_repository import ProfileRepository
from portal.domain.repository.ticket_repository import TicketRepository

logger = logging.getLogger(__name__)


class OpenTicketHandler:

    def __init__(
        self,
        ticket_repo: TicketRepository,
        profile_repo: ProfileRepository,
        notifications: NotificationService,
    ) -> None:
        self._ticket_repo = ticket_repo
        self._profile_repo = profile_repo
        self._notifications = notifications

    def handle(self, customer_id: str, subject: str, message: str) -> SupportTicket:
        ticket = SupportTicket.open(customer_id, subject, message)
        self._ticket_repo.save(ticket)
        logger.info("Ticket %s opened by customer %s", ticket.id, customer_id)

        profile = recipient_profile(self._profile_repo, customer_id)
        self._notifications.notify(
            NotificationKind.NEW_TICKET,
            {
                "user_email": profile.email if profile else "",
                "company_name": profile.display_name if profile else UNKNOWN_PARTNER,
                "subject": ticket.subject,
                "message": ticket.message,
            },
        )
        return ticket


class ListTicketsHandler:

    def __init__(self, ticket_repo: TicketRepository, profile_repo: ProfileRepository) -> None:
        self._ticket_repo = ticket_repo
        self._profile_repo = profile_repo

    def handle(
        self,
        customer_id: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> list[SupportTicket]:
        if customer_id is not None:
            tickets = self._ticket_repo.list_for_customer(customer_id)
        else:
            tickets = self._ticket_repo.list_all()

        if status:
            wanted = TicketStatus.parse(status)
            tickets = [t for t in tickets if t.status == wanted]

        if search:
            needle = search.strip().lower()
            matching = []
            for ticket in tickets:
                profile = self._profile_repo.get_by_id(ticket.customer_id)
                haystack = [ticket.subject, ticket.message]
                if profile is not None:
                    haystack += [profile.company_name, profile.email]
                if any(needle in text.lower() for text in haystack if text):
                    matching.append(ticket)
            tickets = matching
        return tickets


class UpdateTicketStatusHandler:

    def __init__(self, ticket_repo: TicketRepository) -> None:
        self._ticket_repo = ticket_repo

    def handle(self, ticket_id: str, new_status: str) -> SupportTicket:
        status = TicketStatus.parse(new_status)
        ticket = self._ticket_repo.get_by_id(ticket_id)
        if ticket is None:
            raise EntityNotFoundError(f"Ticket #{ticket_id} not found")
        ticket.status = status
        self._ticket_repo.save(ticket)
        return ticket
