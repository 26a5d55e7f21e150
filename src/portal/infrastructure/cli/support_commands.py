"""CLI commands for support tickets."""

from __future__ import annotations

import click

from portal.application.support_tickets import (
    ListTicketsHandler,
    OpenTicketHandler,
    UpdateTicketStatusHandler,
)
from portal.domain.exceptions import DomainException
from portal.domain.model.ticket import TicketStatus
from portal.infrastructure.bootstrap import (
    notification_service,
    profile_repository,
    ticket_repository,
)


@click.command("open")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--subject", required=True)
@click.option("--message", required=True)
def ticket_open(customer: str, subject: str, message: str) -> None:
    """Open a support ticket."""
    handler = OpenTicketHandler(ticket_repository(), profile_repository(), notification_service())

    try:
        ticket = handler.handle(customer, subject, message)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ticket {ticket.id} opened.")


@click.command("list")
@click.option("--customer", default=None, help="Only this customer's tickets.")
@click.option("--status", default=None, help="Filter by status.")
@click.option("--search", default=None, help="Search subject, message, company or e-mail.")
def ticket_list(customer: str | None, status: str | None, search: str | None) -> None:
    """List support tickets."""
    handler = ListTicketsHandler(ticket_repository(), profile_repository())

    try:
        tickets = handler.handle(customer_id=customer, status=status, search=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not tickets:
        click.echo("No tickets found.")
        return

    for t in tickets:
        click.echo(
            f"{t.id}  {t.created_at:%Y-%m-%d}  {t.status.value:<9} {t.subject}"
        )


@click.command("status")
@click.option("--id", "ticket_id", required=True, help="Ticket ID.")
@click.option("--set", "new_status", required=True,
              type=click.Choice([s.value for s in TicketStatus]))
def ticket_status(ticket_id: str, new_status: str) -> None:
    """Move a ticket to another status (admin)."""
    handler = UpdateTicketStatusHandler(ticket_repository())

    try:
        ticket = handler.handle(ticket_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ticket {ticket.id} is now {ticket.status.value}.")
