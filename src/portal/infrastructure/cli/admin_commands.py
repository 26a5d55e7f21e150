"""CLI commands for the administrator: templates, settings, dashboards."""

from __future__ import annotations

import click

from portal.application.email_templates import (
    PreviewEmailTemplateHandler,
    UpdateEmailTemplateHandler,
)
from portal.application.show_dashboard import (
    ShowAdminDashboardHandler,
    ShowCustomerDashboardHandler,
)
from portal.application.warehouse_settings import WarehouseAddressHandler
from portal.domain.exceptions import DomainException
from portal.infrastructure.bootstrap import (
    email_template_repository,
    order_repository,
    profile_repository,
    settings_repository,
)


@click.command("list")
def template_list() -> None:
    """List e-mail templates."""
    try:
        templates = email_template_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not templates:
        click.echo("No templates found.")
        return

    for t in templates:
        state = "active" if t.is_active else "inactive"
        click.echo(f"{t.slug:<14} {state:<9} {t.name}")


@click.command("show")
@click.argument("slug")
def template_show(slug: str) -> None:
    """Show a template and its placeholders."""
    try:
        template = email_template_repository().get_by_slug(slug)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if template is None:
        raise click.ClickException(f"E-mail template '{slug}' not found")

    click.echo(f"Name:      {template.name}")
    click.echo(f"Active:    {'yes' if template.is_active else 'no'}")
    click.echo(f"Variables: {', '.join('{{' + v + '}}' for v in template.variables)}")
    click.echo(f"Subject:   {template.subject}")
    click.echo()
    click.echo(template.body)


@click.command("update")
@click.argument("slug")
@click.option("--subject", default=None)
@click.option("--body", default=None, help="HTML body; use {{key}} placeholders.")
@click.option("--active/--inactive", "is_active", default=None)
def template_update(slug: str, subject: str | None, body: str | None, is_active: bool | None) -> None:
    """Edit a template's subject, body or active flag."""
    handler = UpdateEmailTemplateHandler(email_template_repository())

    try:
        template = handler.handle(slug, subject=subject, body=body, is_active=is_active)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Template '{template.slug}' saved.")


@click.command("preview")
@click.argument("slug")
@click.option("--data", "pairs", multiple=True, help="Sample value as 'key=value' (repeatable).")
def template_preview(slug: str, pairs: tuple[str, ...]) -> None:
    """Render a template with sample data."""
    data: dict[str, object] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"Invalid data '{pair}'. Expected 'key=value'.")
        key, value = pair.split("=", 1)
        data[key.strip()] = value

    try:
        subject, body = PreviewEmailTemplateHandler(email_template_repository()).handle(slug, data)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Subject: {subject}")
    click.echo()
    click.echo(body)


@click.command("warehouse")
@click.option("--set", "address", default=None, help="New pickup address; '' disables pickup.")
def settings_warehouse(address: str | None) -> None:
    """Show or set the warehouse pickup address."""
    handler = WarehouseAddressHandler(settings_repository())

    try:
        if address is not None:
            handler.set(address)
        current = handler.get()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Warehouse address: {current or '(not set, pickup disabled)'}")


@click.command("admin")
def dashboard_admin() -> None:
    """Order KPIs, revenue by day and top customers."""
    try:
        dash = ShowAdminDashboardHandler(order_repository(), profile_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Orders:     {dash.total_orders}")
    click.echo(f"Pending:    {dash.pending_orders}")
    click.echo(f"Completed:  {dash.completed_orders}")
    click.echo(f"Revenue:    {dash.total_revenue}")

    if dash.revenue_by_day:
        click.echo()
        click.echo("Revenue by day:")
        for day, amount in dash.revenue_by_day:
            click.echo(f"  {day}  {amount:>14}")

    if dash.top_customers:
        click.echo()
        click.echo("Top customers:")
        for c in dash.top_customers:
            click.echo(f"  {c.name[:28]:<28} {c.email:<28} {c.revenue:>14}  ({c.order_count} orders)")


@click.command("customer")
@click.option("--customer", required=True, help="Customer ID.")
def dashboard_customer(customer: str) -> None:
    """A customer's pending count and recent orders."""
    try:
        dash = ShowCustomerDashboardHandler(order_repository(), profile_repository()).handle(customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dash.company_name}: {dash.pending_orders} pending order(s)")
    for number, status, total in dash.recent_orders:
        click.echo(f"  {number:<18} {status:<10} {total:>14}")
