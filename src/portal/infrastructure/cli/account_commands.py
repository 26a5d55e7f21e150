"""CLI commands for a customer's addresses and profile."""

from __future__ import annotations

import click

from portal.application.manage_addresses import (
    AddAddressHandler,
    DeleteAddressHandler,
    SetDefaultAddressHandler,
)
from portal.application.update_profile import UpdateProfileHandler
from portal.domain.exceptions import DomainException
from portal.infrastructure.bootstrap import address_repository, profile_repository


@click.command("add")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--site", "site_name", required=True, help="Site name, e.g. 'Clinic B'.")
@click.option("--address", required=True, help="Full postal address.")
@click.option("--contact", "contact_name", default="", help="Contact person on site.")
@click.option("--default", "is_default", is_flag=True, default=False, help="Make this the default.")
def address_add(customer: str, site_name: str, address: str, contact_name: str, is_default: bool) -> None:
    """Save a delivery address."""
    handler = AddAddressHandler(address_repository())

    try:
        saved = handler.handle(customer, site_name, address, contact_name, is_default)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address {saved.id} saved ({saved.site_name})")


@click.command("list")
@click.option("--customer", required=True, help="Customer ID.")
def address_list(customer: str) -> None:
    """List a customer's delivery addresses."""
    try:
        addresses = address_repository().list_for_customer(customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not addresses:
        click.echo("No saved addresses.")
        return

    for a in addresses:
        marker = "*" if a.is_default else " "
        contact = f"  ({a.contact_name})" if a.contact_name else ""
        click.echo(f"{marker} {a.id}  {a.site_name}: {a.address}{contact}")


@click.command("default")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--id", "address_id", required=True, help="Address ID.")
def address_default(customer: str, address_id: str) -> None:
    """Make an address the customer's default."""
    try:
        SetDefaultAddressHandler(address_repository()).handle(customer, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address {address_id} is now the default.")


@click.command("delete")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--id", "address_id", required=True, help="Address ID.")
def address_delete(customer: str, address_id: str) -> None:
    """Delete a saved address."""
    try:
        DeleteAddressHandler(address_repository()).handle(customer, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address {address_id} deleted.")


@click.command("show")
@click.option("--customer", required=True, help="Customer ID.")
def profile_show(customer: str) -> None:
    """Show a customer's billing profile."""
    try:
        profile = profile_repository().get_by_id(customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if profile is None:
        raise click.ClickException(f"No profile for customer '{customer}'")

    click.echo(f"Company:  {profile.display_name}")
    click.echo(f"E-mail:   {profile.email or '-'}")
    click.echo(f"Tax ID:   {profile.tax_id or '-'}")
    click.echo(f"Address:  {profile.postal_line or '-'}")
    click.echo(f"Phone:    {profile.phone or '-'}")


@click.command("update")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--company", "company_name", default=None)
@click.option("--email", default=None)
@click.option("--tax-id", default=None)
@click.option("--address", default=None, help="Street address.")
@click.option("--city", default=None)
@click.option("--zip", "zip_code", default=None)
@click.option("--phone", default=None)
def profile_update(customer, company_name, email, tax_id, address, city, zip_code, phone) -> None:
    """Update billing details; omitted fields are left unchanged."""
    handler = UpdateProfileHandler(profile_repository())

    try:
        profile = handler.handle(
            customer,
            company_name=company_name,
            email=email,
            tax_id=tax_id,
            address=address,
            city=city,
            zip=zip_code,
            phone=phone,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Profile for {profile.display_name} updated.")
