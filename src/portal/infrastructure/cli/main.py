import click

from portal.infrastructure.cli.account_commands import (
    address_add,
    address_default,
    address_delete,
    address_list,
    profile_show,
    profile_update,
)
from portal.infrastructure.cli.admin_commands import (
    dashboard_admin,
    dashboard_customer,
    settings_warehouse,
    template_list,
    template_preview,
    template_show,
    template_update,
)
from portal.infrastructure.cli.order_commands import (
    order_export,
    order_list,
    order_show,
    order_status,
    order_submit,
    order_submit_draft,
)
from portal.infrastructure.cli.product_commands import (
    product_add,
    product_import,
    product_list,
    product_update,
)
from portal.infrastructure.cli.support_commands import ticket_list, ticket_open, ticket_status
from portal.infrastructure.config import get_settings
from portal.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Glove Portal: B2B ordering for medical gloves"""
    configure_logging(get_settings().log_level)


@cli.group()
def order() -> None:
    """Submit, track and export orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def address() -> None:
    """Manage delivery addresses."""


@cli.group()
def profile() -> None:
    """Manage billing profiles."""


@cli.group()
def ticket() -> None:
    """Support tickets."""


@cli.group()
def template() -> None:
    """E-mail templates."""


@cli.group()
def settings() -> None:
    """Application settings."""


@cli.group()
def dashboard() -> None:
    """Dashboards."""


# Register subcommands
order.add_command(order_submit)
order.add_command(order_submit_draft)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_status)
order.add_command(order_export)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_import)
address.add_command(address_add)
address.add_command(address_list)
address.add_command(address_default)
address.add_command(address_delete)
profile.add_command(profile_show)
profile.add_command(profile_update)
ticket.add_command(ticket_open)
ticket.add_command(ticket_list)
ticket.add_command(ticket_status)
template.add_command(template_list)
template.add_command(template_show)
template.add_command(template_update)
template.add_command(template_preview)
settings.add_command(settings_warehouse)
dashboard.add_command(dashboard_admin)
dashboard.add_command(dashboard_customer)
