"""CLI commands for the Order aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from portal.application.export_order import ExportOrderHandler
from portal.application.fill_cart import CartItemSpec, FillCartHandler
from portal.application.list_orders import ListOrdersHandler
from portal.application.show_order import ShowOrderHandler
from portal.application.submit_draft import SubmitDraftHandler
from portal.application.submit_order import SubmitOrderHandler
from portal.application.update_order_status import UpdateOrderStatusHandler
from portal.domain.exceptions import DomainException
from portal.domain.model.cart import CustomerSession
from portal.domain.model.order import OrderStatus
from portal.domain.service.order_document import OrderDocument
from portal.domain.service.order_number import OrderNumberGenerator
from portal.infrastructure.bootstrap import (
    address_repository,
    notification_service,
    order_repository,
    product_repository,
    profile_repository,
    settings_repository,
)
from portal.infrastructure.config import get_settings
from portal.infrastructure.export.pdf_exporter import PdfExporter
from portal.infrastructure.export.xlsx_exporter import XlsxExporter


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'NIT-100:M:3,NIT-100:L:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'SKU:Size:Cartons'."
            )
        sku, size, qty_str = (p.strip() for p in parts)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for '{sku}'.")
        specs.append(CartItemSpec(sku=sku, size=size, quantity=qty))
    return specs


def _session(customer_id: str) -> CustomerSession:
    profile = profile_repository().get_by_id(customer_id)
    return CustomerSession(customer_id=customer_id, email=profile.email if profile else "")


def _export_handler() -> ExportOrderHandler:
    settings = get_settings()
    return ExportOrderHandler(
        order_repo=order_repository(),
        profile_repo=profile_repository(),
        product_repo=product_repository(),
        issuer=settings.issuer,
        vat_rate=settings.vat_rate,
    )


@click.command("submit")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'SKU:Size:Cartons,...'.")
@click.option("--address", "address_id", default=None, help="Saved address ID, or PICKUP.")
@click.option("--draft", is_flag=True, default=False, help="Save as draft instead of submitting.")
@click.option("--comment", default="", help="Free-text comment for the office.")
def order_submit(customer: str, items: str, address_id: str | None, draft: bool, comment: str) -> None:
    """Submit an order (or save a draft) from the given items."""
    specs = _parse_items(items)
    settings = get_settings()

    try:
        session = _session(customer)
        FillCartHandler(product_repository()).handle(session.cart, specs)
        click.echo(f"Cart total: {session.cart.total}")

        handler = SubmitOrderHandler(
            order_repo=order_repository(),
            address_repo=address_repository(),
            settings_repo=settings_repository(),
            notifications=notification_service(),
            order_numbers=OrderNumberGenerator(),
            number_attempts=settings.order_number_attempts,
        )
        dto = handler.handle(
            session,
            address_id=address_id,
            status=OrderStatus.DRAFT if draft else OrderStatus.PENDING,
            comment=comment,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        click.echo("Cart is empty, nothing submitted.")
        return

    click.echo(f"Order {dto.order_number} saved  (status={dto.status}, id={dto.id})")
    click.echo(f"Total: {dto.total}")


@click.command("submit-draft")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--id", "order_id", required=True, help="Draft order ID.")
@click.option("--address", "address_id", default=None, help="Saved address ID, or PICKUP.")
def order_submit_draft(customer: str, order_id: str, address_id: str | None) -> None:
    """Submit a previously saved draft."""
    try:
        handler = SubmitDraftHandler(
            order_repo=order_repository(),
            address_repo=address_repository(),
            settings_repo=settings_repository(),
            notifications=notification_service(),
        )
        dto = handler.handle(_session(customer), order_id, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} submitted  (status={dto.status})")


def _display_invoice(doc: OrderDocument) -> None:
    """On-screen invoice: header, items and VAT totals."""
    click.echo(f"Order #{doc.order_number}  ({doc.status_label})")
    click.echo(f"Date:     {doc.date_label}")
    click.echo(f"Buyer:    {doc.buyer.display_name}  {doc.buyer.email}")
    if doc.shipping is not None:
        click.echo(f"Ship to:  {doc.shipping.site_name}, {doc.shipping.address}")
        if doc.shipping.contact_name:
            click.echo(f"Contact:  {doc.shipping.contact_name}")
    if doc.comment:
        click.echo(f"Comment:  {doc.comment}")
    click.echo()

    click.echo(f"  {'SKU':<12} {'Product':<28} {'Size':>5} {'Qty':>7} {'Price':>12} {'Total':>13}")
    click.echo(f"  {'-'*82}")
    for row in doc.rows:
        sku, name, size, qty, price, total = row.as_text()
        click.echo(f"  {sku:<12} {name[:28]:<28} {size:>5} {qty:>7} {price:>12} {total:>13}")
    click.echo(f"  {'-'*82}")

    totals = doc.totals
    click.echo(f"  {'Subtotal:':<60} {str(totals.net):>22}")
    click.echo(f"  {totals.vat_label + ':':<60} {str(totals.vat):>22}")
    click.echo(f"  {'Total:':<60} {str(totals.gross):>22}")


def _display_summary(dto) -> None:
    """Header and items without the invoice block."""
    click.echo(f"Order {dto.order_number}  (status={dto.status}, id={dto.id})")
    click.echo(f"Created:  {dto.created_at}")
    if dto.shipping:
        click.echo(f"Ship to:  {dto.shipping}")
    click.echo()
    click.echo(f"  {'Product':<28} {'Size':>5} {'Qty':>5} {'Price':>12} {'Total':>13}")
    click.echo(f"  {'-'*67}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name[:28]:<28} {item.size:>5} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.line_total:>13}"
        )
    click.echo(f"  {'-'*67}")
    click.echo(f"  {'Net total:':<52} {dto.total:>15}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.option("--customer", default=None, help="Restrict to this customer's orders.")
@click.option("--summary", is_flag=True, help="Print the order lines only, without VAT.")
def order_show(order_id: str, customer: str | None, summary: bool) -> None:
    """Show an order as an invoice."""
    try:
        if summary:
            dto = ShowOrderHandler(order_repository()).handle(order_id, customer_id=customer)
        else:
            document = _export_handler().document(order_id, customer_id=customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if summary:
        _display_summary(dto)
    else:
        _display_invoice(document)


@click.command("list")
@click.option("--customer", default=None, help="Only this customer's orders.")
@click.option("--status", default=None, help="Filter by status.")
@click.option("--search", default=None, help="Search order number, company or e-mail.")
def order_list(customer: str | None, status: str | None, search: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repository(), profile_repository())

    try:
        orders = handler.handle(customer_id=customer, status=status, search=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Number':<18} {'Date':<22} {'Status':<10} {'Total':>14}  ID")
    click.echo("-" * 80)
    for o in orders:
        click.echo(f"{o.order_number:<18} {o.created_at:<22} {o.status:<10} {o.total:>14}  {o.id}")


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--set", "new_status", required=True,
              type=click.Choice([s.value for s in OrderStatus]), help="New status.")
def order_status(order_id: str, new_status: str) -> None:
    """Set an order's status (admin)."""
    handler = UpdateOrderStatusHandler(
        order_repo=order_repository(),
        profile_repo=profile_repository(),
        notifications=notification_service(),
    )

    try:
        changed = handler.handle(order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if changed:
        click.echo(f"Order #{order_id} is now {new_status}.")
    else:
        click.echo(f"Order #{order_id} is already {new_status}.")


@click.command("export")
@click.option("--id", "order_id", required=True, help="Order ID to export.")
@click.option("--format", "fmt", type=click.Choice(["pdf", "xlsx", "both"]), default="both")
@click.option("--out", "out_dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Target directory (defaults to the configured export dir).")
@click.option("--customer", default=None, help="Restrict to this customer's orders.")
def order_export(order_id: str, fmt: str, out_dir: Path | None, customer: str | None) -> None:
    """Export an order as PDF and/or spreadsheet."""
    directory = out_dir or get_settings().export_dir
    exporters = {"pdf": [PdfExporter()], "xlsx": [XlsxExporter()]}
    chosen = exporters["pdf"] + exporters["xlsx"] if fmt == "both" else exporters[fmt]

    handler = _export_handler()
    try:
        for exporter in chosen:
            path = handler.handle(order_id, exporter, directory, customer_id=customer)
            click.echo(f"Wrote {path}")
    except DomainException as exc:
        raise click.ClickException(str(exc))
