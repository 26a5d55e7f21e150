"""CLI commands for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from portal.application.add_product import AddProductHandler
from portal.application.import_products import ImportProductsHandler
from portal.application.update_product import UpdateProductHandler
from portal.domain.exceptions import DomainException
from portal.domain.model.product import (
    DISPENSERS_PER_CARTON_KEY,
    ITEMS_PER_DISPENSER_KEY,
    UNIT_KEY,
)
from portal.infrastructure.bootstrap import product_repository
from portal.infrastructure.importers.product_sheet import read_product_rows


def _parse_specs(
    pairs: tuple[str, ...],
    unit: str | None,
    items_per_dispenser: int | None,
    dispensers_per_carton: int | None,
) -> dict[str, object] | None:
    """Parse ('Material=Nitrile', ...) plus the packaging options."""
    if not pairs and unit is None and items_per_dispenser is None and dispensers_per_carton is None:
        return None
    specs: dict[str, object] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"Invalid spec '{pair}'. Expected 'Key=Value'.")
        key, value = pair.split("=", 1)
        specs[key.strip()] = value.strip()
    if unit is not None:
        specs[UNIT_KEY] = unit
    if items_per_dispenser is not None:
        specs[ITEMS_PER_DISPENSER_KEY] = items_per_dispenser
    if dispensers_per_carton is not None:
        specs[DISPENSERS_PER_CARTON_KEY] = dispensers_per_carton
    return specs


def _parse_variants(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    return [v.strip() for v in raw.split(",") if v.strip()]


_spec_options = [
    click.option("--spec", "specs", multiple=True, help="Attribute as 'Key=Value' (repeatable)."),
    click.option("--unit", default=None, help="Unit label, e.g. 'db'."),
    click.option("--items-per-dispenser", type=int, default=None, help="Items in one dispenser box."),
    click.option("--dispensers-per-carton", type=int, default=None, help="Dispenser boxes in one carton."),
    click.option("--variants", default=None, help="Sizes as 'S,M,L,XL'."),
]


def spec_options(func):
    for option in reversed(_spec_options):
        func = option(func)
    return func


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price per dispenser box (e.g. 14500).")
@click.option("--sku", default="", help="Stock keeping unit.")
@click.option("--category", default="", help="Catalog category.")
@click.option("--image", "image_url", default="", help="Image URL.")
@spec_options
def product_add(name, price, sku, category, image_url, specs, unit,
                items_per_dispenser, dispensers_per_carton, variants) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            base_price=price,
            sku=sku,
            category=category,
            image_url=image_url,
            specifications=_parse_specs(specs, unit, items_per_dispenser, dispensers_per_carton),
            variants=_parse_variants(variants),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.base_price} per box")


@click.command("list")
def product_list() -> None:
    """List all products with their derived prices."""
    repo = product_repository()
    try:
        products = repo.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<5} {'SKU':<12} {'Name':<28} {'Item':>9} {'Box':>11} {'Carton':>12}  Sizes"
    )
    click.echo("-" * 96)
    for p in products:
        click.echo(
            f"{p.id:<5} {p.sku:<12} {p.name[:28]:<28} {str(p.unit_price):>9} "
            f"{str(p.base_price):>11} {str(p.carton_price):>12}  {','.join(p.variants)}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price per dispenser box.")
@click.option("--sku", default=None, help="New SKU.")
@click.option("--category", default=None, help="New category.")
@click.option("--image", "image_url", default=None, help="New image URL.")
@spec_options
def product_update(product_id, name, price, sku, category, image_url, specs, unit,
                   items_per_dispenser, dispensers_per_carton, variants) -> None:
    """Update a product. Existing orders keep their prices."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            base_price=price,
            sku=sku,
            category=category,
            image_url=image_url,
            specifications=_parse_specs(specs, unit, items_per_dispenser, dispensers_per_carton),
            variants=_parse_variants(variants),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated ({product.base_price} per box)")


@click.command("import")
@click.argument("sheet", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def product_import(sheet: Path) -> None:
    """Upsert products from an xlsx/csv sheet, keyed by SKU."""
    handler = ImportProductsHandler(product_repo=product_repository())

    try:
        report = handler.handle(read_product_rows(sheet))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Import finished: {report.succeeded} succeeded, {report.failed} failed.")
