"""Tests for reading product spreadsheets."""

import pytest
from openpyxl import Workbook

from portal.application.import_products import ImportProductsHandler
from portal.domain.exceptions import ValidationError
from portal.domain.model.value_objects import Money
from portal.infrastructure.importers.product_sheet import read_product_rows
from tests.fakes import FakeProductRepository

CSV = (
    "Name,SKU,Base_Price,Items_Per_Dispenser,Dispensers_Per_Carton,Variants,Specifications,Ignored\n"
    'Nitrile Exam Glove,NIT-100,14500,50,6,"S,M,L","Material:Nitrile, Color:Blue",x\n'
    "Vinyl Glove,VIN-50,5000,,,,,y\n"
)


class TestReadProductRows:

    def test_csv(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_text(CSV, encoding="utf-8")

        rows = read_product_rows(path)

        assert len(rows) == 2
        assert rows[0]["name"] == "Nitrile Exam Glove"
        assert rows[0]["base_price"] == "14500"
        assert rows[0]["variants"] == "S,M,L"
        assert rows[1]["items_per_dispenser"] is None
        assert "ignored" not in rows[0]

    def test_missing_required_columns(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_text("name,price\nGlove,100\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="sku"):
            read_product_rows(path)

    def test_xlsx_feeds_import(self, tmp_path):
        wb = Workbook()
        ws = wb.active
        ws.append(["name", "sku", "base_price", "items_per_dispenser", "dispensers_per_carton"])
        ws.append(["Latex Glove", "LAT-200", 12000, 100, 10])
        path = tmp_path / "products.xlsx"
        wb.save(path)

        repo = FakeProductRepository()
        report = ImportProductsHandler(repo).handle(read_product_rows(path))

        assert report.succeeded == 1
        product = repo.get_by_sku("LAT-200")
        assert product.unit_price == Money.of("120")
        assert product.carton_price == Money.of("120000")
