"""Spreadsheet rendering of an order summary.

Layout: issuer and order block, buyer block, shipping block, the item
table and three totals rows. Amounts are written as numbers so the
sheet can be summed again by the reader.
"""

from __future__ import annotations

from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Font

from portal.application.export_order import DocumentExporter
from portal.domain.service.order_document import COLUMNS, OrderDocument

COLUMN_WIDTHS = {"A": 15, "B": 40, "C": 10, "D": 10, "E": 15, "F": 15}
SHEET_TITLE = "Order"


def _number(value):
    return int(value) if value == value.to_integral_value() else float(value)


class XlsxExporter(DocumentExporter):

    extension = "xlsx"

    def render(self, document: OrderDocument) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_TITLE

        issuer = document.issuer
        buyer = document.buyer
        ws.append([issuer.name, "", "", "ORDER SUMMARY"])
        ws.append([issuer.address, "", "", f"Order #: {document.order_number}"])
        ws.append([f"Tax ID: {issuer.tax_id}", "", "", f"Date: {document.date_label}"])
        ws.append([f"Email: {issuer.email}", "", "", f"Status: {document.status_label}"])
        ws.append([])
        ws.append(["BUYER"])
        ws.append([f"Name: {buyer.display_name}"])
        ws.append([f"Email: {buyer.email}"])
        ws.append([f"Tax ID: {buyer.tax_id}"])
        ws.append([f"Address: {buyer.postal_line}"])
        ws.append([])
        ws.append(["SHIPPING ADDRESS"])
        shipping = document.shipping
        if shipping is not None:
            ws.append([f"{shipping.site_name} {shipping.address}".strip()])
            ws.append([f"Contact: {shipping.contact_name}"])
        else:
            ws.append(["-"])
        if document.comment:
            ws.append([f"Comment: {document.comment}"])
        ws.append([])

        ws.append(list(COLUMNS))
        for cell in ws[ws.max_row]:
            cell.font = Font(bold=True)

        for row in document.rows:
            ws.append([
                row.sku or "-",
                row.product_name,
                row.size,
                row.quantity,
                _number(row.unit_price.amount),
                _number(row.line_total.amount),
            ])

        totals = document.totals
        ws.append([])
        ws.append(["", "", "", "", "Subtotal:", _number(totals.net.amount)])
        ws.append(["", "", "", "", f"{totals.vat_label}:", _number(totals.vat.amount)])
        ws.append(["", "", "", "", "TOTAL:", _number(totals.gross.amount)])
        for cell in ws[ws.max_row]:
            cell.font = Font(bold=True)

        for column, width in COLUMN_WIDTHS.items():
            ws.column_dimensions[column].width = width

        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()
