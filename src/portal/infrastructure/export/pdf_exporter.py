"""PDF rendering of an order summary, invoice style.

The item table repeats its header row on every page and flows onto as
many pages as it needs; each page is stamped with its number. Totals
follow the table on the last page.
"""

from __future__ import annotations

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from portal.application.export_order import DocumentExporter
from portal.domain.service.order_document import COLUMNS, OrderDocument

BRAND_GREEN = colors.Color(51 / 255, 102 / 255, 51 / 255)
MARGIN = 15 * mm
COLUMN_WIDTHS = [25 * mm, None, 20 * mm, 20 * mm, 30 * mm, 30 * mm]


def _stamp_page_number(canvas, doc) -> None:
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.grey)
    canvas.drawString(MARGIN, 10 * mm, f"Page {doc.page}")
    canvas.restoreState()


class PdfExporter(DocumentExporter):

    extension = "pdf"

    def __init__(self, compress: bool = True) -> None:
        self._compress = compress
        styles = getSampleStyleSheet()
        self._title = ParagraphStyle("OrderTitle", parent=styles["Heading1"], fontSize=20)
        self._body = ParagraphStyle("OrderBody", parent=styles["Normal"], fontSize=10, leading=13)
        self._caption = ParagraphStyle(
            "OrderCaption", parent=self._body, fontSize=8, textColor=colors.grey
        )
        self._footer = ParagraphStyle(
            "OrderFooter", parent=self._caption, alignment=TA_CENTER
        )

    def render(self, document: OrderDocument) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Order {document.order_number}",
            author=document.issuer.name,
            pageCompression=1 if self._compress else 0,
            invariant=1,
        )
        story = [
            self._heading(document, doc.width),
            Spacer(1, 8 * mm),
            self._parties(document, doc.width),
            Spacer(1, 8 * mm),
            self._items_table(document, doc.width),
            Spacer(1, 6 * mm),
            self._totals_table(document),
            Spacer(1, 10 * mm),
            Paragraph("Thank you for your order!", self._footer),
            Paragraph(
                "This document was generated electronically and is valid without signature.",
                self._footer,
            ),
        ]
        doc.build(story, onFirstPage=_stamp_page_number, onLaterPages=_stamp_page_number)
        return buffer.getvalue()

    # --- Blocks ---------------------------------------------------------------

    def _heading(self, document: OrderDocument, width: float) -> Table:
        meta = [
            Paragraph("ORDER", self._title),
            Paragraph(f"#{escape(document.order_number)}", self._body),
            Paragraph(f"Date: {document.date_label}", self._body),
            Paragraph(f"Status: {escape(document.status_label)}", self._body),
        ]
        brand = Paragraph(
            f'<font size="16" color="#336633"><b>{escape(document.issuer.name)}</b></font>',
            self._body,
        )
        table = Table([[brand, meta]], colWidths=[width * 0.55, width * 0.45])
        table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return table

    def _parties(self, document: OrderDocument, width: float) -> Table:
        issuer = document.issuer
        seller = [
            Paragraph("ISSUER:", self._caption),
            Paragraph(f"<b>{escape(issuer.name)}</b>", self._body),
            Paragraph(escape(issuer.address), self._body),
            Paragraph(f"Tax ID: {escape(issuer.tax_id)}", self._body),
            Paragraph(f"Email: {escape(issuer.email)}", self._body),
        ]

        buyer = document.buyer
        buyer_block = [
            Paragraph("BUYER:", self._caption),
            Paragraph(f"<b>{escape(buyer.display_name)}</b>", self._body),
        ]
        if buyer.postal_line:
            buyer_block.append(Paragraph(escape(buyer.postal_line), self._body))
        if buyer.tax_id:
            buyer_block.append(Paragraph(f"Tax ID: {escape(buyer.tax_id)}", self._body))
        buyer_block.append(Paragraph(f"Email: {escape(buyer.email)}", self._body))

        shipping_block = []
        if document.shipping is not None:
            sa = document.shipping
            shipping_block = [
                Paragraph("SHIPPING ADDRESS:", self._caption),
                Paragraph(f"<b>{escape(sa.site_name)}</b>", self._body),
                Paragraph(escape(sa.address), self._body),
            ]
            if sa.contact_name:
                shipping_block.append(
                    Paragraph(f"Contact: {escape(sa.contact_name)}", self._body)
                )
        if document.comment:
            shipping_block.append(Paragraph(f"Comment: {escape(document.comment)}", self._body))

        table = Table(
            [[seller, buyer_block, shipping_block or ""]],
            colWidths=[width * 0.35, width * 0.35, width * 0.30],
        )
        table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return table

    def _items_table(self, document: OrderDocument, width: float) -> Table:
        fixed = sum(w for w in COLUMN_WIDTHS if w is not None)
        widths = [w if w is not None else width - fixed for w in COLUMN_WIDTHS]
        data = [list(COLUMNS)]
        for row in document.rows:
            sku, name, size, qty, unit_price, total = row.as_text()
            data.append([sku, Paragraph(escape(name), self._body), size, qty, unit_price, total])

        table = Table(data, colWidths=widths, repeatRows=1)
        table.setStyle(TableStyle([
            ("FONT", (0, 0), (-1, -1), "Helvetica", 9),
            ("FONT", (0, 0), (-1, 0), "Helvetica-Bold", 9),
            ("BACKGROUND", (0, 0), (-1, 0), BRAND_GREEN),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.lightgrey),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("ALIGN", (2, 1), (3, -1), "CENTER"),
            ("ALIGN", (4, 1), (5, -1), "RIGHT"),
        ]))
        return table

    def _totals_table(self, document: OrderDocument) -> Table:
        totals = document.totals
        data = [
            ["Subtotal:", str(totals.net)],
            [f"{totals.vat_label}:", str(totals.vat)],
            ["Total:", str(totals.gross)],
        ]
        table = Table(data, colWidths=[40 * mm, 40 * mm], hAlign="RIGHT")
        table.setStyle(TableStyle([
            ("FONT", (0, 0), (-1, -1), "Helvetica", 10),
            ("FONT", (0, 2), (-1, 2), "Helvetica-Bold", 12),
            ("TEXTCOLOR", (1, 2), (1, 2), BRAND_GREEN),
            ("ALIGN", (1, 0), (1, -1), "RIGHT"),
            ("LINEABOVE", (0, 2), (-1, 2), 0.5, colors.lightgrey),
        ]))
        return table
