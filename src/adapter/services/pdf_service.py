"""ReportLab PDF Export Service Implementation

Implements invoice PDF export using ReportLab library.
"""

import logging
from io import BytesIO
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.rendering.formatting import DEFAULT_CURRENCY
from src.app.rendering.view import InvoiceView, build_invoice_view
from src.app.services.document_export_service import DocumentExportService, DocumentFormat
from src.domain.business import Business
from src.domain.invoice import Invoice

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    "PAID": "#047857",
    "PENDING": "#B45309",
    "OVERDUE": "#B91C1C",
    "DRAFT": "#4B5563",
}


def _text(value: str) -> str:
    """Escape free text for Paragraph markup, keeping line breaks"""
    return escape(value or "").replace("\n", "<br/>")


class ReportLabPdfService(DocumentExportService):
    """
    ReportLab implementation of DocumentExportService

    Lays out the shared InvoiceView, so numbers match the on-screen
    templates and the HTML export.
    """

    document_format = DocumentFormat.PDF
    media_type = "application/pdf"
    file_extension = "pdf"

    def __init__(self, default_currency: str = DEFAULT_CURRENCY):
        self.default_currency = default_currency

    def render_document(self, invoice: Invoice, business: Optional[Business] = None) -> bytes:
        view = build_invoice_view(invoice, business, self.default_currency)
        return self.render_view(view)

    def render_view(self, view: InvoiceView) -> bytes:
        """
        Generate the invoice PDF

        Args:
            view: Formatted invoice values

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Invoice {view.invoice_number}",
        )

        styles = getSampleStyleSheet()
        elements = []

        # Custom styles
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=24,
            spaceAfter=4,
            textColor=colors.HexColor("#0066CC"),
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#666666"),
        )
        company_style = ParagraphStyle(
            "CompanyStyle",
            parent=header_style,
            alignment=TA_RIGHT,
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )
        money_style = ParagraphStyle(
            "MoneyStyle",
            parent=normal_style,
            alignment=TA_RIGHT,
        )

        # Header - Title, number and business info
        title_block = [
            Paragraph("INVOICE", title_style),
            Paragraph(_text(view.invoice_number), header_style),
        ]
        company_block = []
        if view.sender:
            company_block.append(Paragraph(f"<b>{_text(view.sender.name)}</b>", company_style))
            for detail in (view.sender.address, view.sender.email, view.sender.phone):
                if detail:
                    company_block.append(Paragraph(_text(detail), company_style))
            if view.sender.tax_id:
                company_block.append(Paragraph(f"Tax ID: {_text(view.sender.tax_id)}", company_style))

        header_table = Table([[title_block, company_block or ""]], colWidths=[85 * mm, 85 * mm])
        header_table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        elements.append(header_table)
        elements.append(Spacer(1, 10 * mm))

        # Bill To and invoice details
        bill_to = [
            Paragraph("BILL TO", bold_style),
            Paragraph(_text(view.bill_to.name), normal_style),
            Paragraph(_text(view.bill_to.address), header_style),
            Paragraph(_text(view.bill_to.email), header_style),
        ]
        status_color = STATUS_COLORS.get(view.status, STATUS_COLORS["DRAFT"])
        details = [
            ["Invoice Date:", view.issue_date],
            ["Due Date:", view.due_date],
            ["Status:", Paragraph(f'<font color="{status_color}"><b>{view.status}</b></font>', normal_style)],
        ]
        details_table = Table(details, colWidths=[30 * mm, 50 * mm])
        details_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        info_table = Table([[bill_to, details_table]], colWidths=[90 * mm, 80 * mm])
        info_table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        elements.append(info_table)
        elements.append(Spacer(1, 10 * mm))

        # Line Items Table
        line_data = [["DESCRIPTION", "QTY", "PRICE", "AMOUNT"]]
        for row in view.rows:
            line_data.append(
                [
                    Paragraph(_text(row.description), normal_style),
                    Paragraph(_text(row.quantity), normal_style),
                    row.unit_price,
                    row.amount,
                ]
            )

        line_table = Table(
            line_data, colWidths=[85 * mm, 20 * mm, 32 * mm, 33 * mm], repeatRows=1
        )
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#F9F9F9")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.HexColor("#666666")),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 9),
                    ("LINEBELOW", (0, 0), (-1, 0), 1.5, colors.HexColor("#DDDDDD")),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 10),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("LINEBELOW", (0, 1), (-1, -1), 0.5, colors.HexColor("#EEEEEE")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )

        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Totals
        total_data = [["", "Subtotal", view.subtotal]]
        if view.show_tax:
            total_data.append(["", view.tax_label, view.tax])
        total_data.append(["", "Total", view.total])

        total_table = Table(total_data, colWidths=[105 * mm, 32 * mm, 33 * mm])
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (1, -1), (-1, -1), "Helvetica-Bold"),
                    ("TEXTCOLOR", (1, -1), (-1, -1), colors.HexColor("#0066CC")),
                    ("LINEABOVE", (1, -1), (-1, -1), 1, colors.HexColor("#DDDDDD")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )

        elements.append(total_table)
        elements.append(Spacer(1, 15 * mm))

        # Footer - notes and terms
        if view.notes:
            elements.append(Paragraph("Notes", bold_style))
            elements.append(Paragraph(_text(view.notes), header_style))
            elements.append(Spacer(1, 5 * mm))
        if view.terms:
            elements.append(Paragraph("Terms &amp; Conditions", bold_style))
            elements.append(Paragraph(_text(view.terms), header_style))

        # Build PDF
        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        logger.debug(f"Generated PDF for invoice {view.invoice_id} ({len(pdf_bytes)} bytes)")
        return pdf_bytes
