"""Jinja2 HTML Export Service Implementation

Renders an invoice into one self-contained HTML document (inline styles,
no external resources) for printing or sharing.
"""

import logging
from typing import Optional

from jinja2 import Environment, StrictUndefined

from src.app.rendering.formatting import DEFAULT_CURRENCY
from src.app.rendering.view import InvoiceView, build_invoice_view
from src.app.services.document_export_service import DocumentExportService, DocumentFormat
from src.domain.business import Business
from src.domain.invoice import Invoice

logger = logging.getLogger(__name__)

INVOICE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Invoice {{ view.invoice_number }}</title>
  <style>
    body { font-family: 'Helvetica Neue', Arial, sans-serif; margin: 0; padding: 0; color: #333; }
    .invoice-container { max-width: 800px; margin: 0 auto; padding: 30px; }
    .header, .info-section { display: flex; justify-content: space-between; margin-bottom: 40px; }
    .invoice-title { font-size: 28px; font-weight: bold; color: #0066CC; margin: 0; }
    .invoice-number { font-size: 16px; color: #666; margin-top: 5px; }
    .company-info { text-align: right; }
    .company-name { font-size: 18px; font-weight: bold; margin-bottom: 5px; }
    .company-detail, .info-detail { font-size: 14px; color: #666; margin: 0; line-height: 1.4; }
    .info-column { max-width: 45%; }
    .info-label { font-size: 12px; color: #888; margin-bottom: 5px; text-transform: uppercase; }
    .info-value { font-size: 16px; margin-bottom: 15px; }
    table { width: 100%; border-collapse: collapse; margin-bottom: 30px; }
    th { background-color: #f9f9f9; padding: 10px; text-align: left; font-size: 12px; border-bottom: 2px solid #ddd; color: #666; }
    td { padding: 15px 10px; border-bottom: 1px solid #eee; }
    .qty { text-align: center; }
    .money { text-align: right; }
    .totals { width: 250px; margin-left: auto; margin-bottom: 40px; }
    .total-row, .grand-total { display: flex; justify-content: space-between; margin-bottom: 5px; }
    .grand-total { margin-top: 10px; padding-top: 10px; border-top: 1px solid #ddd; font-weight: bold; color: #0066CC; }
    .footer { border-top: 1px solid #eee; padding-top: 20px; }
    .footer-label { font-size: 14px; font-weight: bold; color: #666; margin-bottom: 10px; }
    .footer-text { font-size: 14px; color: #666; line-height: 1.5; margin-bottom: 20px; white-space: pre-line; }
    .status-badge { display: inline-block; padding: 5px 10px; border-radius: 15px; font-size: 12px; text-transform: uppercase; }
    .status-paid { background-color: #D1FAE5; color: #047857; }
    .status-pending { background-color: #FEF3C7; color: #B45309; }
    .status-overdue { background-color: #FEE2E2; color: #B91C1C; }
    .status-draft { background-color: #F3F4F6; color: #4B5563; }
  </style>
</head>
<body>
  <div class="invoice-container">
    <div class="header">
      <div>
        <h1 class="invoice-title">INVOICE</h1>
        <div class="invoice-number">{{ view.invoice_number }}</div>
      </div>
      {% if view.sender %}
      <div class="company-info">
        <div class="company-name">{{ view.sender.name }}</div>
        {% for detail in [view.sender.address, view.sender.email, view.sender.phone] if detail %}
        <p class="company-detail">{{ detail }}</p>
        {% endfor %}
        {% if view.sender.tax_id %}<p class="company-detail">Tax ID: {{ view.sender.tax_id }}</p>{% endif %}
      </div>
      {% endif %}
    </div>

    <div class="info-section">
      <div class="info-column">
        <div class="info-label">BILL TO</div>
        <div class="info-value">{{ view.bill_to.name }}</div>
        <p class="info-detail">{{ view.bill_to.address }}</p>
        <p class="info-detail">{{ view.bill_to.email }}</p>
      </div>
      <div class="info-column">
        <div class="info-label">INVOICE DATE</div>
        <div class="info-value">{{ view.issue_date }}</div>
        <div class="info-label">DUE DATE</div>
        <div class="info-value">{{ view.due_date }}</div>
        <div class="info-label">STATUS</div>
        <div class="status-badge status-{{ view.status | lower }}">{{ view.status }}</div>
      </div>
    </div>

    <table>
      <thead>
        <tr>
          <th style="width: 50%;">DESCRIPTION</th>
          <th class="qty" style="width: 10%;">QTY</th>
          <th class="money" style="width: 20%;">PRICE</th>
          <th class="money" style="width: 20%;">AMOUNT</th>
        </tr>
      </thead>
      <tbody>
        {% for row in view.rows %}
        <tr>
          <td>{{ row.description }}</td>
          <td class="qty">{{ row.quantity }}</td>
          <td class="money">{{ row.unit_price }}</td>
          <td class="money">{{ row.amount }}</td>
        </tr>
        {% endfor %}
      </tbody>
    </table>

    <div class="totals">
      <div class="total-row"><div>Subtotal</div><div class="money">{{ view.subtotal }}</div></div>
      {% if view.show_tax %}
      <div class="total-row"><div>{{ view.tax_label }}</div><div class="money">{{ view.tax }}</div></div>
      {% endif %}
      <div class="grand-total"><div>Total</div><div class="money">{{ view.total }}</div></div>
    </div>

    {% if view.notes or view.terms %}
    <div class="footer">
      {% if view.notes %}
      <div class="footer-label">Notes</div>
      <div class="footer-text">{{ view.notes }}</div>
      {% endif %}
      {% if view.terms %}
      <div class="footer-label">Terms &amp; Conditions</div>
      <div class="footer-text">{{ view.terms }}</div>
      {% endif %}
    </div>
    {% endif %}
  </div>
</body>
</html>
"""


class HtmlDocumentExportService(DocumentExportService):
    """
    Jinja2 implementation of DocumentExportService

    Autoescaping is always on: client fields, business fields, item
    descriptions, notes and terms cannot inject markup.
    """

    document_format = DocumentFormat.HTML
    media_type = "text/html"
    file_extension = "html"

    def __init__(self, default_currency: str = DEFAULT_CURRENCY):
        self.default_currency = default_currency
        self.environment = Environment(autoescape=True, undefined=StrictUndefined)
        self.template = self.environment.from_string(INVOICE_TEMPLATE)

    def render_html(self, invoice: Invoice, business: Optional[Business] = None) -> str:
        """Render the invoice as an HTML string"""
        view = build_invoice_view(invoice, business, self.default_currency)
        return self.render_view(view)

    def render_view(self, view: InvoiceView) -> str:
        html = self.template.render(view=view)
        logger.debug(f"Rendered HTML document for invoice {view.invoice_id}")
        return html

    def render_document(self, invoice: Invoice, business: Optional[Business] = None) -> bytes:
        return self.render_html(invoice, business).encode("utf-8")
