"""Unit tests for Invoice domain entity and its stored form"""

import pytest
from src.domain.client import Client
from src.domain.business import Business
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.template import TemplateVariant
from pydantic import ValidationError


class TestInvoiceStatus:
    """Status label decoding"""

    @pytest.mark.parametrize("raw, expected", [
        ("PAID", InvoiceStatus.PAID),
        ("paid", InvoiceStatus.PAID),
        (" overdue ", InvoiceStatus.OVERDUE),
        ("PENDING", InvoiceStatus.PENDING),
        ("ARCHIVED", InvoiceStatus.DRAFT),
        ("", InvoiceStatus.DRAFT),
        (None, InvoiceStatus.DRAFT),
    ])
    def test_parse(self, raw, expected):
        assert InvoiceStatus.parse(raw) == expected


class TestInvoiceRecord:
    """camelCase JSON records load and save without loss"""

    def test_load_from_camel_case_record(self):
        # Arrange
        record = {
            "id": "inv-1",
            "invoiceNumber": "INV-0001",
            "clientId": "client-1",
            "clientName": "Acme Corp",
            "clientAddress": "1 Main St",
            "clientEmail": "billing@acme.example",
            "issueDate": "2024-01-05T00:00:00.000Z",
            "dueDate": "2024-01-19T00:00:00.000Z",
            "items": [{"id": "item-1", "description": "Design", "quantity": 2, "price": "10", "amount": "20.00"}],
            "notes": "",
            "terms": "Net 14",
            "taxRate": 10,
            "totalAmount": "22.00",
            "status": "PENDING",
            "templateId": "minimal",
        }

        # Act
        invoice = Invoice.from_record(record)

        # Assert
        assert invoice.invoice_number == "INV-0001"
        assert invoice.client_name == "Acme Corp"
        assert invoice.items[0].quantity == "2"
        assert invoice.tax_rate == "10"
        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.template == TemplateVariant.MINIMAL

    def test_to_record_uses_camel_case_keys(self):
        invoice = Invoice(id="inv-1", invoice_number="INV-0001", tax_rate="10")

        record = invoice.to_record()

        assert record["invoiceNumber"] == "INV-0001"
        assert record["taxRate"] == "10"
        assert record["totalAmount"] == "0.00"
        assert record["status"] == "DRAFT"
        assert record["templateId"] == "professional"
        assert "invoice_number" not in record

    def test_unknown_fields_are_preserved(self):
        record = {"id": "inv-1", "invoiceNumber": "INV-0001", "currencyOverride": "EUR"}

        assert Invoice.from_record(record).to_record()["currencyOverride"] == "EUR"

    def test_unknown_status_loads_as_draft(self):
        assert Invoice.from_record({"id": "inv-1", "status": "VOID"}).status == InvoiceStatus.DRAFT

    def test_missing_fields_take_defaults(self):
        invoice = Invoice.from_record({"id": "inv-1"})

        assert invoice.items == []
        assert invoice.tax_rate == "0"
        assert invoice.total_amount == "0.00"
        assert invoice.notes == ""
        assert invoice.template == TemplateVariant.PROFESSIONAL

    def test_null_and_empty_template_fall_back_to_default(self):
        assert Invoice.from_record({"id": "a", "templateId": None}).template_id == "professional"
        assert Invoice.from_record({"id": "a", "templateId": ""}).template_id == "professional"

    def test_unknown_template_kept_but_renders_as_default(self):
        invoice = Invoice.from_record({"id": "a", "templateId": "retro"})

        assert invoice.template_id == "retro"
        assert invoice.template == TemplateVariant.PROFESSIONAL

    def test_new_invoices_get_distinct_ids(self):
        assert Invoice().id != Invoice().id


class TestDirectoryEntities:
    """Client and business records"""

    def test_client_requires_name(self):
        with pytest.raises(ValidationError):
            Client.from_record({"id": "client-1", "email": "a@b.example"})

    def test_client_optional_fields_omitted_from_record(self):
        record = Client(id="client-1", name="Acme").to_record()

        assert record == {"id": "client-1", "name": "Acme", "email": ""}

    def test_business_currency_normalised(self):
        assert Business(name="Studio", currency="eur").currency == "EUR"
        assert Business(name="Studio", currency="").currency == "USD"

    def test_business_tax_id_alias(self):
        business = Business.from_record({"name": "Studio", "taxId": "DE123"})

        assert business.tax_id == "DE123"
        assert business.to_record()["taxId"] == "DE123"
