import pytest
from src.domain.business import Business
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product


@pytest.fixture
def sample_invoice():
    """Pending invoice: 2 x 10.00 + 1 x 5.50 at 10% tax, totals cached"""
    return Invoice(
        id="inv-1",
        invoice_number="INV-0001",
        client_id="client-1",
        client_name="Acme Corp",
        client_address="1 Main St\nSpringfield",
        client_email="billing@acme.example",
        issue_date="2024-01-05T00:00:00.000Z",
        due_date="2024-01-19T00:00:00.000Z",
        items=[
            InvoiceItem(id="item-1", description="Design", quantity="2", price="10.00", amount="20.00"),
            InvoiceItem(id="item-2", description="Hosting", quantity="1", price="5.5", amount="5.50"),
        ],
        notes="Thank you for your business",
        terms="Payment due within 14 days",
        tax_rate="10",
        total_amount="28.05",
        status=InvoiceStatus.PENDING,
        template_id="professional",
    )


@pytest.fixture
def sample_business():
    return Business(
        name="Studio Nine",
        email="hello@studionine.example",
        phone="+1 555 0100",
        address="9 Harbor Rd",
        currency="USD",
        tax_id="US-99-1234567",
    )


@pytest.fixture
def sample_client():
    return Client(
        id="client-1",
        name="Acme Corp",
        email="billing@acme.example",
        address="1 Main St\nSpringfield",
    )


@pytest.fixture
def sample_product():
    return Product(id="prod-1", name="Consulting", description="Hourly rate", price="150", unit="hour")
