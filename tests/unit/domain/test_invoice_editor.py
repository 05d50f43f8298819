"""Unit tests for invoice editing operations"""

import itertools
import pytest
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_editor import (
    add_item,
    add_product_item,
    remove_item,
    select_client,
    set_status,
    set_tax_rate,
    update_item,
)
from src.domain.product import Product


@pytest.fixture
def draft_invoice():
    """Draft invoice with one 2 x 10.00 item"""
    return add_item(Invoice(id="inv-1", invoice_number="INV-0001"), "Design", "2", "10.00", item_id="item-1")


class TestItemEditing:
    """Every edit leaves derived amounts consistent"""

    def test_add_item_appends_and_recomputes(self, draft_invoice):
        # Act
        invoice = add_item(draft_invoice, "Hosting", "1", "5.5", item_id="item-2")

        # Assert
        assert [item.id for item in invoice.items] == ["item-1", "item-2"]
        assert invoice.items[1].amount == "5.50"
        assert invoice.total_amount == "25.50"

    def test_add_item_defaults(self):
        invoice = add_item(Invoice(id="inv-1"))

        item = invoice.items[0]
        assert (item.description, item.quantity, item.price, item.amount) == ("", "1", "0", "0.00")
        assert item.id

    def test_add_product_item_copies_name_and_price(self, draft_invoice):
        # Arrange
        product = Product(id="prod-1", name="Consulting", description="Hourly", price="150")

        # Act
        invoice = add_product_item(draft_invoice, product, quantity="2")

        # Assert
        item = invoice.items[-1]
        assert item.description == "Consulting"
        assert item.price == "150"
        assert item.amount == "300.00"
        assert invoice.total_amount == "320.00"

    def test_update_item_recomputes_amount(self, draft_invoice):
        invoice = update_item(draft_invoice, "item-1", quantity="3")

        assert invoice.items[0].amount == "30.00"
        assert invoice.total_amount == "30.00"

    def test_update_item_ignores_amount(self, draft_invoice):
        invoice = update_item(draft_invoice, "item-1", amount="999.00", price="4")

        assert invoice.items[0].amount == "8.00"

    def test_update_unknown_item_is_noop(self, draft_invoice):
        invoice = update_item(draft_invoice, "missing", quantity="9")

        assert invoice.to_record() == draft_invoice.to_record()

    def test_remove_item(self, draft_invoice):
        invoice = remove_item(draft_invoice, "item-1")

        assert invoice.items == []
        assert invoice.total_amount == "0.00"

    def test_set_tax_rate(self, draft_invoice):
        assert set_tax_rate(draft_invoice, "10").total_amount == "22.00"

    def test_numeric_edits_stored_as_text(self, draft_invoice):
        """
        Given: A draft invoice
        When: Tax rate and quantity are set from plain numbers
        Then: The stored record keeps them as strings
        """
        # Act
        invoice = update_item(set_tax_rate(draft_invoice, 10), "item-1", quantity=3)

        # Assert
        record = invoice.to_record()
        assert record["taxRate"] == "10"
        assert record["items"][0]["quantity"] == "3"
        assert record["totalAmount"] == "33.00"

    def test_edits_return_new_invoice(self, draft_invoice):
        update_item(draft_invoice, "item-1", quantity="5")

        assert draft_invoice.items[0].quantity == "2"


class TestClientSnapshot:
    """Selecting a client copies its billing details"""

    def test_select_client_copies_fields(self, draft_invoice):
        # Arrange
        client = Client(id="client-1", name="Acme", email="billing@acme.example", address="1 Main St")

        # Act
        invoice = select_client(draft_invoice, client)

        # Assert
        assert invoice.client_id == "client-1"
        assert invoice.client_name == "Acme"
        assert invoice.client_address == "1 Main St"
        assert invoice.client_email == "billing@acme.example"

    def test_missing_address_becomes_empty(self, draft_invoice):
        invoice = select_client(draft_invoice, Client(id="c", name="Solo"))

        assert invoice.client_address == ""

    def test_snapshot_independent_of_later_client_edits(self, draft_invoice):
        client = Client(id="client-1", name="Acme")
        invoice = select_client(draft_invoice, client)

        client.name = "Acme Renamed"

        assert invoice.client_name == "Acme"


class TestStatusTransitions:
    """Any status may follow any other"""

    @pytest.mark.parametrize(
        "start, target",
        list(itertools.product(list(InvoiceStatus), repeat=2)),
    )
    def test_any_to_any(self, start, target):
        invoice = Invoice(id="inv-1", status=start)

        assert set_status(invoice, target).status == target

    def test_set_status_accepts_label(self):
        assert set_status(Invoice(id="inv-1"), "paid").status == InvoiceStatus.PAID
