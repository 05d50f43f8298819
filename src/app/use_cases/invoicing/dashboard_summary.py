"""GetDashboardSummary Use Case

Aggregates invoice totals per status for the dashboard.
"""

from decimal import Decimal
from src.app.rendering.formatting import format_currency, DEFAULT_CURRENCY
from src.app.repositories.entity_repository import InvoiceRepository, BusinessProfileRepository
from src.domain.calculations import format_amount, parse_amount
from src.domain.invoice import InvoiceStatus
from .dtos import DashboardSummaryDTO


class GetDashboardSummary:
    """
    Use Case: Dashboard summary

    Business Rules:
    1. Sums the cached total_amount of PAID, PENDING and OVERDUE invoices
    2. DRAFT invoices are counted but not summed
    3. Amounts are formatted in the business currency
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        business_repo: BusinessProfileRepository,
        default_currency: str = DEFAULT_CURRENCY,
    ):
        self.invoice_repo = invoice_repo
        self.business_repo = business_repo
        self.default_currency = default_currency

    async def execute(self) -> DashboardSummaryDTO:
        invoices = await self.invoice_repo.list_all()
        business = await self.business_repo.get()
        currency = business.currency if business else self.default_currency

        totals = {status: Decimal("0") for status in InvoiceStatus}
        counts = {status: 0 for status in InvoiceStatus}
        for invoice in invoices:
            totals[invoice.status] += parse_amount(invoice.total_amount)
            counts[invoice.status] += 1

        paid = totals[InvoiceStatus.PAID]
        pending = totals[InvoiceStatus.PENDING]
        overdue = totals[InvoiceStatus.OVERDUE]

        return DashboardSummaryDTO(
            total_paid=format_amount(paid),
            total_pending=format_amount(pending),
            total_overdue=format_amount(overdue),
            formatted_paid=format_currency(paid, currency),
            formatted_pending=format_currency(pending, currency),
            formatted_overdue=format_currency(overdue, currency),
            invoice_count=len(invoices),
            paid_count=counts[InvoiceStatus.PAID],
            pending_count=counts[InvoiceStatus.PENDING],
            overdue_count=counts[InvoiceStatus.OVERDUE],
            draft_count=counts[InvoiceStatus.DRAFT],
        )
