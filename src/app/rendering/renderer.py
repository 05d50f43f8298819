"""Template Rendering Engine

Projects an invoice into one of the template variants.
"""

from typing import Optional
from src.app.rendering import creative, minimal, professional
from src.app.rendering.formatting import DEFAULT_CURRENCY
from src.app.rendering.view import InvoiceView, build_invoice_view
from src.domain.business import Business
from src.domain.invoice import Invoice
from src.domain.layout import InvoiceLayout
from src.domain.template import TemplateVariant


class TemplateRenderer:
    """
    Pure invoice renderer

    The business profile is passed into every call; the renderer holds no
    state besides the fallback currency.
    """

    def __init__(self, default_currency: str = DEFAULT_CURRENCY):
        self.default_currency = default_currency

    def render(
        self,
        invoice: Invoice,
        business: Optional[Business] = None,
        template_id: Optional[str] = None,
    ) -> InvoiceLayout:
        """
        Render an invoice

        Args:
            invoice: Invoice snapshot to render
            business: Business profile shown as sender
            template_id: Overrides the invoice's own template id

        Returns:
            InvoiceLayout of the resolved variant (unknown ids use the default)
        """
        variant = TemplateVariant.resolve(
            template_id if template_id is not None else invoice.template_id
        )
        view = build_invoice_view(invoice, business, self.default_currency)
        return self.render_view(view, variant)

    @staticmethod
    def render_view(view: InvoiceView, variant: TemplateVariant) -> InvoiceLayout:
        match variant:
            case TemplateVariant.PROFESSIONAL:
                return professional.render(view)
            case TemplateVariant.MINIMAL:
                return minimal.render(view)
            case TemplateVariant.CREATIVE:
                return creative.render(view)
        raise ValueError(f"Unhandled template variant: {variant}")
