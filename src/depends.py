import logging
from typing import Dict, Optional
from config import ApplicationConfig
from src.adapter.repositories.json_entity_store import JsonFileEntityStore
from src.adapter.services.html_export_service import HtmlDocumentExportService
from src.adapter.services.pdf_service import ReportLabPdfService
from src.app.rendering.renderer import TemplateRenderer
from src.app.repositories.entity_repository import (
    BusinessProfileRepository,
    ClientRepository,
    InvoiceRepository,
    ProductRepository,
)
from src.app.repositories.entity_store import EntityStore
from src.app.services.document_export_service import DocumentExportService, DocumentFormat
from src.app.use_cases.invoicing import CreateInvoice


def configure_logging(config=ApplicationConfig):
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def get_entity_store(config=ApplicationConfig) -> EntityStore:
    return JsonFileEntityStore(config.DATA_DIR)


def get_invoice_repository(store: Optional[EntityStore] = None) -> InvoiceRepository:
    return InvoiceRepository(store or get_entity_store())


def get_client_repository(store: Optional[EntityStore] = None) -> ClientRepository:
    return ClientRepository(store or get_entity_store())


def get_product_repository(store: Optional[EntityStore] = None) -> ProductRepository:
    return ProductRepository(store or get_entity_store())


def get_business_repository(store: Optional[EntityStore] = None) -> BusinessProfileRepository:
    return BusinessProfileRepository(store or get_entity_store())


def get_template_renderer(config=ApplicationConfig) -> TemplateRenderer:
    return TemplateRenderer(default_currency=config.DEFAULT_CURRENCY)


def get_document_exporters(config=ApplicationConfig) -> Dict[DocumentFormat, DocumentExportService]:
    return {
        DocumentFormat.HTML: HtmlDocumentExportService(default_currency=config.DEFAULT_CURRENCY),
        DocumentFormat.PDF: ReportLabPdfService(default_currency=config.DEFAULT_CURRENCY),
    }


def get_create_invoice(store: EntityStore, config=ApplicationConfig) -> CreateInvoice:
    return CreateInvoice(
        InvoiceRepository(store),
        ClientRepository(store),
        number_prefix=config.INVOICE_NUMBER_PREFIX,
        due_days=config.DEFAULT_DUE_DAYS,
        default_terms=config.DEFAULT_TERMS,
        default_template=config.DEFAULT_TEMPLATE,
    )
