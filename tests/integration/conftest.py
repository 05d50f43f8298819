import pytest
from src.adapter.repositories.json_entity_store import JsonFileEntityStore
from src.app.repositories.entity_repository import (
    BusinessProfileRepository,
    ClientRepository,
    InvoiceRepository,
    ProductRepository,
)


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def entity_store(data_dir):
    """JSON file store on a fresh temporary directory"""
    return JsonFileEntityStore(data_dir)


@pytest.fixture
def invoice_repo(entity_store):
    return InvoiceRepository(entity_store)


@pytest.fixture
def client_repo(entity_store):
    return ClientRepository(entity_store)


@pytest.fixture
def product_repo(entity_store):
    return ProductRepository(entity_store)


@pytest.fixture
def business_repo(entity_store):
    return BusinessProfileRepository(entity_store)
