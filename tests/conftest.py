import pytest
from fastapi.testclient import TestClient

from product_api.app.core.config import Settings
from product_api.app.main import create_app
from product_api.app.services.product_repository import ProductRepository, seed_products


@pytest.fixture()
def repository():
    """Repository holding the two seed products (ids 1 and 2)."""
    return ProductRepository(seed_products())


@pytest.fixture()
def app(repository):
    return create_app(settings=Settings(), repository=repository)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
