"""
Pytest configuration and fixtures.
"""

import os
import tempfile

import pytest

# The engine is built on import, so the database has to be chosen first
_db_fd, _db_path = tempfile.mkstemp(suffix=".db")
os.environ["DATABASE_URL"] = f"sqlite:///{_db_path}"

from fastapi.testclient import TestClient  # noqa: E402

from eshop_product.api.routers.products import get_auth_client  # noqa: E402
from eshop_product.data.database import Base, SessionLocal, engine  # noqa: E402
from eshop_product.data.models.product import ProductModel  # noqa: E402
from eshop_product.domain.errors import AuthError  # noqa: E402
from eshop_product.main import app  # noqa: E402

VALID_TOKEN = "valid-token"

SEED_PRODUCTS = [
    (1, "Keyboard", 1),
    (2, "Mouse", 1),
    (42, "Shoes", 3),
]


class FakeAuthClient:
    """Accepts VALID_TOKEN only, or raises ``error`` for every call when set."""

    def __init__(self):
        self.error = None
        self.calls = []

    def validate(self, access_token):
        self.calls.append(access_token)
        if self.error is not None:
            raise self.error
        if access_token != VALID_TOKEN:
            raise AuthError("Access token rejected with 401")


def products_in_store():
    """Snapshot of the products table as {id: (name, type)}."""
    with SessionLocal() as db:
        return {p.id: (p.name, p.type) for p in db.query(ProductModel).all()}


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db, db.begin():
        db.add_all([ProductModel(id=i, name=name, type=type_) for i, name, type_ in SEED_PRODUCTS])
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def auth_client():
    return FakeAuthClient()


@pytest.fixture
def client(auth_client):
    app.dependency_overrides[get_auth_client] = lambda: auth_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    os.close(_db_fd)
    os.unlink(_db_path)
