"""
Unit tests for ProductService ordering and transaction handling.
"""

from unittest.mock import MagicMock

import pytest

from conftest import FakeAuthClient, VALID_TOKEN, products_in_store
from eshop_product.data.database import SessionLocal
from eshop_product.domain.errors import AuthError, AuthServiceUnavailable, ProductNotFound
from eshop_product.domain.schemas import ProductPutBody
from eshop_product.services.product_service import ProductService

SOCKS = ProductPutBody(name="Socks", type=5)


@pytest.mark.parametrize("error", [AuthError("rejected"), AuthServiceUnavailable("down")])
def test_auth_failure_never_touches_the_store(error):
    db = MagicMock()
    auth_client = FakeAuthClient()
    auth_client.error = error
    svc = ProductService(db=db, auth_client=auth_client)

    with pytest.raises(type(error)):
        svc.edit_product(VALID_TOKEN, 42, SOCKS)

    db.begin.assert_not_called()
    db.execute.assert_not_called()
    db.get.assert_not_called()


def test_edit_product_updates_one_row():
    with SessionLocal() as db:
        result = ProductService(db=db, auth_client=FakeAuthClient()).edit_product(VALID_TOKEN, 42, SOCKS)

    assert result.ok is True
    assert products_in_store() == {1: ("Keyboard", 1), 2: ("Mouse", 1), 42: ("Socks", 5)}


def test_edit_missing_product_raises_not_found():
    with SessionLocal() as db:
        svc = ProductService(db=db, auth_client=FakeAuthClient())
        with pytest.raises(ProductNotFound) as exc_info:
            svc.edit_product(VALID_TOKEN, 999, SOCKS)

    assert exc_info.value.product_id == 999
    assert exc_info.value.status_code == 404
    assert 999 not in products_in_store()


def test_session_is_reusable_after_a_failed_edit():
    with SessionLocal() as db:
        svc = ProductService(db=db, auth_client=FakeAuthClient())
        with pytest.raises(ProductNotFound):
            svc.edit_product(VALID_TOKEN, 999, SOCKS)
        svc.edit_product(VALID_TOKEN, 1, SOCKS)

    assert products_in_store()[1] == ("Socks", 5)
