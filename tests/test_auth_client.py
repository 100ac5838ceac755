"""
Unit tests for the auth service client.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from eshop_product.domain.errors import AuthError, AuthServiceUnavailable
from eshop_product.services.auth_client import AuthClient


def _response(status_code):
    return Mock(status_code=status_code, ok=200 <= status_code < 400)


@pytest.fixture
def auth_client():
    return AuthClient(base_url="http://auth.test/", timeout=1.5)


@patch("eshop_product.services.auth_client.requests.get")
def test_valid_token(mock_get, auth_client):
    mock_get.return_value = _response(200)

    assert auth_client.validate("token") is None
    mock_get.assert_called_once_with(
        "http://auth.test/v1/validate",
        headers={"X-Access-Token": "token"},
        timeout=1.5,
    )


@pytest.mark.parametrize("status_code", [401, 403])
@patch("eshop_product.services.auth_client.requests.get")
def test_rejected_token(mock_get, status_code, auth_client):
    mock_get.return_value = _response(status_code)

    with pytest.raises(AuthError) as exc_info:
        auth_client.validate("token")

    assert exc_info.value.status_code == status_code


@patch("eshop_product.services.auth_client.requests.get")
def test_empty_token_is_rejected_without_a_call(mock_get, auth_client):
    with pytest.raises(AuthError):
        auth_client.validate("")

    mock_get.assert_not_called()


@patch("eshop_product.services.auth_client.requests.get")
def test_server_error_is_unavailable(mock_get, auth_client):
    mock_get.return_value = _response(500)

    with pytest.raises(AuthServiceUnavailable):
        auth_client.validate("token")


@pytest.mark.parametrize("error", [requests.ConnectionError("refused"), requests.Timeout("slow")])
@patch("eshop_product.services.auth_client.requests.get")
def test_unreachable_is_unavailable_and_not_retried(mock_get, error, auth_client):
    mock_get.side_effect = error

    with pytest.raises(AuthServiceUnavailable):
        auth_client.validate("token")

    assert mock_get.call_count == 1


def test_defaults_come_from_settings():
    from eshop_product.utils import settings

    client = AuthClient()

    assert client.base_url == settings.AUTH_SERVICE_URL.rstrip("/")
    assert client.timeout == settings.AUTH_TIMEOUT_SECONDS
