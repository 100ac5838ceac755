# eshop_product/services/auth_client.py
import requests
from requests import RequestException

from eshop_product.domain.errors import AuthError, AuthServiceUnavailable
from eshop_product.utils.settings import AUTH_SERVICE_URL, AUTH_TIMEOUT_SECONDS
from eshop_product.utils.logging import get_logger

logger = get_logger(__name__)

ACCESS_TOKEN_HEADER = "X-Access-Token"


class AuthClient:
    """
    Auth Validator backed by the auth service.

    A single synchronous call per validation, no retries.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or AUTH_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else AUTH_TIMEOUT_SECONDS

    def validate(self, access_token: str) -> None:
        if not access_token:
            raise AuthError("Empty access token")

        url = f"{self.base_url}/v1/validate"
        logger.info(f"AuthClient GET {url}")

        try:
            resp = requests.get(url, headers={ACCESS_TOKEN_HEADER: access_token}, timeout=self.timeout)
        except RequestException as e:
            logger.error(f"Auth service unreachable: {e}")
            raise AuthServiceUnavailable(f"Auth service unreachable: {e}") from e

        if resp.status_code in (401, 403):
            logger.warning(f"Access token rejected with {resp.status_code}")
            raise AuthError(f"Access token rejected with {resp.status_code}", status_code=resp.status_code)

        if not resp.ok:
            logger.error(f"Auth service answered {resp.status_code}")
            raise AuthServiceUnavailable(f"Auth service answered {resp.status_code}")
