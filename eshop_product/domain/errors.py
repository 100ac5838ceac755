# eshop_product/domain/errors.py


class ProductServiceError(Exception):
    """Base of every error the product service maps to an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DecodingError(ProductServiceError):
    """Request path, header or body could not be decoded."""

    status_code = 400


class ProductNotFound(ProductServiceError):
    status_code = 404

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} does not exist")
        self.product_id = product_id


class AuthError(ProductServiceError):
    """The auth service rejected the access token."""

    status_code = 401

    def __init__(self, message: str = "Access token rejected", status_code: int = 401):
        super().__init__(message)
        self.status_code = status_code


class AuthServiceUnavailable(ProductServiceError):
    """The auth service could not be reached or answered unexpectedly."""

    status_code = 503
