# eshop_product/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from eshop_product.domain.errors import DecodingError, ProductServiceError
from eshop_product.domain.schemas import SuccessResult
from eshop_product.utils.logging import get_logger

logger = get_logger(__name__)

FAIL_RESPONSE = {"description": "Request failed", "model": SuccessResult}


def _fail(status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=SuccessResult.fail().model_dump())


async def product_service_error_handler(request: Request, exc: ProductServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _fail(exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await product_service_error_handler(request, DecodingError(str(exc.errors())))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductServiceError, product_service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
