# eshop_product/api/routers/products.py
from fastapi import APIRouter, Depends, Header, Path
from sqlalchemy.orm import Session

from eshop_product.api.errors import FAIL_RESPONSE
from eshop_product.data.database import get_db
from eshop_product.domain.schemas import (
    ProductCreated,
    ProductList,
    ProductOut,
    ProductPostBody,
    ProductPutBody,
    SuccessResult,
)
from eshop_product.services.auth_client import ACCESS_TOKEN_HEADER, AuthClient
from eshop_product.services.product_service import ProductService

router = APIRouter(prefix="/product", tags=["product"])


def get_auth_client() -> AuthClient:
    return AuthClient()


def get_service(db: Session = Depends(get_db), auth_client: AuthClient = Depends(get_auth_client)) -> ProductService:
    return ProductService(db=db, auth_client=auth_client)


def edit_product(
    body: ProductPutBody,
    product_id: int = Path(..., gt=0, description="ID of the product."),
    access_token: str = Header(..., alias=ACCESS_TOKEN_HEADER, description="Auth token."),
    svc: ProductService = Depends(get_service),
) -> SuccessResult:
    """
    Edit a product.

    The product is edited only if a product with the same ID exists.
    """
    return svc.edit_product(access_token, product_id, body)


def create_product(
    body: ProductPostBody,
    access_token: str = Header(..., alias=ACCESS_TOKEN_HEADER, description="Auth token."),
    svc: ProductService = Depends(get_service),
) -> ProductCreated:
    return svc.create_product(access_token, body)


def delete_product(
    product_id: int = Path(..., gt=0, description="ID of the product."),
    access_token: str = Header(..., alias=ACCESS_TOKEN_HEADER, description="Auth token."),
    svc: ProductService = Depends(get_service),
) -> SuccessResult:
    return svc.delete_product(access_token, product_id)


def get_product(
    product_id: int = Path(..., gt=0, description="ID of the product."),
    svc: ProductService = Depends(get_service),
) -> ProductOut:
    return svc.get_product(product_id)


def list_products(svc: ProductService = Depends(get_service)) -> ProductList:
    return svc.list_products()


_AUTH_FAILURES = {401: FAIL_RESPONSE, 403: FAIL_RESPONSE, 503: FAIL_RESPONSE}

router.add_api_route(
    "",
    list_products,
    methods=["GET"],
    response_model=ProductList,
    summary="List products.",
)
router.add_api_route(
    "",
    create_product,
    methods=["POST"],
    response_model=ProductCreated,
    status_code=201,
    summary="Create a product.",
    responses={400: FAIL_RESPONSE, **_AUTH_FAILURES},
)
router.add_api_route(
    "/{product_id}",
    get_product,
    methods=["GET"],
    response_model=ProductOut,
    summary="Get a product.",
    responses={404: FAIL_RESPONSE},
)
router.add_api_route(
    "/{product_id}",
    edit_product,
    methods=["PUT"],
    response_model=SuccessResult,
    summary="Edit a product.",
    responses={400: FAIL_RESPONSE, 404: FAIL_RESPONSE, **_AUTH_FAILURES},
)
router.add_api_route(
    "/{product_id}",
    delete_product,
    methods=["DELETE"],
    response_model=SuccessResult,
    summary="Delete a product.",
    responses={404: FAIL_RESPONSE, **_AUTH_FAILURES},
)
