# eshop_product/services/product_service.py
from sqlalchemy.orm import Session

from eshop_product.domain.errors import ProductNotFound
from eshop_product.domain.schemas import (
    ProductCreated,
    ProductList,
    ProductOut,
    ProductPostBody,
    ProductPutBody,
    SuccessResult,
)
from eshop_product.repos.product_repo import ProductRepo
from eshop_product.services.auth_client import AuthClient
from eshop_product.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Use cases of the product domain.

    Mutating commands validate the access token first and then run in a single
    transaction; any exception raised inside it rolls the transaction back.
    """

    def __init__(self, db: Session, auth_client: AuthClient):
        self.db = db
        self.repo = ProductRepo(db)
        self.auth_client = auth_client

    # =====================================================
    # QUERY
    # =====================================================
    def get_product(self, product_id: int) -> ProductOut:
        product = self.repo.get_product(product_id)
        if not product:
            raise ProductNotFound(product_id)
        return ProductOut.model_validate(product)

    def list_products(self) -> ProductList:
        return ProductList(products=[ProductOut.model_validate(p) for p in self.repo.list_products()])

    # =====================================================
    # COMMANDS
    # =====================================================
    def edit_product(self, access_token: str, product_id: int, body: ProductPutBody) -> SuccessResult:
        """
        Use Case: edit an existing product.

        1. Validate the access token (no store access on failure)
        2. Check the product exists, 404 otherwise
        3. Overwrite name and type
        """
        self.auth_client.validate(access_token)

        with self.db.begin():
            if not self.repo.exists(product_id):
                raise ProductNotFound(product_id)
            self.repo.update_product(product_id, body)

        logger.info(f"Product {product_id} edited")
        return SuccessResult.success()

    def create_product(self, access_token: str, body: ProductPostBody) -> ProductCreated:
        self.auth_client.validate(access_token)

        with self.db.begin():
            created = self.repo.create_product(body)
            product_id = created.id

        logger.info(f"Product {product_id} created")
        return ProductCreated(ok=True, id=product_id)

    def delete_product(self, access_token: str, product_id: int) -> SuccessResult:
        self.auth_client.validate(access_token)

        with self.db.begin():
            if not self.repo.exists(product_id):
                raise ProductNotFound(product_id)
            self.repo.delete_product(product_id)

        logger.info(f"Product {product_id} deleted")
        return SuccessResult.success()
