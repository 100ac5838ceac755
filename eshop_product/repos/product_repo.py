# eshop_product/repos/product_repo.py
from typing import List

from sqlalchemy import delete, exists, select, update
from sqlalchemy.orm import Session

from eshop_product.data.models.product import ProductModel
from eshop_product.domain.schemas import ProductWithoutId


class ProductRepo:
    """
    Product Store.

    The session handed in is expected to be inside a transaction opened by the
    caller; the repo never commits on its own.
    """

    def __init__(self, db: Session):
        self.db = db

    def exists(self, product_id: int) -> bool:
        return self.db.execute(select(exists().where(ProductModel.id == product_id))).scalar()

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self) -> List[ProductModel]:
        return list(self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars().all())

    def create_product(self, product: ProductWithoutId) -> ProductModel:
        model = ProductModel(name=product.name, type=product.type)
        self.db.add(model)
        self.db.flush()
        return model

    def update_product(self, product_id: int, product: ProductWithoutId) -> int:
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(name=product.name, type=product.type)
        )
        return result.rowcount

    def delete_product(self, product_id: int) -> int:
        result = self.db.execute(delete(ProductModel).where(ProductModel.id == product_id))
        return result.rowcount
