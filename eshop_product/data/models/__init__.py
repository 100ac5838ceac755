# import every model so SQLAlchemy registers it in Base.metadata

from eshop_product.data.models.product import ProductModel

__all__ = ["ProductModel"]
