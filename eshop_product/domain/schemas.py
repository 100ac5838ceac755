# eshop_product/domain/schemas.py
from typing import List

from pydantic import BaseModel, Field, ConfigDict


class ProductWithoutId(BaseModel):
    """Mutable part of a product, shared by create and edit bodies."""

    name: str = Field(..., min_length=1, description="Product name")
    # strict: JSON true or "5" must not decode as a category code
    type: int = Field(..., strict=True, description="Category code")


class ProductPostBody(ProductWithoutId):
    """Create product request body."""

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Socks", "type": 5}})


class ProductPutBody(ProductWithoutId):
    """Edit product request body. Both fields are required."""

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Socks", "type": 5}})


class SuccessResult(BaseModel):
    ok: bool

    @classmethod
    def success(cls) -> "SuccessResult":
        return cls(ok=True)

    @classmethod
    def fail(cls) -> "SuccessResult":
        return cls(ok=False)


class ProductCreated(SuccessResult):
    id: int


class ProductOut(BaseModel):
    id: int
    name: str
    type: int

    model_config = ConfigDict(from_attributes=True)


class ProductList(BaseModel):
    products: List[ProductOut]
