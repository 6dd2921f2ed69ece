# app/schemas/product.py
from datetime import date
from typing import Any

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class ProductBase(SQLModel):
    """
    Shared product fields. Everything is nullable: the catalog is
    imported from third-party feeds with gaps.
    """

    title: str | None = None
    description: str | None = None
    category: str | None = None
    price: float | None = None
    discountPercentage: float | None = None
    rating: float | None = None
    stock: int | None = None
    brand: str | None = None
    sku: str | None = None
    weight: float | None = None
    availabilityStatus: str | None = None
    minimumOrderQuantity: int | None = None
    thumbnail: str | None = None

    tags: list[str] | None = None
    dimensions: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None
    images: list[str] | None = None

    isOnSale: bool | None = None
    saleStartDate: date | None = None
    saleEndDate: date | None = None

    @field_validator("isOnSale", mode="before")
    @classmethod
    def null_is_not_on_sale(cls, v: Any) -> Any:
        return False if v is None else v


class ProductCreate(ProductBase):
    """
    Payload for POST /product and PUT /product/{id}.

    - Missing scalar fields are stored as NULL.
    - Missing (or null) JSON fields become [] / {}.
    - Unknown keys, including `id`, are ignored so a fetched product
      can be sent back as-is.
    """

    model_config = ConfigDict(extra="ignore")

    tags: list[str] = Field(default_factory=list)
    dimensions: dict[str, Any] = Field(default_factory=dict)
    meta: dict[str, Any] = Field(default_factory=dict)
    images: list[str] = Field(default_factory=list)

    isOnSale: bool = False

    @field_validator("tags", "images", mode="before")
    @classmethod
    def default_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("dimensions", "meta", mode="before")
    @classmethod
    def default_object(cls, v: Any) -> Any:
        return {} if v is None else v


class ProductUpdate(ProductBase):
    """
    Partial update payload for PATCH /product/{id}.
    Only keys present in the body are written; unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    # NOT NULL column: null is stored as False
    isOnSale: bool = False


class ProductRead(ProductBase):
    """
    Product representation for clients, JSON columns decoded.
    """

    id: int


class ProductDeleted(SQLModel):
    """
    Response body for DELETE /product/{id}.
    """

    message: str
    product: ProductRead
