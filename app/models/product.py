# app/models/product.py
from datetime import date
from typing import Any

from sqlalchemy import JSON, Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import SQLModel, Field

# Native JSONB on Postgres (supports @> containment), plain JSON elsewhere.
JSONType = JSON().with_variant(JSONB(), "postgresql")

JSON_FIELDS = ("tags", "dimensions", "meta", "images")


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Columns mirror the public JSON shape 1:1 (camelCase names), so rows
    serialize straight to the API response.

    JSON columns:
      - tags: list[str]
      - dimensions: {"width", "height", "depth"}
      - meta: {"createdAt", "updatedAt", "barcode", "qrCode"}
      - images: list[str]
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)

    title: str | None = Field(default=None, index=True)
    description: str | None = None
    category: str | None = Field(default=None, index=True)
    price: float | None = Field(default=None, index=True)
    discountPercentage: float | None = None
    rating: float | None = None
    stock: int | None = None
    brand: str | None = Field(default=None, index=True)
    sku: str | None = None
    weight: float | None = None
    availabilityStatus: str | None = None
    minimumOrderQuantity: int | None = None
    thumbnail: str | None = None

    tags: list[str] | None = Field(default_factory=list, sa_column=Column(JSONType))
    dimensions: dict[str, Any] | None = Field(default_factory=dict, sa_column=Column(JSONType))
    meta: dict[str, Any] | None = Field(default_factory=dict, sa_column=Column(JSONType))
    images: list[str] | None = Field(default_factory=list, sa_column=Column(JSONType))

    # Today's sales window (inclusive on both ends)
    isOnSale: bool = Field(default=False, index=True)
    saleStartDate: date | None = None
    saleEndDate: date | None = None
