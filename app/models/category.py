# app/models/category.py
from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """
    Product category. Products reference it by `slug` via Product.category.
    """

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)
    slug: str = Field(unique=True, index=True)
    name: str
    url: str | None = None
