# app/schemas/catalog.py
from sqlmodel import SQLModel


class CategoryRead(SQLModel):
    id: int
    slug: str
    name: str
    url: str | None = None


class ImageCarouselRead(SQLModel):
    id: int
    title: str | None = None
    image_url: str
