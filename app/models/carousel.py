# app/models/carousel.py
from sqlmodel import SQLModel, Field


class ImageCarouselEntry(SQLModel, table=True):
    """
    Slide shown in the storefront hero carousel.
    """

    __tablename__ = "image_carousel"

    id: int | None = Field(default=None, primary_key=True)
    title: str | None = None
    image_url: str
