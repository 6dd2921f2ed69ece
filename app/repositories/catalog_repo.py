# app/repositories/catalog_repo.py
from sqlmodel import Session, select

from app.models.carousel import ImageCarouselEntry
from app.models.category import Category


class CatalogRepository:
    """
    Read-only queries for storefront reference data:
    categories and the image carousel.
    """

    # ----- Categories -----

    def list_categories(self, session: Session) -> list[Category]:
        stmt = select(Category).order_by(Category.id)
        return list(session.exec(stmt).all())

    def get_category(self, session: Session, category_id: int) -> Category | None:
        return session.get(Category, category_id)

    # ----- Image carousel -----

    def list_carousel(self, session: Session) -> list[ImageCarouselEntry]:
        stmt = select(ImageCarouselEntry).order_by(ImageCarouselEntry.id)
        return list(session.exec(stmt).all())
