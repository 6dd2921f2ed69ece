# app/services/catalog_service.py
from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.carousel import ImageCarouselEntry
from app.models.category import Category
from app.repositories.catalog_repo import CatalogRepository


class CatalogService:
    """
    Read-only storefront reference data (categories, image carousel).
    """

    def __init__(self, repo: CatalogRepository):
        self.repo = repo

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list_categories(session)

    def get_category(self, session: Session, category_id: int) -> Category:
        category = self.repo.get_category(session, category_id)
        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )
        return category

    def list_carousel(self, session: Session) -> list[ImageCarouselEntry]:
        return self.repo.list_carousel(session)
