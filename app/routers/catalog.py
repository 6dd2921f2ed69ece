# app/routers/catalog.py
from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from app.database import get_session
from app.repositories.catalog_repo import CatalogRepository
from app.schemas.catalog import CategoryRead, ImageCarouselRead
from app.services.catalog_service import CatalogService

router = APIRouter(tags=["Catalog"])

repo = CatalogRepository()
service = CatalogService(repo)


@router.get("/categories", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    return service.list_categories(session)


@router.get("/category/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: int = Path(gt=0),
    session: Session = Depends(get_session),
):
    return service.get_category(session, category_id)


@router.get("/imagecarousel", response_model=list[ImageCarouselRead])
def list_image_carousel(session: Session = Depends(get_session)):
    """
    Hero carousel slides, in display order.
    """
    return service.list_carousel(session)
