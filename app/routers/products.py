# app/routers/products.py
from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlmodel import Session

from app.database import get_session
from app.repositories.product_repo import ProductRepository
from app.schemas.product import (
    ProductCreate,
    ProductDeleted,
    ProductRead,
    ProductUpdate,
)
from app.services.product_service import DEFAULT_PAGE_SIZE, ProductService

router = APIRouter(tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Listing & lookup --------


@router.get("/products", response_model=list[ProductRead])
def list_products(
    session: Session = Depends(get_session),
    search: str | None = None,
    title: str | None = None,
    category: str | None = None,
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    tags: str | None = Query(default=None, description="Comma-separated, all must match"),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    order: str | None = None,
    limit: str | None = Query(default=None, description=f"Default {DEFAULT_PAGE_SIZE}"),
    offset: str | None = Query(default=None, description="Default 0"),
):
    """
    List products.

    - `search` matches title, brand or description (case-insensitive).
    - `sortBy` in price|rating|title|stock|id (default id), `order` ASC|DESC.
    - Empty `minPrice`/`maxPrice` are ignored; a `limit`/`offset` that is
      not a number falls back to the default.
    """
    return service.list_products(
        session,
        search=search,
        title=title,
        category=category,
        min_price=min_price,
        max_price=max_price,
        tags=tags,
        sort_by=sort_by,
        order=order,
        limit=limit,
        offset=offset,
    )


@router.get("/product/{product_id}", response_model=ProductRead)
def get_product(
    product_id: int = Path(gt=0),
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.
    """
    return service.get_product(session, product_id)


# -------- Writes --------


@router.post(
    "/product",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product. Missing JSON fields default to [] / {}.
    """
    return service.create_product(session, payload)


@router.put("/product/{product_id}", response_model=ProductRead)
def replace_product(
    payload: ProductCreate,
    product_id: int = Path(gt=0),
    session: Session = Depends(get_session),
):
    """
    Replace every column of an existing product.
    """
    return service.replace_product(session, product_id, payload)


@router.patch("/product/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int = Path(gt=0),
    payload: ProductUpdate | None = Body(default=None),
    session: Session = Depends(get_session),
):
    """
    Update only the fields present in the body.
    """
    return service.update_product(session, product_id, payload)


@router.delete("/product/{product_id}", response_model=ProductDeleted)
def delete_product(
    product_id: int = Path(gt=0),
    session: Session = Depends(get_session),
):
    """
    Delete a product and return it.
    """
    return service.delete_product(session, product_id)


# -------- Showcases --------


@router.get("/trending", response_model=list[ProductRead])
def trending_products(session: Session = Depends(get_session)):
    """
    Top 10 products by trending score (rating, discount, scarcity, recency).
    """
    return service.trending(session)


@router.get("/similar/{product_id}", response_model=list[ProductRead])
def similar_products(
    product_id: int = Path(gt=0),
    session: Session = Depends(get_session),
):
    """
    Up to 10 products in the same category sharing the first tag.
    """
    return service.similar(session, product_id)


@router.get("/todays-sales", response_model=list[ProductRead])
def todays_sales(session: Session = Depends(get_session)):
    """
    Up to 10 products on sale today, biggest discount first.
    """
    return service.todays_sales(session)
