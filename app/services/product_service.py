# app/services/product_service.py
import logging
from datetime import date, datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.product import Product
from app.repositories.product_repo import ProductRepository
from app.schemas.product import (
    ProductCreate,
    ProductDeleted,
    ProductRead,
    ProductUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
SHOWCASE_SIZE = 10


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - 404 / 400 decisions
      - mapping payloads onto columns (full replace vs. partial update)
      - normalizing listing parameters (sort whitelist, tag splitting)
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Helpers -----

    @staticmethod
    def _split_tags(raw: str | None) -> list[str]:
        """
        "red, large" -> ["red", "large"]; blanks are dropped.
        """
        if not raw:
            return []
        return [t.strip() for t in raw.split(",") if t.strip()]

    @staticmethod
    def _parse_price(name: str, raw: str | None) -> float | None:
        """
        Empty -> no bound. Anything else must be a number (400 otherwise).
        """
        if raw is None or not raw.strip():
            return None
        try:
            return float(raw)
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{name} must be a number",
            )

    @staticmethod
    def _parse_count(raw: str | None, default: int) -> int:
        """
        Lenient paging value: "5" and "5.0" -> 5; empty, non-numeric or
        negative -> default.
        """
        if raw is None:
            return default
        try:
            value = int(float(raw))
        except (ValueError, OverflowError):
            return default
        return value if value >= 0 else default

    # ----- Products -----

    def list_products(
        self,
        session: Session,
        *,
        search: str | None = None,
        title: str | None = None,
        category: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
        tags: str | None = None,
        sort_by: str | None = None,
        order: str | None = None,
        limit: str | None = None,
        offset: str | None = None,
    ) -> list[Product]:
        return self.repo.list_products(
            session,
            search=search,
            title=title,
            category=category,
            min_price=self._parse_price("minPrice", min_price),
            max_price=self._parse_price("maxPrice", max_price),
            tags=self._split_tags(tags),
            sort_by=sort_by or "id",
            order="DESC" if (order or "").upper() == "DESC" else "ASC",
            limit=self._parse_count(limit, DEFAULT_PAGE_SIZE),
            offset=self._parse_count(offset, 0),
        )

    def get_product(self, session: Session, product_id: int) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            logger.debug("Product %s not found", product_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def create_product(
        self,
        session: Session,
        payload: ProductCreate,
    ) -> Product:
        """
        Insert a new product. Missing fields are NULL, JSON fields [] / {}.
        """
        product = Product(**payload.model_dump())
        product = self.repo.create(session, product)
        logger.info("Created product %s", product.id)
        return product

    def replace_product(
        self,
        session: Session,
        product_id: int,
        payload: ProductCreate,
    ) -> Product:
        """
        Full update: every column is overwritten, omitted ones included.
        """
        product = self.get_product(session, product_id)

        for key, value in payload.model_dump().items():
            setattr(product, key, value)

        product = self.repo.update(session, product)
        logger.info("Replaced product %s", product_id)
        return product

    def update_product(
        self,
        session: Session,
        product_id: int,
        payload: ProductUpdate | None,
    ) -> Product:
        """
        Partial update of a product.

        - Only keys present in the body are written.
        - An empty/absent body is rejected before the lookup.
        """
        changes = payload.model_dump(exclude_unset=True) if payload else {}
        if not changes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No fields provided for update",
            )

        product = self.get_product(session, product_id)

        for key, value in changes.items():
            setattr(product, key, value)

        product = self.repo.update(session, product)
        logger.info("Patched product %s: %s", product_id, sorted(changes))
        return product

    def delete_product(
        self,
        session: Session,
        product_id: int,
    ) -> ProductDeleted:
        """
        Delete a product and echo the deleted row back.
        """
        product = self.get_product(session, product_id)
        snapshot = ProductRead.model_validate(product)

        self.repo.delete(session, product)
        logger.info("Deleted product %s", product_id)

        return ProductDeleted(message="Product deleted", product=snapshot)

    # ----- Showcases -----

    def trending(self, session: Session) -> list[Product]:
        return self.repo.trending(
            session,
            now=datetime.now(timezone.utc),
            limit=SHOWCASE_SIZE,
        )

    def similar(self, session: Session, product_id: int) -> list[Product]:
        base = self.get_product(session, product_id)
        return self.repo.similar(session, base, limit=SHOWCASE_SIZE)

    def todays_sales(self, session: Session) -> list[Product]:
        return self.repo.todays_sales(
            session,
            today=date.today(),
            limit=SHOWCASE_SIZE,
        )
