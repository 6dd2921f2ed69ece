# app/repositories/product_repo.py
from datetime import date, datetime

from sqlalchemy import case, func, or_
from sqlmodel import Session, select

from app.core.sql import days_since, json_array_contains
from app.models.product import Product

# Whitelist for ORDER BY; anything else falls back to id.
SORTABLE_COLUMNS = {
    "price": Product.price,
    "rating": Product.rating,
    "title": Product.title,
    "stock": Product.stock,
    "id": Product.id,
}


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries), one statement each.
    - No FastAPI, no business logic.
    """

    # ----- CRUD -----

    def get_by_id(self, session: Session, product_id: int) -> Product | None:
        return session.get(Product, product_id)

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def update(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def delete(self, session: Session, product: Product) -> None:
        session.delete(product)
        session.commit()

    # ----- Queries -----

    def list_products(
        self,
        session: Session,
        *,
        search: str | None = None,
        title: str | None = None,
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        tags: list[str] | None = None,
        sort_by: str = "id",
        order: str = "ASC",
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Product]:
        """
        Filtered, sorted, paginated product listing. All filters are ANDed.

        - search: case-insensitive substring of title OR brand OR description
        - title: case-insensitive exact match
        - tags: every tag must be present in the product's tags array
        """
        stmt = select(Product)

        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    Product.title.ilike(pattern),
                    Product.brand.ilike(pattern),
                    Product.description.ilike(pattern),
                )
            )

        if title:
            stmt = stmt.where(func.lower(Product.title) == title.lower())

        if category:
            stmt = stmt.where(Product.category == category)

        if min_price is not None:
            stmt = stmt.where(Product.price >= min_price)

        if max_price is not None:
            stmt = stmt.where(Product.price <= max_price)

        for tag in tags or []:
            stmt = stmt.where(json_array_contains(Product.tags, tag))

        column = SORTABLE_COLUMNS.get(sort_by, Product.id)
        direction = column.desc() if order == "DESC" else column.asc()
        stmt = stmt.order_by(direction, Product.id).offset(offset)

        if limit is not None:
            stmt = stmt.limit(limit)

        return list(session.exec(stmt).all())

    def trending(
        self,
        session: Session,
        now: datetime,
        limit: int = 10,
    ) -> list[Product]:
        """
        Top products by trending score:

            rating*2 + discountPercentage*0.5
            + (stock == 0 ? 0 : 100/stock)
            + (meta.updatedAt ? 30/(days since updatedAt + 1) : 0)

        NULL numeric columns count as 0. An updatedAt that is not a
        timestamp, or lies in the future, earns no recency bonus.
        """
        days = days_since(Product.meta["updatedAt"].as_string(), now)

        score = (
            func.coalesce(Product.rating, 0) * 2
            + func.coalesce(Product.discountPercentage, 0) * 0.5
            + case(
                (func.coalesce(Product.stock, 0) == 0, 0.0),
                else_=100.0 / Product.stock,
            )
            + case(
                (days >= 0, 30.0 / (days + 1)),
                else_=0.0,
            )
        )

        stmt = (
            select(Product)
            .order_by(score.desc(), Product.id)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def similar(
        self,
        session: Session,
        base: Product,
        limit: int = 10,
    ) -> list[Product]:
        """
        Other products in the base product's category, narrowed to those
        sharing its first tag when it has one. A product without a
        category has no similar products.
        """
        if base.category is None:
            return []

        stmt = select(Product).where(
            Product.category == base.category,
            Product.id != base.id,
        )
        if base.tags:
            stmt = stmt.where(json_array_contains(Product.tags, base.tags[0]))

        stmt = stmt.order_by(Product.id).limit(limit)
        return list(session.exec(stmt).all())

    def todays_sales(
        self,
        session: Session,
        today: date,
        limit: int = 10,
    ) -> list[Product]:
        """
        On-sale products whose [saleStartDate, saleEndDate] covers `today`,
        biggest discount first.
        """
        stmt = (
            select(Product)
            .where(
                Product.isOnSale == True,  # noqa: E712
                Product.saleStartDate <= today,
                Product.saleEndDate >= today,
            )
            .order_by(Product.discountPercentage.desc().nulls_last(), Product.id)
            .limit(limit)
        )
        return list(session.exec(stmt).all())
