# app/models/cart.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class CartItem(SQLModel, table=True):
    """
    Shopping cart entry, keyed by the external auth user's uid.
    """

    __tablename__ = "cart_items"

    id: int | None = Field(default=None, primary_key=True)

    user_uid: str = Field(
        index=True,
        description="Auth provider user id",
    )

    product_id: int = Field(
        foreign_key="products.id",
        ondelete="CASCADE",
        index=True,
    )

    quantity: int = Field(
        default=1,
        gt=0,
        description="Must be >= 1",
    )

    added_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
    )
