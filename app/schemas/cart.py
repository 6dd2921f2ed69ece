# app/schemas/cart.py
from datetime import datetime

from sqlmodel import SQLModel


class CartItemRead(SQLModel):
    """
    Read model for a single cart item.
    """

    id: int
    user_uid: str
    product_id: int
    quantity: int
    added_at: datetime
