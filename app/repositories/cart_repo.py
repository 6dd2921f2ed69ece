# app/repositories/cart_repo.py
from sqlmodel import Session, select
from app.models.cart import CartItem


class CartRepository:

    # Newest first, optionally for one user
    def list_items(self, session: Session, user_uid: str | None = None) -> list[CartItem]:
        stmt = select(CartItem)
        if user_uid:
            stmt = stmt.where(CartItem.user_uid == user_uid)
        stmt = stmt.order_by(CartItem.added_at.desc(), CartItem.id.desc())
        return list(session.exec(stmt).all())
