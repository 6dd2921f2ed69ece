# app/services/cart_service.py
from sqlmodel import Session

from app.models.cart import CartItem
from app.repositories.cart_repo import CartRepository


class CartService:
    """
    Read access to cart items. Writes belong to the storefront's
    checkout flow, not this API.
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    def list_items(
        self,
        session: Session,
        user_uid: str | None = None,
    ) -> list[CartItem]:
        """
        Cart items, newest first; all users unless `user_uid` is given.
        """
        return self.cart_repo.list_items(session, user_uid=user_uid)
