# app/routers/cart.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.schemas.cart import CartItemRead
from app.services.cart_service import CartService

router = APIRouter(tags=["Cart"])

cart_repo = CartRepository()
service = CartService(cart_repo)


@router.get("/cart_items", response_model=list[CartItemRead])
def list_cart_items(
    user_uid: str | None = None,
    session: Session = Depends(get_session),
):
    """
    List cart items, newest first.

    Query params (optional):
      - user_uid: only this user's items
    """
    return service.list_items(session, user_uid=user_uid)
