# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, Query

from storefront.api.deps import get_store, http_error
from storefront.domain.errors import StoreError
from storefront.domain.schemas import Cart, CartItemIn, CartTotalOut
from storefront.services.store_service import StoreService

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=Cart)
def get_cart(
    user_id: str = Query(..., min_length=1),
    store: StoreService = Depends(get_store),
):
    return store.get_cart(user_id)


@router.get("/total", response_model=CartTotalOut)
def get_cart_total(
    user_id: str = Query(..., min_length=1),
    store: StoreService = Depends(get_store),
):
    return CartTotalOut(total_price=store.get_cart_total_price(user_id))


@router.post("/items", response_model=Cart)
def add_item(
    payload: CartItemIn,
    user_id: str = Query(..., min_length=1),
    store: StoreService = Depends(get_store),
):
    try:
        return store.add_to_cart(user_id, payload.sku, payload.quantity)
    except StoreError as e:
        raise http_error(e)


@router.post("/items/remove", response_model=Cart)
def remove_item(
    payload: CartItemIn,
    user_id: str = Query(..., min_length=1),
    store: StoreService = Depends(get_store),
):
    try:
        return store.remove_from_cart(user_id, payload.sku, payload.quantity)
    except StoreError as e:
        raise http_error(e)
