# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, Query

from storefront.api.deps import get_store, http_error
from storefront.domain.errors import StoreError
from storefront.domain.schemas import ConfirmPurchaseIn, Order
from storefront.services.store_service import StoreService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/checkout", response_model=Order, status_code=201)
def checkout(
    user_id: str = Query(..., min_length=1),
    store: StoreService = Depends(get_store),
):
    """
    Zamienia koszyk w zamowienie PENDING (stan zdjety, koszyk pusty).
    """
    try:
        return store.checkout(user_id)
    except StoreError as e:
        raise http_error(e)


@router.post("/confirm", response_model=Order)
def confirm_purchase(
    payload: ConfirmPurchaseIn,
    user_id: str = Query(..., min_length=1),
    store: StoreService = Depends(get_store),
):
    """
    Platnosc za zamowienie. Bez order_id robi checkout i platnosc naraz.
    402 mozna ponowic z tym samym order_id, 409 jest ostateczne.
    """
    try:
        return store.confirm_purchase(user_id, payload.order_id, payload.card_details)
    except StoreError as e:
        raise http_error(e)


@router.get("", response_model=List[Order])
def order_history(
    user_id: str = Query(..., min_length=1),
    store: StoreService = Depends(get_store),
):
    return store.get_order_history(user_id)


@router.get("/{order_id}", response_model=Order)
def get_order(
    order_id: str,
    user_id: str = Query(..., min_length=1),
    store: StoreService = Depends(get_store),
):
    try:
        return store.get_order(user_id, order_id)
    except StoreError as e:
        raise http_error(e)
