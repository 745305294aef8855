# storefront/api/routers/items.py
from fastapi import APIRouter, Depends

from storefront.api.deps import get_store, http_error
from storefront.domain.errors import StoreError
from storefront.domain.schemas import Item, ItemsOut
from storefront.services.store_service import StoreService

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=ItemsOut)
def list_items(store: StoreService = Depends(get_store)):
    return ItemsOut(items=store.list_items())


@router.get("/{sku}", response_model=Item)
def get_item(sku: str, store: StoreService = Depends(get_store)):
    try:
        return store.get_item(sku)
    except StoreError as e:
        raise http_error(e)
