# storefront/api/deps.py
from fastapi import HTTPException, Request

from storefront.domain.errors import (
    AlreadyConfirmed,
    EmptyCart,
    InsufficientStock,
    InvalidQuantity,
    NotFound,
    PaymentFailed,
    StoreError,
)
from storefront.services.store_service import StoreService

_STATUS = [
    (NotFound, 404),
    (InsufficientStock, 409),
    (AlreadyConfirmed, 409),
    (EmptyCart, 400),
    (PaymentFailed, 402),
    (InvalidQuantity, 422),
]


def get_store(request: Request) -> StoreService:
    return request.app.state.store


def http_error(e: StoreError) -> HTTPException:
    status = next((code for cls, code in _STATUS if isinstance(e, cls)), 400)
    return HTTPException(status_code=status, detail=e.to_dict())
