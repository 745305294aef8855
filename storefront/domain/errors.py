# storefront/domain/errors.py
"""
Typed failures of the order-fulfillment core.

Every error carries a ``kind`` and an identifying ``payload`` (sku, order id),
never a user-facing message. Callers decide how to render them.
"""
from typing import Any, Dict


class StoreError(Exception):
    kind = "store_error"

    def payload(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, **self.payload()}


class InvalidQuantity(StoreError, ValueError):
    kind = "invalid_quantity"

    def __init__(self, quantity: int):
        super().__init__(f"quantity must be greater than 0, got {quantity}")
        self.quantity = quantity

    def payload(self):
        return {"quantity": self.quantity}


# --- NotFound ---
class NotFound(StoreError):
    kind = "not_found"


class ItemNotFound(NotFound):
    kind = "item_not_found"

    def __init__(self, sku: str):
        super().__init__(f"item {sku} not found")
        self.sku = sku

    def payload(self):
        return {"sku": self.sku}


class LineNotFound(NotFound):
    kind = "line_not_found"

    def __init__(self, sku: str):
        super().__init__(f"item {sku} not found in the cart")
        self.sku = sku

    def payload(self):
        return {"sku": self.sku}


class OrderNotFound(NotFound):
    kind = "order_not_found"

    def __init__(self, order_id: str):
        super().__init__(f"order {order_id} not found")
        self.order_id = order_id

    def payload(self):
        return {"order_id": self.order_id}


# --- stan ---
class InsufficientStock(StoreError):
    kind = "insufficient_stock"

    def __init__(self, sku: str, requested: int | None = None, available: int | None = None):
        super().__init__(f"insufficient stock for item {sku}")
        self.sku = sku
        self.requested = requested
        self.available = available

    def payload(self):
        return {"sku": self.sku}


class EmptyCart(StoreError):
    kind = "empty_cart"

    def __init__(self, user_id: str):
        super().__init__(f"cart of user {user_id} is empty")
        self.user_id = user_id


class AlreadyConfirmed(StoreError):
    """Permanent: the order already carries a payment confirmation."""

    kind = "already_confirmed"

    def __init__(self, order_id: str):
        super().__init__(f"order {order_id} already confirmed")
        self.order_id = order_id

    def payload(self):
        return {"order_id": self.order_id}


class PaymentFailed(StoreError):
    """Retryable: the order is left PENDING and untouched."""

    kind = "payment_failed"

    def __init__(self, order_id: str):
        super().__init__(f"payment processing failed for order id {order_id}. please retry")
        self.order_id = order_id

    def payload(self):
        return {"order_id": self.order_id}


class PaymentError(Exception):
    """Raised by payment processors; translated to PaymentFailed by checkout."""
