# storefront/repos/order_repo.py
import threading
from typing import Dict, List, Set

from storefront.data.models.cart import CartModel
from storefront.domain.errors import AlreadyConfirmed, EmptyCart, OrderNotFound
from storefront.domain.schemas import Order, OrderLine
from storefront.utils.ids import IdSource, RandomIdSource
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderRepo:
    """
    Rejestr zamowien. Jedyny wlasciciel zamowien, per uzytkownik
    lista od najnowszego. Zamowien sie nie usuwa.
    """

    def __init__(self, id_source: IdSource | None = None):
        self.lock = threading.RLock()
        self.id_source = id_source or RandomIdSource()
        self._orders: Dict[str, List[Order]] = {}
        self._ids: Set[str] = set()

    def place_order(self, user_id: str, cart: CartModel) -> Order:
        if not cart.lines:
            raise EmptyCart(user_id)

        order = Order(
            id=self.id_source(),
            user_id=user_id,
            items=tuple(OrderLine(item=l.item, quantity=l.quantity) for l in cart.lines.values()),
            total_items=cart.total_items,
            total_price=cart.total_price,
        )

        with self.lock:
            if order.id in self._ids:
                raise ValueError(f"Duplicate order id {order.id}")
            self._ids.add(order.id)
            # najnowsze na poczatku
            self._orders.setdefault(user_id, []).insert(0, order)

        logger.info(f"Order {order.id} placed for user {user_id}: {order.total_items} items, total {order.total_price}")
        return order

    def _index_of(self, user_id: str, order_id: str) -> int:
        for i, o in enumerate(self._orders.get(user_id, [])):
            if o.id == order_id:
                return i
        raise OrderNotFound(order_id)

    def find_order(self, user_id: str, order_id: str) -> Order:
        with self.lock:
            idx = self._index_of(user_id, order_id)
            return self._orders[user_id][idx]

    def confirm_payment(self, user_id: str, order_id: str, confirmation_id: str) -> Order:
        if not confirmation_id:
            raise ValueError("confirmation_id must not be empty")

        with self.lock:
            idx = self._index_of(user_id, order_id)
            order = self._orders[user_id][idx]
            if order.payment_confirmation:
                raise AlreadyConfirmed(order_id)

            confirmed = order.model_copy(update={"payment_confirmation": confirmation_id})
            self._orders[user_id][idx] = confirmed

        logger.info(f"Order {order_id} of user {user_id} confirmed")
        return confirmed

    def order_history(self, user_id: str) -> List[Order]:
        with self.lock:
            return list(self._orders.get(user_id, []))
