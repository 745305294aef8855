# storefront/repos/cart_repo.py
import threading
from typing import Dict

from storefront.data.models.cart import CartModel


class CartRepo:
    def __init__(self):
        self.lock = threading.RLock()
        self._carts: Dict[str, CartModel] = {}

    def get_or_create(self, user_id: str) -> CartModel:
        # tworzenie pod lockiem, dwa rownolegle odczyty nie zrobia dwoch koszykow
        with self.lock:
            cart = self._carts.get(user_id)
            if cart is None:
                cart = CartModel(user_id)
                self._carts[user_id] = cart
            return cart
