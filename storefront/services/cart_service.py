from decimal import Decimal

from storefront.domain.errors import InsufficientStock, InvalidQuantity
from storefront.domain.schemas import Cart
from storefront.repos.cart_repo import CartRepo
from storefront.repos.catalog_repo import CatalogRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka, zawsze w obrebie koszyka jednego uzytkownika.
    commands (add, remove) modyfikuja stan pod lockiem koszykow,
    query (get, total) tylko odczyt. Koszyk tworzony przy pierwszym dostepie.
    """

    def __init__(self, carts: CartRepo, catalog: CatalogRepo):
        self.carts = carts
        self.catalog = catalog

    # query
    def get_cart(self, user_id: str) -> Cart:
        with self.carts.lock:
            return self.carts.get_or_create(user_id).snapshot()

    def get_cart_total(self, user_id: str) -> Decimal:
        with self.carts.lock:
            return self.carts.get_or_create(user_id).total_price

    # commands
    def add_to_cart(self, user_id: str, sku: str, quantity: int) -> Cart:
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        item = self.catalog.get_item(sku)

        # kolejnosc lockow: koszyki -> katalog
        with self.carts.lock:
            cart = self.carts.get_or_create(user_id)
            line = cart.lines.get(sku)
            wanted = quantity + (line.quantity if line else 0)

            # tylko sprawdzenie, stan zdejmowany dopiero przy checkout
            available = self.catalog.stock_level(sku)
            if wanted > available:
                logger.warning(
                    f"User {user_id} wants {wanted} x {sku} in cart, only {available} in stock"
                )
                raise InsufficientStock(sku, requested=wanted, available=available)

            cart.add(item, quantity)
            logger.info(f"Added {quantity} x {sku} to cart of {user_id}, total {cart.total_price}")
            return cart.snapshot()

    def remove_from_cart(self, user_id: str, sku: str, quantity: int) -> Cart:
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        item = self.catalog.get_item(sku)

        with self.carts.lock:
            cart = self.carts.get_or_create(user_id)
            removed = cart.remove(item, quantity)
            logger.info(f"Removed {removed} x {sku} from cart of {user_id}, total {cart.total_price}")
            return cart.snapshot()
