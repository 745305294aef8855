# storefront/services/store_service.py
from decimal import Decimal
from typing import List

from storefront.data.seed import seed
from storefront.domain.schemas import Cart, CardDetails, Item, Order
from storefront.repos.cart_repo import CartRepo
from storefront.repos.catalog_repo import CatalogRepo
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_service import CartService
from storefront.services.checkout_service import CheckoutService
from storefront.services.lock_service import LockService
from storefront.services.payment_client import PaymentProcessor, build_payment_processor
from storefront.utils.ids import IdSource
from storefront.utils.logging import get_logger
from storefront.utils.settings import SEED_CATALOG

logger = get_logger(__name__)


class StoreService:
    """
    Jedno wejscie do rdzenia sklepu dla warstwy HTTP.
    Przyjmuje juz rozwiazany user_id, zwraca wartosci albo typowane bledy.
    """

    def __init__(
        self,
        catalog: CatalogRepo,
        carts: CartRepo,
        orders: OrderRepo,
        payments: PaymentProcessor,
        lock_service: LockService | None = None,
    ):
        self.catalog = catalog
        self.orders = orders
        self.cart_service = CartService(carts, catalog)
        self.checkout_service = CheckoutService(
            carts=carts,
            catalog=catalog,
            orders=orders,
            payments=payments,
            lock_service=lock_service or LockService(),
        )

    # katalog
    def list_items(self) -> List[Item]:
        return self.catalog.list_items()

    def get_item(self, sku: str) -> Item:
        return self.catalog.get_item(sku)

    # koszyk
    def add_to_cart(self, user_id: str, sku: str, quantity: int) -> Cart:
        return self.cart_service.add_to_cart(user_id, sku, quantity)

    def remove_from_cart(self, user_id: str, sku: str, quantity: int) -> Cart:
        return self.cart_service.remove_from_cart(user_id, sku, quantity)

    def get_cart(self, user_id: str) -> Cart:
        return self.cart_service.get_cart(user_id)

    def get_cart_total_price(self, user_id: str) -> Decimal:
        return self.cart_service.get_cart_total(user_id)

    # zamowienia
    def checkout(self, user_id: str) -> Order:
        return self.checkout_service.checkout(user_id)

    def confirm_purchase(self, user_id: str, order_id: str, card: CardDetails) -> Order:
        return self.checkout_service.confirm_purchase(user_id, order_id, card)

    def get_order(self, user_id: str, order_id: str) -> Order:
        return self.orders.find_order(user_id, order_id)

    def get_order_history(self, user_id: str) -> List[Order]:
        return self.orders.order_history(user_id)


def build_store(
    payments: PaymentProcessor | None = None,
    id_source: IdSource | None = None,
    seed_catalog: bool = SEED_CATALOG,
) -> StoreService:
    catalog = CatalogRepo()
    if seed_catalog:
        seed(catalog)
        logger.info(f"Catalog seeded with {len(catalog.list_items())} items")

    return StoreService(
        catalog=catalog,
        carts=CartRepo(),
        orders=OrderRepo(id_source=id_source),
        payments=payments or build_payment_processor(),
    )
