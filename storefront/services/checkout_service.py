"""
checkout_service.py: cart -> order -> payment state machine

States per order: NONE -> PENDING -> CONFIRMED, one way only.

    checkout          NONE -> PENDING   stock debited, cart drained into the order
    confirm_purchase  PENDING -> CONFIRMED   payment charged, confirmation recorded once

Locks are always taken in the order carts -> catalog -> orders.
"""
from storefront.domain.errors import AlreadyConfirmed, EmptyCart, PaymentError, PaymentFailed
from storefront.domain.schemas import CardDetails, Order, PaymentRequest
from storefront.repos.cart_repo import CartRepo
from storefront.repos.catalog_repo import CatalogRepo
from storefront.repos.order_repo import OrderRepo
from storefront.services.lock_service import LockService
from storefront.services.payment_client import PaymentProcessor
from storefront.utils.logging import get_logger
from storefront.utils.settings import PAYMENT_CURRENCY

logger = get_logger(__name__)


class CheckoutService:
    def __init__(
        self,
        carts: CartRepo,
        catalog: CatalogRepo,
        orders: OrderRepo,
        payments: PaymentProcessor,
        lock_service: LockService,
        currency: str = PAYMENT_CURRENCY,
    ):
        self.carts = carts
        self.catalog = catalog
        self.orders = orders
        self.payments = payments
        self.lock_service = lock_service
        self.currency = currency

    def checkout(self, user_id: str) -> Order:
        """
        Zamienia koszyk uzytkownika w zamowienie PENDING.

        1. pusty koszyk -> EmptyCart
        2. ponowna walidacja stanow (koszyk mogl byc zapelniony dawno temu)
        3. zdjecie stanow, zapis zamowienia, wyczyszczenie koszyka

        Kroki 1-3 pod lockiem koszykow i katalogu, dwa rownolegle checkouty
        na ten sam produkt nie przejda obie walidacji.
        """
        with self.carts.lock, self.catalog.lock:
            cart = self.carts.get_or_create(user_id)
            if not cart.lines:
                raise EmptyCart(user_id)

            lines = [(sku, line.quantity) for sku, line in cart.lines.items()]
            self.catalog.debit(lines)

            try:
                order = self.orders.place_order(user_id, cart)
            except Exception:
                # nie ma zamowienia -> oddaj stan, koszyk zostaje
                logger.error(f"Placing order for user {user_id} failed, restocking {lines}")
                self.catalog.restock(lines)
                raise

            cart.clear()

        logger.info(f"[Order: {order.id}] Checkout done for user {user_id}, order PENDING")
        return order

    def confirm_purchase(self, user_id: str, order_id: str, card: CardDetails) -> Order:
        """
        Platnosc za zamowienie PENDING.

        Pusty order_id: najpierw checkout, platnosc za nowe zamowienie.
        Blad platnosci -> PaymentFailed, zamowienie zostaje PENDING bez zmian
        i mozna ponowic z tym samym order_id. AlreadyConfirmed jest ostateczne.
        """
        if not order_id:
            order_id = self.checkout(user_id).id

        # lock per zamowienie: drugie potwierdzenie czeka i widzi AlreadyConfirmed
        # przed obciazeniem karty. Lock katalogu nie jest trzymany podczas platnosci.
        with self.lock_service.hold(LockService.order_key(order_id)):
            order = self.orders.find_order(user_id, order_id)
            if order.payment_confirmation:
                logger.warning(f"[Order: {order_id}] Already confirmed, rejecting payment")
                raise AlreadyConfirmed(order_id)

            payment = PaymentRequest(
                id=order.id,
                user_id=user_id,
                amount=order.total_price,
                currency=self.currency,
            )

            try:
                confirmation_id = self.payments.process_payment(payment, card)
                if not confirmation_id:
                    raise PaymentError(f"empty confirmation id for payment {payment.id}")
            except PaymentError as e:
                logger.error(f"[Order: {order_id}] Payment failed: {e}. Order stays PENDING")
                raise PaymentFailed(order_id) from e

            confirmed = self.orders.confirm_payment(user_id, order_id, confirmation_id)

        logger.info(f"[Order: {order_id}] Payment confirmed, order CONFIRMED")
        return confirmed
