# storefront/services/payment_client.py
import threading
import uuid
from decimal import Decimal
from typing import Dict, Protocol

import requests

from storefront.domain.errors import PaymentError
from storefront.domain.schemas import CardDetails, PaymentRequest
from storefront.utils.logging import get_logger
from storefront.utils.retry import http_retry
from storefront.utils.settings import (
    PAYMENT_DECLINE_PREFIX,
    PAYMENT_SERVICE_URL,
    PAYMENT_TIMEOUT_SECONDS,
)

logger = get_logger(__name__)


class PaymentProcessor(Protocol):
    def process_payment(self, payment: PaymentRequest, card: CardDetails) -> str:
        """Obciaza karte, zwraca id potwierdzenia albo rzuca PaymentError."""
        ...


class PaymentGateway:
    """
    Bramka platnosci w pamieci procesu (dev / demo).

    payment.id jest kluczem idempotencji: powtorzone wywolanie z tym samym
    kluczem zwraca to samo potwierdzenie i nie obciaza karty drugi raz.
    """

    def __init__(self, decline_prefix: str = PAYMENT_DECLINE_PREFIX):
        self.decline_prefix = decline_prefix
        self._lock = threading.Lock()
        self._charges: Dict[str, str] = {}

    def process_payment(self, payment: PaymentRequest, card: CardDetails) -> str:
        number = card.credit_card_number.strip()
        if not number:
            raise PaymentError(f"missing card number for payment {payment.id}")
        if self.decline_prefix and number.startswith(self.decline_prefix):
            logger.warning(f"[Payment: {payment.id}] Card declined")
            raise PaymentError(f"card declined for payment {payment.id}")

        with self._lock:
            confirmation = self._charges.get(payment.id)
            if confirmation:
                logger.info(f"[Payment: {payment.id}] Duplicate request, returning existing confirmation")
                return confirmation

            confirmation = f"pay_{uuid.uuid4().hex}"
            self._charges[payment.id] = confirmation

        logger.info(f"[Payment: {payment.id}] Charged {payment.amount} {payment.currency}")
        return confirmation


def to_cents(amount: Decimal) -> int:
    return int((Decimal(amount) * 100).to_integral_value())


class PaymentClient:
    """
    Klient zewnetrznego Payment Service (REST).
    Id zamowienia idzie jako Idempotency-Key, wiec ponowienie po timeoucie
    nie obciazy karty dwa razy.
    """

    def __init__(self, base_url: str | None = None, timeout: float = PAYMENT_TIMEOUT_SECONDS):
        self.base_url = (base_url or PAYMENT_SERVICE_URL).rstrip("/")
        if not self.base_url:
            raise ValueError("PaymentClient requires a base_url")
        self.timeout = timeout

    @http_retry()
    def _post_charge(self, payment: PaymentRequest, card: CardDetails) -> requests.Response:
        url = f"{self.base_url}/v2/charges"
        logger.info(f"[Payment: {payment.id}] PaymentClient POST {url}")
        payload = {
            "amount": to_cents(payment.amount),
            "currency": payment.currency,
            "cardNumber": card.credit_card_number,
            "cardExpiration": card.credit_card_expiration,
            "cardCvv": card.credit_card_cvv,
            "referenceId": payment.id,
            "userId": payment.user_id,
        }
        return requests.post(
            url,
            json=payload,
            headers={"Idempotency-Key": payment.id},
            timeout=self.timeout,
        )

    def process_payment(self, payment: PaymentRequest, card: CardDetails) -> str:
        try:
            resp = self._post_charge(payment, card)
            resp.raise_for_status()
            body = resp.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 402:
                logger.warning(f"[Payment: {payment.id}] Payment declined")
            else:
                logger.error(f"[Payment: {payment.id}] HTTP error from payment service: {e}")
            raise PaymentError(f"payment service returned {status} for payment {payment.id}") from e
        except (requests.RequestException, ValueError) as e:
            logger.error(f"[Payment: {payment.id}] Payment service unreachable: {e}")
            raise PaymentError(f"payment service unreachable for payment {payment.id}") from e

        if not isinstance(body, dict):
            logger.error(f"[Payment: {payment.id}] Unexpected response body: {body!r}")
            raise PaymentError(f"payment service returned malformed body for payment {payment.id}")

        confirmation = body.get("transactionId")
        if not confirmation:
            raise PaymentError(f"payment service returned no transactionId for payment {payment.id}")
        return confirmation


def build_payment_processor(base_url: str | None = None) -> PaymentProcessor:
    url = PAYMENT_SERVICE_URL if base_url is None else base_url
    if url:
        logger.info(f"Using remote payment service at {url}")
        return PaymentClient(base_url=url)
    logger.info("PAYMENT_SERVICE_URL not set, using in-process payment gateway")
    return PaymentGateway()
