import itertools
import threading
import time

import pytest
from fastapi.testclient import TestClient

from storefront.api import create_app
from storefront.domain.errors import PaymentError
from storefront.domain.schemas import CardDetails
from storefront.services.store_service import build_store


class SequentialIds:
    """Deterministic order ids: order-1, order-2, ..."""

    def __init__(self, prefix="order-"):
        self.prefix = prefix
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            return f"{self.prefix}{next(self._counter)}"


class FakePaymentProcessor:
    def __init__(self, fail=False, delay=0.0):
        self.fail = fail
        self.delay = delay
        self.calls = []
        self._lock = threading.Lock()

    def process_payment(self, payment, card):
        with self._lock:
            self.calls.append(payment)
            n = len(self.calls)
        if self.delay:
            time.sleep(self.delay)
        if self.fail:
            raise PaymentError(f"declined {payment.id}")
        return f"conf-{payment.id}-{n}"


@pytest.fixture
def payments():
    return FakePaymentProcessor()


@pytest.fixture
def store(payments):
    # seed: item-1 (100.00), item-2 (200.00), item-3 (300.00), stan 2 kazdy
    return build_store(payments=payments, id_source=SequentialIds(), seed_catalog=True)


@pytest.fixture
def card():
    return CardDetails(
        first_name="Test",
        last_name="User",
        credit_card_number="4111111111111111",
        credit_card_expiration="12/30",
        credit_card_cvv="123",
    )


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
