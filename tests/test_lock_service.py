import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from storefront.domain.errors import PaymentFailed
from storefront.services.lock_service import LockService


class TestLockService:
    def test_lock_is_dropped_after_release(self):
        locks = LockService()
        with locks.hold("order:1"):
            assert locks.active_keys() == ["order:1"]
        assert locks.active_keys() == []

    def test_reentrant_for_same_thread(self):
        locks = LockService()
        with locks.hold("order:1"):
            with locks.hold("order:1"):
                assert locks.active_keys() == ["order:1"]
            assert locks.active_keys() == ["order:1"]
        assert locks.active_keys() == []

    def test_released_on_error(self):
        locks = LockService()
        try:
            with locks.hold("order:1"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert locks.active_keys() == []

    def test_same_key_is_exclusive(self):
        locks = LockService()
        inside = []
        overlap = []
        guard = threading.Lock()

        def work(_):
            with locks.hold("order:1"):
                with guard:
                    inside.append(1)
                    if len(inside) > 1:
                        overlap.append(1)
                time.sleep(0.005)
                with guard:
                    inside.pop()

        with ThreadPoolExecutor(max_workers=6) as pool:
            list(pool.map(work, range(30)))

        assert overlap == []
        assert locks.active_keys() == []

    def test_no_locks_left_after_confirmations(self, store, payments, card):
        store.add_to_cart("u1", "item-1", 1)
        store.add_to_cart("u2", "item-3", 1)
        for user in ("u1", "u2"):
            store.confirm_purchase(user, "", card)

        # nieudana platnosc tez zwalnia lock
        store.add_to_cart("u1", "item-1", 1)
        order = store.checkout("u1")
        payments.fail = True
        with pytest.raises(PaymentFailed):
            store.confirm_purchase("u1", order.id, card)

        assert store.checkout_service.lock_service.active_keys() == []
