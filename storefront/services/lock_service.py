import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class LockService:
    """
    -lock w pamieci procesu per klucz (np. order:<id>)
    -tworzony przy pierwszym hold(), usuwany gdy nikt go juz nie trzyma ani nie czeka
    """

    def __init__(self):
        self._guard = threading.Lock()
        # klucz -> [lock, ilu trzyma / czeka]
        self._locks: Dict[str, List] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(key, [threading.RLock(), 0])
            entry[1] += 1

        lock = entry[0]
        lock.acquire()
        logger.debug(f"Acquired lock {key}")
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def active_keys(self) -> List[str]:
        with self._guard:
            return list(self._locks)

    @staticmethod
    def order_key(order_id: str) -> str:
        return f"order:{order_id}"
