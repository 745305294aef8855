# storefront/utils/ids.py
import base64
import secrets
from typing import Callable

from storefront.utils.settings import ORDER_ID_BYTES, ORDER_ID_PREFIX

# zrodlo identyfikatorow: funkcja bez argumentow zwracajaca nowe id
IdSource = Callable[[], str]


class RandomIdSource:
    """
    Nieprzewidywalne id: prefix + base64url z kryptograficznie losowych bajtow.
    """

    def __init__(self, prefix: str = ORDER_ID_PREFIX, nbytes: int = ORDER_ID_BYTES):
        if nbytes <= 0:
            raise ValueError("nbytes must be positive")
        self.prefix = prefix
        self.nbytes = nbytes

    def __call__(self) -> str:
        raw = base64.urlsafe_b64encode(secrets.token_bytes(self.nbytes)).decode("ascii")
        return f"{self.prefix}{raw}"
