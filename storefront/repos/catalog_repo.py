# storefront/repos/catalog_repo.py
import threading
from typing import Dict, Iterable, List, Tuple

from storefront.domain.errors import InsufficientStock, InvalidQuantity, ItemNotFound
from storefront.domain.schemas import Item
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogRepo:
    """
    Katalog produktow i stany magazynowe.
    Stan nigdy nie spada ponizej zera. Wszystkie operacje pod self.lock.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._items: Dict[str, Item] = {}
        self._stock: Dict[str, int] = {}

    def list_items(self) -> List[Item]:
        with self.lock:
            return list(self._items.values())

    def get_item(self, sku: str) -> Item:
        with self.lock:
            item = self._items.get(sku)
        if item is None:
            raise ItemNotFound(sku)
        return item

    def stock_level(self, sku: str) -> int:
        with self.lock:
            if sku not in self._items:
                raise ItemNotFound(sku)
            return self._stock[sku]

    def add_item(self, item: Item, quantity: int) -> None:
        if quantity < 0:
            raise InvalidQuantity(quantity)
        with self.lock:
            # first write wins dla metadanych
            self._items.setdefault(item.sku, item)
            self._stock[item.sku] = self._stock.get(item.sku, 0) + quantity
            logger.info(f"Stock of {item.sku} increased by {quantity} to {self._stock[item.sku]}")

    def update_item(self, item: Item) -> None:
        # zmiana nazwy / ceny, stan bez zmian
        with self.lock:
            if item.sku not in self._items:
                raise ItemNotFound(item.sku)
            self._items[item.sku] = item
            logger.info(f"Item {item.sku} updated: {item.name}, price {item.price}")

    def remove_item(self, item: Item, quantity: int) -> None:
        if quantity < 0:
            raise InvalidQuantity(quantity)
        with self.lock:
            if item.sku not in self._items:
                raise ItemNotFound(item.sku)
            available = self._stock[item.sku]
            if quantity > available:
                raise InsufficientStock(item.sku, requested=quantity, available=available)
            self._stock[item.sku] = available - quantity

    def debit(self, lines: Iterable[Tuple[str, int]]) -> None:
        """
        Zdejmuje ze stanu wszystkie linie albo zadnej.
        Najpierw walidacja calosci, potem zapis, wszystko pod jednym lockiem.
        """
        lines = list(lines)
        with self.lock:
            for sku, quantity in lines:
                if sku not in self._items:
                    raise ItemNotFound(sku)
                available = self._stock[sku]
                if available < quantity:
                    logger.warning(f"Insufficient stock for {sku}: requested {quantity}, available {available}")
                    raise InsufficientStock(sku, requested=quantity, available=available)

            for sku, quantity in lines:
                self._stock[sku] -= quantity

    def restock(self, lines: Iterable[Tuple[str, int]]) -> None:
        with self.lock:
            for sku, quantity in lines:
                self._stock[sku] += quantity
