# storefront/data/models/cart.py
from decimal import Decimal
from typing import Dict

from storefront.domain.errors import InvalidQuantity, LineNotFound
from storefront.domain.schemas import Cart, CartLine, Item
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartModel:
    """
    Koszyk jednego uzytkownika (w pamieci).

    total_items i total_price sa aktualizowane przy kazdej zmianie,
    a nie liczone przy odczycie, i zawsze musza sie zgadzac z suma po liniach.
    Synchronizacja nalezy do CartRepo / serwisow.
    """

    def __init__(self, user_id: str):
        self.user_id = user_id
        self.lines: Dict[str, CartLine] = {}
        self.total_items = 0
        self.total_price = Decimal("0.00")

    def __len__(self) -> int:
        return len(self.lines)

    def add(self, item: Item, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        existing = self.lines.get(item.sku)
        if existing:
            # zostaje snapshot produktu z pierwszego dodania
            self.lines[item.sku] = CartLine(item=existing.item, quantity=existing.quantity + quantity)
            price = existing.item.price
        else:
            self.lines[item.sku] = CartLine(item=item, quantity=quantity)
            price = item.price

        self.total_items += quantity
        self.total_price += price * quantity

    def remove(self, item: Item, quantity: int) -> int:
        """
        Usuwa do `quantity` sztuk produktu, zwraca ile faktycznie usunieto.

        Jesli linia ma tyle samo lub mniej sztuk, jest usuwana w calosci
        i sumy zmniejszaja sie o ilosc z linii, nie o ilosc z zadania.
        """
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        line = self.lines.get(item.sku)
        if line is None:
            raise LineNotFound(item.sku)

        if line.quantity > quantity:
            self.lines[item.sku] = CartLine(item=line.item, quantity=line.quantity - quantity)
            removed = quantity
        else:
            del self.lines[item.sku]
            removed = line.quantity
            if quantity > removed:
                logger.warning(
                    f"Requested removal of {quantity} x {item.sku} from cart of {self.user_id}, "
                    f"line held {removed}; removing the whole line"
                )

        self.total_items -= removed
        self.total_price -= line.item.price * removed
        return removed

    def clear(self) -> None:
        self.lines = {}
        self.total_items = 0
        self.total_price = Decimal("0.00")

    def recomputed_total(self) -> Decimal:
        return sum((l.item.price * l.quantity for l in self.lines.values()), Decimal("0.00"))

    def snapshot(self) -> Cart:
        return Cart(
            user_id=self.user_id,
            items=list(self.lines.values()),
            total_items=self.total_items,
            total_price=self.total_price,
        )
