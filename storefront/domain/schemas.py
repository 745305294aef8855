# storefront/domain/schemas.py
from decimal import Decimal
from typing import Annotated, List, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PlainSerializer, computed_field

# kwoty liczone jako Decimal, w JSON wychodza jako liczby
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

PENDING = "PENDING"
CONFIRMED = "CONFIRMED"


class Item(BaseModel):
    """Produkt z katalogu. Niezmienny po utworzeniu."""

    model_config = ConfigDict(frozen=True)

    sku: str = Field(..., min_length=1)
    name: str
    price: Money = Field(..., ge=0)


class CartLine(BaseModel):
    """Linia koszyka: snapshot produktu z momentu dodania + ilosc."""

    model_config = ConfigDict(frozen=True)

    item: Item
    quantity: int = Field(..., gt=0)


class Cart(BaseModel):
    """Kopia koszyka tylko do odczytu (response)."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    items: List[CartLine]
    total_items: int
    total_price: Money


class OrderLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    item: Item
    quantity: int = Field(..., gt=0)


class Order(BaseModel):
    """
    Zamowienie. Pozycje to kopie danych produktu z chwili checkoutu,
    wiec pozniejsze zmiany w katalogu nie zmieniaja zlozonych zamowien.
    payment_confirmation jest puste dopoki zamowienie jest PENDING.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    items: Tuple[OrderLine, ...]
    total_items: int
    total_price: Money
    payment_confirmation: str = ""

    @computed_field
    @property
    def status(self) -> str:
        return CONFIRMED if self.payment_confirmation else PENDING


class CardDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    credit_card_number: str = Field(..., repr=False)
    credit_card_expiration: str = ""
    credit_card_cvv: str = Field("", repr=False)


class PaymentRequest(BaseModel):
    """Platnosc dla zamowienia; id zamowienia jest kluczem idempotencji."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    amount: Money
    currency: str = "USD"


# =====================================================
# HTTP payloads
# =====================================================
class CartItemIn(BaseModel):
    """Schema dla dodawania / usuwania produktu z koszyka."""

    sku: str = Field(..., min_length=1, description="SKU produktu")
    quantity: int = Field(..., gt=0, description="Ilosc produktu (musi byc > 0)")


class ConfirmPurchaseIn(BaseModel):
    """Pusty order_id oznacza checkout i platnosc w jednym kroku."""

    order_id: str = ""
    card_details: CardDetails = Field(
        ..., validation_alias=AliasChoices("credit_card_details", "card_details")
    )


class ItemsOut(BaseModel):
    items: List[Item]


class CartTotalOut(BaseModel):
    total_price: Money
