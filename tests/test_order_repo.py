import base64
from decimal import Decimal

import pytest

from storefront.data.models.cart import CartModel
from storefront.domain.errors import AlreadyConfirmed, EmptyCart, OrderNotFound
from storefront.domain.schemas import Item
from storefront.repos.order_repo import OrderRepo
from storefront.utils.ids import RandomIdSource
from tests.conftest import SequentialIds

BOOK = Item(sku="item-2", name="Item 2", price=Decimal("200.00"))


def make_cart(user_id="u1", quantity=2):
    cart = CartModel(user_id)
    cart.add(BOOK, quantity)
    return cart


@pytest.fixture
def orders():
    return OrderRepo(id_source=SequentialIds())


class TestPlaceOrder:
    def test_freezes_cart_lines(self, orders):
        cart = make_cart()
        order = orders.place_order("u1", cart)

        assert order.id == "order-1"
        assert order.user_id == "u1"
        assert order.total_items == 2
        assert order.total_price == Decimal("400.00")
        assert order.payment_confirmation == ""
        assert order.status == "PENDING"
        assert [(l.item.sku, l.quantity) for l in order.items] == [("item-2", 2)]

        # zmiana koszyka po zlozeniu nie wplywa na zamowienie
        cart.add(BOOK, 1)
        assert orders.find_order("u1", order.id).total_items == 2

    def test_empty_cart(self, orders):
        with pytest.raises(EmptyCart):
            orders.place_order("u1", CartModel("u1"))
        assert orders.order_history("u1") == []

    def test_history_is_newest_first(self, orders):
        first = orders.place_order("u1", make_cart())
        second = orders.place_order("u1", make_cart(quantity=1))
        assert [o.id for o in orders.order_history("u1")] == [second.id, first.id]

    def test_duplicate_id_is_rejected(self):
        orders = OrderRepo(id_source=lambda: "order-same")
        orders.place_order("u1", make_cart())
        with pytest.raises(ValueError):
            orders.place_order("u2", make_cart("u2"))
        assert orders.order_history("u2") == []


class TestFindOrder:
    def test_unknown_order(self, orders):
        with pytest.raises(OrderNotFound) as exc:
            orders.find_order("u1", "order-404")
        assert exc.value.order_id == "order-404"

    def test_order_of_other_user_is_not_visible(self, orders):
        order = orders.place_order("u1", make_cart())
        with pytest.raises(OrderNotFound):
            orders.find_order("u2", order.id)

    def test_user_without_orders(self):
        with pytest.raises(OrderNotFound):
            OrderRepo().find_order("nobody", "order-x")

    def test_history_of_unknown_user_is_empty(self, orders):
        assert orders.order_history("ghost") == []


class TestConfirmPayment:
    def test_sets_confirmation_once(self, orders):
        order = orders.place_order("u1", make_cart())
        confirmed = orders.confirm_payment("u1", order.id, "pay-1")

        assert confirmed.id == order.id
        assert confirmed.payment_confirmation == "pay-1"
        assert confirmed.status == "CONFIRMED"
        assert orders.find_order("u1", order.id).payment_confirmation == "pay-1"

    def test_second_confirmation_fails_and_keeps_first(self, orders):
        order = orders.place_order("u1", make_cart())
        orders.confirm_payment("u1", order.id, "pay-1")

        with pytest.raises(AlreadyConfirmed):
            orders.confirm_payment("u1", order.id, "pay-2")
        assert orders.find_order("u1", order.id).payment_confirmation == "pay-1"

    def test_unknown_order(self, orders):
        with pytest.raises(OrderNotFound):
            orders.confirm_payment("u1", "order-404", "pay-1")

    def test_empty_confirmation_is_rejected(self, orders):
        order = orders.place_order("u1", make_cart())
        with pytest.raises(ValueError):
            orders.confirm_payment("u1", order.id, "")
        assert orders.find_order("u1", order.id).status == "PENDING"


class TestRandomIdSource:
    def test_prefixed_base64url_of_32_random_bytes(self):
        order_id = RandomIdSource()()
        assert order_id.startswith("order-")
        raw = order_id[len("order-"):]
        assert len(base64.urlsafe_b64decode(raw)) == 32
        assert "+" not in raw and "/" not in raw

    def test_ids_are_unique(self):
        source = RandomIdSource(prefix="o-", nbytes=16)
        ids = {source() for _ in range(1000)}
        assert len(ids) == 1000

    def test_default_ledger_uses_random_ids(self):
        order = OrderRepo().place_order("u1", make_cart())
        assert order.id.startswith("order-")
