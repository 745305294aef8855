# storefront/data/seed.py
from decimal import Decimal

from storefront.domain.schemas import Item
from storefront.repos.catalog_repo import CatalogRepo

SEED_ITEMS = [
    (Item(sku="item-1", name="Item 1", price=Decimal("100.00")), 2),
    (Item(sku="item-2", name="Item 2", price=Decimal("200.00")), 2),
    (Item(sku="item-3", name="Item 3", price=Decimal("300.00")), 2),
]


def seed(catalog: CatalogRepo):
    # not forcing: only seed if empty
    if catalog.list_items():
        return
    for item, quantity in SEED_ITEMS:
        catalog.add_item(item, quantity)
