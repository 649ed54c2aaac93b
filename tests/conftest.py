"""Pytest fixtures for the trolley shop (in-memory catalog + one cart)."""

from decimal import Decimal

import pytest

from trolley.cart import Cart
from trolley.catalog import Catalog
from trolley.models import Category


@pytest.fixture
def catalog() -> Catalog:
    catalog = Catalog()

    catalog.add_product(101, "Bananas (1kg)", Category.FRUITS_VEG, price=Decimal("68.00"), stock=40)
    catalog.add_product(201, "Whole Wheat Bread", Category.BAKERY, price=Decimal("45.00"), stock=50)
    catalog.add_product(202, "Croissant (Pack of 4)", Category.BAKERY, price=Decimal("120.00"), stock=20)
    catalog.add_product(301, "Milk 1L", Category.DAIRY, price=Decimal("64.00"), stock=60)
    catalog.add_product(302, "Cheddar Cheese 200g", Category.DAIRY, price=Decimal("210.00"), stock=15)
    catalog.add_product(401, "Assam Tea 250g", Category.BEVERAGES, price=Decimal("180.00"), stock=18)
    catalog.add_product(402, "Instant Coffee 100g", Category.BEVERAGES, price=Decimal("290.00"), stock=12)
    catalog.add_product(403, "Sparkling Water", Category.BEVERAGES, price=Decimal("64.00"), stock=0)  # Out of stock

    return catalog


@pytest.fixture
def cart(catalog) -> Cart:
    return Cart(catalog, cart_id=1)


@pytest.fixture
def bread(catalog):
    return catalog.by_id(201)
