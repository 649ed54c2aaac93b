from __future__ import annotations

from decimal import Decimal

from trolley.catalog import Catalog
from trolley.models import Category

PRODUCTS = [
    (101, "Bananas (1kg)", Category.FRUITS_VEG, "68.00", 40),
    (102, "Apples (1kg)", Category.FRUITS_VEG, "155.00", 25),
    (103, "Tomatoes (1kg)", Category.FRUITS_VEG, "55.00", 30),
    (201, "Whole Wheat Bread", Category.BAKERY, "45.00", 50),
    (202, "Croissant (Pack of 4)", Category.BAKERY, "120.00", 20),
    (301, "Milk 1L", Category.DAIRY, "64.00", 60),
    (302, "Cheddar Cheese 200g", Category.DAIRY, "210.00", 15),
    (303, "Eggs (12 pack)", Category.DAIRY, "110.00", 25),
    (401, "Assam Tea 250g", Category.BEVERAGES, "180.00", 18),
    (402, "Instant Coffee 100g", Category.BEVERAGES, "290.00", 12),
    (403, "Coke 1.25L", Category.BEVERAGES, "85.00", 35),
    (501, "Dish Detergent 500ml", Category.HOUSEHOLD, "99.00", 28),
    (502, "Laundry Liquid 1L", Category.HOUSEHOLD, "229.00", 16),
]


def seed(catalog: Catalog) -> None:
    for product_id, name, category, price, stock in PRODUCTS:
        catalog.add_product(product_id, name, category, price=Decimal(price), stock=stock)
