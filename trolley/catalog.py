from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from trolley.models import Category, Product

logger = logging.getLogger(__name__)


class Catalog:
    """
    In-memory product catalog.

    Holds the only mutable shared state of the shop: each product's `stock`.
    Queries never touch stock; carts debit and credit it directly on the
    Product instances handed out here.

    Also keeps a journal of messages (for the demo and for tests).
    """

    def __init__(self) -> None:
        self.products: List[Product] = []
        self._by_id: Dict[int, Product] = {}

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    # Seed helpers
    def add_product(self, product_id: int, name: str, category: Category, price: Decimal, stock: int) -> Product:
        if product_id in self._by_id:
            raise ValueError(f"Product {product_id} already exists")
        if price < 0:
            raise ValueError(f"Price must be >= 0, got {price}")
        if stock < 0:
            raise ValueError(f"Stock must be >= 0, got {stock}")
        product = Product(id=product_id, name=name, category=category, price=Decimal(price), stock=stock)
        self.products.append(product)
        self._by_id[product_id] = product
        return product

    def categories(self) -> List[Category]:
        return list(Category)

    def by_id(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)

    def by_category(self, category: Category) -> List[Product]:
        return [p for p in self.products if p.category == category]

    def search(self, text: str) -> List[Product]:
        needle = text.casefold()
        return [p for p in self.products if needle in p.name.casefold()]

    def sorted_by_price(self, ascending: bool = True) -> List[Product]:
        # sorted() stays stable with reverse=True, so equal prices keep catalog order
        return sorted(self.products, key=lambda p: p.price, reverse=not ascending)
