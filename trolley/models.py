from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Category(Enum):
    FRUITS_VEG = "fruits_veg"
    BAKERY = "bakery"
    DAIRY = "dairy"
    BEVERAGES = "beverages"
    HOUSEHOLD = "household"

    @property
    def label(self) -> str:
        return self.name.replace("_", " ")


@dataclass(slots=True, eq=False)
class Product:
    """
    Catalog record. Only `stock` changes after seeding, and only through a Cart.
    Compared by identity: carts hold references to the catalog's instances.
    """

    id: int
    name: str
    category: Category
    price: Decimal
    stock: int


@dataclass(slots=True)
class CartLine:
    product: Product
    qty: int

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.qty


class CartStatus(Enum):
    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"
    INVALID_QTY = "invalid_qty"
    OUT_OF_STOCK = "out_of_stock"
    NOT_IN_CART = "not_in_cart"


@dataclass(slots=True)
class CartUpdate:
    """Outcome of a single cart mutation; `qty` is the number of units actually moved."""

    status: CartStatus
    product: Product
    qty: int = 0
