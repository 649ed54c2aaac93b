from __future__ import annotations

from decimal import Decimal
from itertools import count
from typing import Dict, List, Optional

from trolley.catalog import Catalog
from trolley.coupons import Coupon, resolve_coupon
from trolley.models import CartLine, CartStatus, CartUpdate, Product

_cart_ids = count(1)


class Cart:
    """
    Lines keyed by product id plus at most one applied coupon.

    Every unit in a line has already been debited from `Product.stock`:
    add/remove/cancel move units between the cart and the catalog,
    complete_checkout is the only operation that consumes them.
    """

    def __init__(self, catalog: Catalog, cart_id: Optional[int] = None):
        self.catalog = catalog
        self.cart_id = cart_id if cart_id is not None else next(_cart_ids)
        self.coupon: Optional[Coupon] = None
        self._lines: Dict[int, CartLine] = {}

    def log(self, message: str) -> None:
        self.catalog.log(f"[cart={self.cart_id}] {message}")

    def add(self, product: Product, qty: int = 1) -> CartUpdate:
        line = self._lines.get(product.id)
        if line is not None:
            product = line.product
        if qty <= 0:
            self.log(f"add rejected: {product.name} qty={qty} (qty must be > 0)")
            return CartUpdate(CartStatus.INVALID_QTY, product)
        if product.stock <= 0:
            self.log(f"add rejected: {product.name} out of stock")
            return CartUpdate(CartStatus.OUT_OF_STOCK, product)

        taken = min(qty, product.stock)
        product.stock -= taken
        if line is None:
            self._lines[product.id] = CartLine(product=product, qty=taken)
        else:
            line.qty += taken
        self.log(f"added {product.name} x{taken} (requested={qty}, stock={product.stock})")
        return CartUpdate(CartStatus.ADDED, product, taken)

    def remove(self, product: Product, qty: int = 1) -> CartUpdate:
        line = self._lines.get(product.id)
        if line is None:
            self.log(f"remove rejected: {product.name} not in cart")
            return CartUpdate(CartStatus.NOT_IN_CART, product)
        # credit the record the units were debited from
        product = line.product
        if qty <= 0:
            self.log(f"remove rejected: {product.name} qty={qty} (qty must be > 0)")
            return CartUpdate(CartStatus.INVALID_QTY, product)

        taken = min(qty, line.qty)
        line.qty -= taken
        product.stock += taken
        if line.qty <= 0:
            del self._lines[product.id]
        self.log(f"removed {product.name} x{taken} (stock={product.stock})")
        return CartUpdate(CartStatus.REMOVED, product, taken)

    def set_quantity(self, product: Product, qty: int) -> CartUpdate:
        """Move the line towards `qty` units; 0 or less drops it. Adds are still clamped to stock."""
        qty = max(qty, 0)
        current = self.quantity_of(product)
        if qty < current:
            return self.remove(product, current - qty)
        if qty > current:
            return self.add(product, qty - current)
        return CartUpdate(CartStatus.UNCHANGED, product)

    def quantity_of(self, product: Product) -> int:
        line = self._lines.get(product.id)
        return line.qty if line else 0

    def list_items(self) -> List[CartLine]:
        return sorted(self._lines.values(), key=lambda l: l.product.name)

    def is_empty(self) -> bool:
        return not self._lines

    def subtotal(self) -> Decimal:
        return sum((l.line_total for l in self._lines.values()), Decimal("0"))

    def apply_coupon(self, code: str) -> Optional[Coupon]:
        """Replace the active coupon. Unknown codes leave the current one in place."""
        coupon = resolve_coupon(code)
        if coupon is None:
            self.log(f"coupon rejected: unknown code {code.strip()!r}")
            return None
        self.coupon = coupon
        self.log(f"coupon applied: {coupon.code}")
        return coupon

    def cancel(self) -> None:
        restocked = 0
        for line in self._lines.values():
            line.product.stock += line.qty
            restocked += line.qty
        self._lines.clear()
        self.coupon = None
        self.log(f"order cancelled: restocked {restocked} units")

    def complete_checkout(self) -> None:
        sold = sum(l.qty for l in self._lines.values())
        self._lines.clear()
        self.coupon = None
        self.log(f"checkout complete: {sold} units sold")
