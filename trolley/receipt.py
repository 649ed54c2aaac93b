from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from trolley.cart import Cart

TAX_RATE = Decimal("0.05")
POINTS_BLOCK = Decimal("100")
POINTS_PER_BLOCK = 10


@dataclass(slots=True)
class ReceiptLine:
    name: str
    qty: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(slots=True)
class Receipt:
    lines: List[ReceiptLine]
    subtotal: Decimal
    discount_amount: Decimal
    discount_label: str
    coupon_code: Optional[str]
    after_discount: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal
    loyalty_points: int


def loyalty_points(total: Decimal) -> int:
    # whole blocks only; total is never negative so // truncates like floor
    return int(total // POINTS_BLOCK) * POINTS_PER_BLOCK


def compute_receipt(cart: Cart, tax_rate: Decimal = TAX_RATE) -> Receipt:
    """
    Itemized totals for the cart as it stands. Reads the cart and its coupon
    only; amounts are left unrounded.
    """
    subtotal = cart.subtotal()
    if cart.coupon is not None:
        discount, label = cart.coupon.discount(cart)
    else:
        discount, label = Decimal("0"), ""

    after_discount = max(Decimal("0"), subtotal - discount)
    tax = after_discount * tax_rate
    total = after_discount + tax

    return Receipt(
        lines=[
            ReceiptLine(name=l.product.name, qty=l.qty, unit_price=l.product.price, line_total=l.line_total)
            for l in cart.list_items()
        ],
        subtotal=subtotal,
        discount_amount=discount,
        discount_label=label,
        coupon_code=cart.coupon.code if cart.coupon else None,
        after_discount=after_discount,
        tax_rate=tax_rate,
        tax=tax,
        total=total,
        loyalty_points=loyalty_points(total),
    )
