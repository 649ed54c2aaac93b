from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, List

from trolley.models import Product

if TYPE_CHECKING:
    from trolley.cart import Cart
    from trolley.receipt import Receipt

CURRENCY = "₹"
CENTS = Decimal("0.01")

RECEIPT_TITLE = "TESCO TROLLEY RECEIPT"
RECEIPT_WIDTH = 57


def money(amount: Decimal) -> str:
    return f"{CURRENCY}{Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)}"


def product_tag(product: Product) -> str:
    return f"#{product.id}  {product.name}  -  {money(product.price)}  (Stock: {product.stock})"


def format_cart(cart: Cart) -> List[str]:
    lines = [
        f"{i}. {line.product.name} x{line.qty} - {money(line.line_total)}"
        for i, line in enumerate(cart.list_items(), start=1)
    ]
    lines.append(f"Subtotal: {money(cart.subtotal())}")
    return lines


def format_receipt(receipt: Receipt) -> List[str]:
    """Render a computed receipt. All rounding to two places happens here."""
    rule = "-" * RECEIPT_WIDTH
    out = [f" {RECEIPT_TITLE} ".center(RECEIPT_WIDTH, "=")]
    for line in receipt.lines:
        out.append(f"{line.name}  x{line.qty}  @ {money(line.unit_price)}  =  {money(line.line_total)}")
    out.append(rule)
    out.append(f"{'Subtotal:':<22}{money(receipt.subtotal)}")
    if receipt.discount_amount > 0:
        out.append(f"{receipt.coupon_code} ({receipt.discount_label}):  -{money(receipt.discount_amount)}")
    tax_percent = (receipt.tax_rate * 100).normalize()
    out.append(f"{f'GST ({tax_percent:f}%):':<22}{money(receipt.tax)}")
    out.append(f"{'TOTAL:':<22}{money(receipt.total)}")
    out.append(f"{'Loyalty Points:':<22}+{receipt.loyalty_points}")
    out.append("=" * RECEIPT_WIDTH)
    return out
