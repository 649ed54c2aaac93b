"""Tests for receipt totals and receipt/money formatting."""
from decimal import Decimal

import pytest

from trolley.coupons import Coupon
from trolley.formatting import format_cart, format_receipt, money, product_tag
from trolley.receipt import compute_receipt, loyalty_points


class FlatCoupon(Coupon):
    """Test double: always takes a fixed amount off."""

    def __init__(self, amount: Decimal):
        super().__init__("FLAT", "flat")
        self.amount = amount

    def discount(self, cart):
        return self.amount, "flat"


def test_bogo_bread_scenario(cart, bread):
    cart.add(bread, 3)
    assert bread.stock == 47
    cart.apply_coupon("BOGO-BREAD")

    receipt = compute_receipt(cart)

    assert receipt.subtotal == Decimal("135.00")
    assert receipt.discount_amount == Decimal("45.00")
    assert "x1" in receipt.discount_label
    assert receipt.coupon_code == "BOGO-BREAD"
    assert receipt.after_discount == Decimal("90.00")
    assert receipt.tax == Decimal("4.5")
    assert receipt.total == Decimal("94.5")
    assert receipt.loyalty_points == 0

    assert len(receipt.lines) == 1
    assert receipt.lines[0].name == "Whole Wheat Bread"
    assert receipt.lines[0].line_total == Decimal("135.00")


def test_receipt_without_coupon(catalog, cart):
    cart.add(catalog.by_id(402), 2)  # 580

    receipt = compute_receipt(cart)

    assert receipt.discount_amount == 0
    assert receipt.discount_label == ""
    assert receipt.coupon_code is None
    assert receipt.tax == Decimal("29.0")
    assert receipt.total == Decimal("609.0")
    assert receipt.loyalty_points == 60


def test_ineligible_coupon_keeps_label(catalog, cart):
    cart.add(catalog.by_id(101))
    cart.apply_coupon("TESCO10")

    receipt = compute_receipt(cart)

    assert receipt.discount_amount == 0
    assert "₹500.00" in receipt.discount_label
    assert receipt.total == Decimal("71.40")


def test_discount_never_drives_total_negative(cart, bread):
    cart.add(bread, 1)
    cart.coupon = FlatCoupon(Decimal("1000.00"))

    receipt = compute_receipt(cart)

    assert receipt.after_discount == 0
    assert receipt.tax == 0
    assert receipt.total == 0
    assert receipt.loyalty_points == 0


def test_custom_tax_rate(cart, bread):
    cart.add(bread, 2)

    receipt = compute_receipt(cart, tax_rate=Decimal("0.10"))

    assert receipt.tax == Decimal("9.00")
    assert receipt.total == Decimal("99.00")


def test_compute_receipt_does_not_mutate(cart, bread):
    cart.add(bread, 4)
    cart.apply_coupon("BOGO-BREAD")

    assert compute_receipt(cart) == compute_receipt(cart)
    assert cart.quantity_of(bread) == 4
    assert bread.stock == 46
    assert cart.coupon is not None


@pytest.mark.parametrize(
    "total, points",
    [("0", 0), ("94.5", 0), ("99.99", 0), ("100", 10), ("199.99", 10), ("1050.25", 100)],
)
def test_loyalty_points(total, points):
    assert loyalty_points(Decimal(total)) == points


@pytest.mark.parametrize(
    "amount, text",
    [(Decimal("45"), "₹45.00"), (Decimal("4.5"), "₹4.50"), (Decimal("0.125"), "₹0.13"), (Decimal("0"), "₹0.00")],
)
def test_money(amount, text):
    assert money(amount) == text


def test_product_tag(bread):
    assert product_tag(bread) == "#201  Whole Wheat Bread  -  ₹45.00  (Stock: 50)"


def test_format_cart(catalog, cart, bread):
    cart.add(bread, 2)
    cart.add(catalog.by_id(101))

    assert format_cart(cart) == [
        "1. Bananas (1kg) x1 - ₹68.00",
        "2. Whole Wheat Bread x2 - ₹90.00",
        "Subtotal: ₹158.00",
    ]


def test_format_receipt(cart, bread):
    cart.add(bread, 3)
    cart.apply_coupon("BOGO-BREAD")

    text = format_receipt(compute_receipt(cart))

    assert "TESCO TROLLEY RECEIPT" in text[0]
    assert "Whole Wheat Bread  x3  @ ₹45.00  =  ₹135.00" in text
    assert "BOGO-BREAD (BOGO: Whole Wheat Bread free x1):  -₹45.00" in text
    assert any(line.startswith("GST (5%):") and line.endswith("₹4.50") for line in text)
    assert any(line.startswith("TOTAL:") and line.endswith("₹94.50") for line in text)
    assert any(line.startswith("Loyalty Points:") and line.endswith("+0") for line in text)


def test_format_receipt_hides_zero_discount(cart, bread):
    cart.add(bread)
    cart.apply_coupon("SAVE50")

    text = format_receipt(compute_receipt(cart))

    assert not any("SAVE50" in line for line in text)
