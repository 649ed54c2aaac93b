from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from trolley.formatting import money

if TYPE_CHECKING:
    from trolley.cart import Cart

ZERO = Decimal("0")


class Coupon(ABC):
    """
    A discount rule. Coupons hold only their parameters: `discount` is
    re-evaluated against the cart every time and never mutates it.
    """

    def __init__(self, code: str, title: str):
        self.code = code
        self.title = title

    @abstractmethod
    def discount(self, cart: Cart) -> Tuple[Decimal, str]: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"


class PercentOff(Coupon):
    def __init__(self, code: str, percent: int, min_spend: Decimal):
        super().__init__(code, f"{percent}% off over {money(min_spend)}")
        self.percent = percent
        self.min_spend = min_spend

    def discount(self, cart: Cart) -> Tuple[Decimal, str]:
        subtotal = cart.subtotal()
        if subtotal < self.min_spend:
            return ZERO, f"Spend {money(self.min_spend)} to use {self.code}"
        return subtotal * self.percent / 100, f"{self.percent}% off"


class AmountOff(Coupon):
    def __init__(self, code: str, amount: Decimal, min_spend: Decimal):
        super().__init__(code, f"{money(amount)} off over {money(min_spend)}")
        self.amount = amount
        self.min_spend = min_spend

    def discount(self, cart: Cart) -> Tuple[Decimal, str]:
        if cart.subtotal() < self.min_spend:
            return ZERO, f"Spend {money(self.min_spend)} to use {self.code}"
        return self.amount, f"{money(self.amount)} off"


class BuyOneGetOneFree(Coupon):
    """Every second unit of the first cart line whose name contains `target` is free."""

    def __init__(self, code: str, target: str):
        super().__init__(code, f"Buy 1 Get 1 Free: {target}")
        self.target = target

    def discount(self, cart: Cart) -> Tuple[Decimal, str]:
        needle = self.target.casefold()
        line = next((l for l in cart.list_items() if needle in l.product.name.casefold()), None)
        if line is None:
            return ZERO, f"Add {self.target} to use {self.code}"
        free_units = line.qty // 2
        return line.product.price * free_units, f"BOGO: {line.product.name} free x{free_units}"


COUPONS: Dict[str, Callable[[], Coupon]] = {
    "TESCO10": lambda: PercentOff("TESCO10", 10, Decimal("500.00")),
    "SAVE50": lambda: AmountOff("SAVE50", Decimal("50.00"), Decimal("300.00")),
    "BOGO-BREAD": lambda: BuyOneGetOneFree("BOGO-BREAD", "Bread"),
}


def resolve_coupon(code: str) -> Optional[Coupon]:
    factory = COUPONS.get(code.strip().upper())
    if factory is None:
        return None
    return factory()
