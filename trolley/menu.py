from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, List, Optional, Sequence, TypeVar

from trolley.cart import Cart
from trolley.catalog import Catalog
from trolley.formatting import format_cart, format_receipt, money, product_tag
from trolley.models import CartStatus, CartUpdate, Product
from trolley.receipt import TAX_RATE, compute_receipt

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAIN_MENU = """
=================== Tesco Trolley (Console) ===================
1) Browse by category
2) Search products
3) Sort products by price (asc/desc)
4) View cart / modify
5) Apply coupon (TESCO10 / SAVE50 / BOGO-BREAD)
6) Checkout
7) Cancel order & empty cart
0) Exit
----------------------------------------------------------------"""


def parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


class ShopMenu:
    """
    Console front end. Reads through `read` (same contract as `input`:
    EOFError ends the session) and writes whole lines through `write`.
    """

    def __init__(
        self,
        catalog: Catalog,
        cart: Cart,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        tax_rate: Decimal = TAX_RATE,
    ):
        self.catalog = catalog
        self.cart = cart
        self.read = read
        self.write = write
        self.tax_rate = tax_rate

    def run(self) -> None:
        try:
            while self.step():
                pass
        except EOFError:
            logger.info("input closed, leaving menu")

    def step(self) -> bool:
        """One pass through the main menu. Returns False on exit."""
        self.write(MAIN_MENU)
        choice = self.read_int("Choose: ")
        if choice == 0:
            self.write("Goodbye!")
            return False

        actions = {
            1: self.browse_by_category,
            2: self.search_products,
            3: self.sort_products,
            4: self.view_cart,
            5: self.apply_coupon,
            6: self.checkout,
            7: self.cancel_order,
        }
        action = actions.get(choice) if choice is not None else None
        if action is None:
            self.write("Invalid choice.")
        else:
            action()
        return True

    # Input helpers
    def read_line(self, prompt: str) -> str:
        return self.read(prompt).strip()

    def read_int(self, prompt: str) -> Optional[int]:
        return parse_int(self.read_line(prompt))

    def read_qty(self, prompt: str) -> int:
        qty = self.read_int(prompt)
        return 1 if qty is None else max(qty, 1)

    def pause(self) -> None:
        self.read("\n(Press Enter to continue) ")

    def choose(self, title: str, items: Sequence[T], labeler: Callable[[T], str]) -> Optional[T]:
        if not items:
            self.write("No items.")
            return None
        self.write(f"\n-- {title} --")
        for i, item in enumerate(items, start=1):
            self.write(f"{i}. {labeler(item)}")
        idx = self.read_int(f"Choose (1-{len(items)}) or 0 to cancel: ")
        if idx is None or idx < 1 or idx > len(items):
            return None
        return items[idx - 1]

    def report(self, update: CartUpdate) -> None:
        name = update.product.name
        if update.status == CartStatus.ADDED:
            self.write(f"Added {name} x{update.qty}")
        elif update.status == CartStatus.REMOVED:
            self.write(f"Removed {name} x{update.qty}")
        elif update.status == CartStatus.OUT_OF_STOCK:
            self.write(f"Out of stock: {name}")
        elif update.status == CartStatus.NOT_IN_CART:
            self.write("Item not in cart.")
        elif update.status == CartStatus.INVALID_QTY:
            self.write("Quantity must be positive.")
        else:
            self.write("No change.")

    # Menu actions
    def add_chosen(self, title: str, products: List[Product]) -> None:
        product = self.choose(title, products, product_tag)
        if product is None:
            return
        self.report(self.cart.add(product, self.read_qty("Qty to add: ")))
        self.pause()

    def browse_by_category(self) -> None:
        category = self.choose("Categories", self.catalog.categories(), lambda c: c.label)
        if category is None:
            return
        self.add_chosen(f"Products in {category.label}", self.catalog.by_category(category))

    def search_products(self) -> None:
        results = self.catalog.search(self.read_line("Search text: "))
        if not results:
            self.write("No matches.")
            self.pause()
            return
        self.add_chosen("Search Results", results)

    def sort_products(self) -> None:
        ascending = self.read_line("Sort by price ascending? (y/n): ").lower() == "y"
        self.write(f"\n-- All Products ({'Low->High' if ascending else 'High->Low'}) --")
        for product in self.catalog.sorted_by_price(ascending):
            self.write(product_tag(product))
        self.pause()

    def view_cart(self) -> None:
        items = self.cart.list_items()
        if not items:
            self.write("Cart is empty.")
            self.pause()
            return
        self.write("\n-- Your Cart --")
        for text in format_cart(self.cart):
            self.write(text)

        choice = self.read_int("1) Remove item  2) Change qty  0) Back: ")
        if choice in (1, 2):
            idx = self.read_int("Which item #: ")
            if idx is None or idx < 1 or idx > len(items):
                return
            line = items[idx - 1]
            if choice == 1:
                self.report(self.cart.remove(line.product, self.read_qty("Remove qty: ")))
            else:
                new_qty = self.read_int("New qty (0 to remove): ")
                if new_qty is None:
                    return
                self.report(self.cart.set_quantity(line.product, new_qty))
        self.pause()

    def apply_coupon(self) -> None:
        coupon = self.cart.apply_coupon(self.read_line("Enter coupon code: "))
        if coupon is None:
            self.write("Unknown code.")
        else:
            amount, label = coupon.discount(self.cart)
            self.write(f"Applied: {coupon.code} - {coupon.title}")
            self.write(f"Current discount (based on cart): {money(amount)} ({label})")
        self.pause()

    def checkout(self) -> None:
        if self.cart.is_empty():
            self.write("Cart is empty.")
            return
        self.write("")
        for text in format_receipt(compute_receipt(self.cart, self.tax_rate)):
            self.write(text)
        self.write("Thanks for shopping!")
        self.cart.complete_checkout()
        self.pause()

    def cancel_order(self) -> None:
        self.cart.cancel()
        self.write("Cart cleared. (Order cancelled)")
        self.pause()
