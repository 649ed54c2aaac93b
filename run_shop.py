from __future__ import annotations

import argparse
import logging
from decimal import Decimal, InvalidOperation

from trolley.cart import Cart
from trolley.catalog import Catalog
from trolley.menu import ShopMenu
from trolley.receipt import TAX_RATE
from trolley.seed import seed


def tax_rate(value: str) -> Decimal:
    try:
        rate = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not rate.is_finite() or rate < 0:
        raise argparse.ArgumentTypeError(f"tax rate must be a finite number >= 0, got {value!r}")
    return rate


def main() -> None:
    p = argparse.ArgumentParser(description="Run the Tesco Trolley console shop.")
    p.add_argument("--log-level", type=str, default="WARNING", help="Уровень логов журнала корзины (например INFO)")
    p.add_argument("--tax-rate", type=tax_rate, default=TAX_RATE)
    args = p.parse_args()

    # журнал корзины без "шумных" префиксов, чтобы не мешать меню
    logging.basicConfig(level=args.log_level.upper(), format="%(message)s")

    catalog = Catalog()
    seed(catalog)

    ShopMenu(catalog, Cart(catalog), tax_rate=args.tax_rate).run()


if __name__ == "__main__":
    main()
