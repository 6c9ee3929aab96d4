from __future__ import annotations

import argparse
import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from pos_pricing.basket import Basket
from pos_pricing.models import NForX, NGetMAtXOff, to_decimal


def seed(basket: Basket) -> None:
    basket.set_price("apple", Decimal("1.00"))
    basket.set_price("bread", Decimal("3.00"))
    basket.set_price("grapes", Decimal("2.50"), sold_by_weight=True)
    basket.set_price("soup", Decimal("1.89"))
    basket.set_markdown("soup", Decimal("0.20"))

    basket.set_special("apple", NForX(n=3, x=Decimal("2.00")))
    basket.set_special("bread", NGetMAtXOff(n=2, m=1, x=Decimal("0.5"), limit=6))


def parse_scan(value: str) -> Tuple[str, Decimal]:
    """``apple`` scans one unit, ``grapes:1.5`` scans a weight."""
    item_id, _, weight = value.partition(":")
    if not item_id:
        raise argparse.ArgumentTypeError(f"missing item id in {value!r}")
    try:
        return item_id, to_decimal(weight) if weight else Decimal("0")
    except (ArithmeticError, ValueError):
        raise argparse.ArgumentTypeError(f"bad weight in {value!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Scan items into a basket and print the pretax total.")
    p.add_argument("--scan", type=parse_scan, action="append", default=[], metavar="ID[:WEIGHT]")
    p.add_argument("--remove", type=parse_scan, action="append", default=[], metavar="ID[:WEIGHT]")
    p.add_argument("--places", type=Decimal, default=Decimal("0.01"), help="Rounding step for each line")
    p.add_argument("--quiet", action="store_true", help="Only print the result")
    return p


def run(scans: List[Tuple[str, Decimal]], removes: List[Tuple[str, Decimal]], places: Decimal) -> Basket:
    basket = Basket(places=places)
    seed(basket)
    for item_id, weight in scans:
        basket.scan(item_id, weight)
    for item_id, weight in removes:
        basket.remove(item_id, weight)
    return basket


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO, format="%(message)s")

    basket = run(args.scan, args.remove, args.places)

    print("\n=== RESULT ===")
    for item_id, line in basket.line_costs().items():
        print(f"{item_id}: qty={basket.current_items[item_id]} cost={line}")
    print("total:", basket.total)


if __name__ == "__main__":
    main()
