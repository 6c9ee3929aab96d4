from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Dict, List, Optional, Union

from pos_pricing.errors import InvalidSpecialParameters, UnknownItem, UnsupportedSpecialType
from pos_pricing.models import Item, NForX, NGetMAtXOff, Special, to_decimal

logger = logging.getLogger(__name__)

Number = Union[int, float, str, Decimal]


class Catalog:
    """
    Item prices, markdowns and the sold-by-weight flag, keyed by item id.

    Items are never deleted: ``set_price`` on an existing id overwrites the
    whole record, markdown included.
    """

    def __init__(self) -> None:
        self.items: Dict[str, Item] = {}
        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self.items

    def get(self, item_id: str) -> Item:
        item = self.items.get(item_id)
        if item is None:
            raise UnknownItem(item_id)
        return item

    def set_price(self, item_id: str, price: Number, sold_by_weight: bool = False) -> None:
        self.items[item_id] = Item(id=item_id, price=to_decimal(price), sold_by_weight=sold_by_weight)
        self.log(f"[item={item_id}] price set: {self.items[item_id].price} (by_weight={sold_by_weight})")

    def set_markdown(self, item_id: str, markdown: Number) -> None:
        item = self.get(item_id)
        item.markdown = to_decimal(markdown)
        self.log(f"[item={item_id}] markdown set: {item.markdown} (unit_cost={item.unit_cost})")

    def is_sold_by_weight(self, item_id: str) -> bool:
        return self.get(item_id).sold_by_weight

    def unit_cost(self, item_id: str) -> Decimal:
        return self.get(item_id).unit_cost


def _check_positive(name: str, value: object, item_id: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSpecialParameters(f"{name} must be an integer, got {value!r}", item_id)
    if value <= 0:
        raise InvalidSpecialParameters(f"{name} must be > 0, got {value}", item_id)


class SpecialsRegistry:
    """At most one special per item; setting a new one replaces the old."""

    def __init__(self) -> None:
        self.specials: Dict[str, Special] = {}
        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def _validate(self, item_id: str, special: Special) -> Special:
        if not isinstance(special, (NForX, NGetMAtXOff)):
            raise UnsupportedSpecialType(type(special).__name__)

        _check_positive("n", special.n, item_id)
        if isinstance(special, NGetMAtXOff):
            _check_positive("m", special.m, item_id)
        if special.limit is not None:
            _check_positive("limit", special.limit, item_id)

        try:
            x = to_decimal(special.x)
        except (ArithmeticError, ValueError, TypeError) as e:
            raise InvalidSpecialParameters(f"x must be a finite number, got {special.x!r}", item_id) from e

        if isinstance(special, NGetMAtXOff):
            if not Decimal("0") <= x <= Decimal("1"):
                raise InvalidSpecialParameters(f"x must be a fraction in [0, 1], got {x}", item_id)
        elif x < 0:
            raise InvalidSpecialParameters(f"x must be >= 0, got {x}", item_id)

        return replace(special, x=x)

    def set_special(self, item_id: str, special: Special) -> None:
        special = self._validate(item_id, special)
        self.specials[item_id] = special
        self.log(f"[item={item_id}] special set: {special}")

    def clear_special(self, item_id: str) -> None:
        if self.specials.pop(item_id, None) is not None:
            self.log(f"[item={item_id}] special cleared")

    def has_special(self, item_id: str) -> bool:
        return item_id in self.specials

    def get_special(self, item_id: str) -> Optional[Special]:
        return self.specials.get(item_id)
