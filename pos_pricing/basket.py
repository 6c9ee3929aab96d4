from __future__ import annotations

import logging
import threading
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional, Union

from pos_pricing.models import Quantity, Special, to_decimal
from pos_pricing.pricing import PricingEngine
from pos_pricing.store import Catalog, Number, SpecialsRegistry

logger = logging.getLogger(__name__)


class Basket:
    """
    A checkout session: scanned quantities per item plus the running
    pretax total.

    The total is never adjusted in place. Every scan/remove re-prices each
    line from the catalog and specials, rounds it to ``places`` and sums.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        specials: Optional[SpecialsRegistry] = None,
        places: Decimal = Decimal("0.01"),
    ) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self.specials = specials if specials is not None else SpecialsRegistry()
        self.engine = PricingEngine(self.catalog, self.specials)
        self.places = places

        self._items: Dict[str, Quantity] = {}
        self._total = Decimal("0")
        self._lock = threading.Lock()

        self.logs: List[str] = []

    def log(self, message: str, level: int = logging.INFO) -> None:
        self.logs.append(message)
        logger.log(level, message)

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def current_items(self) -> Dict[str, Quantity]:
        return dict(self._items)

    # Catalog/specials passthroughs so a single object can drive a till
    def set_price(self, item_id: str, price: Number, sold_by_weight: bool = False) -> None:
        self.catalog.set_price(item_id, price, sold_by_weight)

    def set_markdown(self, item_id: str, markdown: Number) -> None:
        self.catalog.set_markdown(item_id, markdown)

    def set_special(self, item_id: str, special: Special) -> None:
        self.specials.set_special(item_id, special)

    def is_sold_by_weight(self, item_id: str) -> bool:
        return self.catalog.is_sold_by_weight(item_id)

    def unit_cost(self, item_id: str) -> Decimal:
        return self.catalog.unit_cost(item_id)

    def cost(self, item_id: str, amount: Quantity) -> Decimal:
        return self.engine.cost(item_id, amount)

    def scan(self, item_id: str, weight: Union[int, float, str, Decimal] = 0) -> Decimal:
        with self._lock:
            return self._adjust(item_id, self._step(weight), "scanned")

    def remove(self, item_id: str, weight: Union[int, float, str, Decimal] = 0) -> Decimal:
        with self._lock:
            return self._adjust(item_id, -self._step(weight), "removed")

    def recompute_total(self) -> Decimal:
        with self._lock:
            return self._recompute()

    def line_costs(self) -> Dict[str, Decimal]:
        with self._lock:
            return {item_id: self._line_cost(item_id, qty) for item_id, qty in self._items.items()}

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._total = Decimal("0")
            self.log("basket cleared")

    @staticmethod
    def _step(weight: Union[int, float, str, Decimal]) -> Quantity:
        weight = to_decimal(weight)
        return 1 if weight == 0 else weight

    def _adjust(self, item_id: str, delta: Quantity, action: str) -> Decimal:
        # Unknown ids fail here, before the basket is touched.
        self.catalog.get(item_id)

        items = dict(self._items)
        qty = items.get(item_id, 0) + delta
        if qty == 0:
            del items[item_id]
        else:
            items[item_id] = qty

        # Price the new basket first so a failure leaves the old one in place.
        total = self._sum_lines(items)
        self._items = items
        self._total = total

        self.log(f"[item={item_id}] {action}: {abs(delta)} (qty={qty})")
        if qty < 0:
            self.log(f"[item={item_id}] quantity is negative: {qty}", logging.WARNING)
        self.log(f"total: {total}")
        return total

    def _line_cost(self, item_id: str, qty: Quantity) -> Decimal:
        return self.engine.cost(item_id, qty).quantize(self.places, rounding=ROUND_HALF_UP)

    def _sum_lines(self, items: Dict[str, Quantity]) -> Decimal:
        return sum(
            (self._line_cost(item_id, qty) for item_id, qty in items.items()),
            Decimal("0"),
        )

    def _recompute(self) -> Decimal:
        self._total = self._sum_lines(self._items)
        self.log(f"total: {self._total}")
        return self._total
