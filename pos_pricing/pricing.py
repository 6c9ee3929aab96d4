from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Optional, Tuple

from pos_pricing.errors import UnsupportedSpecialType
from pos_pricing.models import NForX, NGetMAtXOff, Quantity, to_decimal
from pos_pricing.store import Catalog, SpecialsRegistry

logger = logging.getLogger(__name__)


def split_limit(amount: Decimal, limit: Optional[int]) -> Tuple[Decimal, Decimal]:
    """
    Split ``amount`` into the part a special applies to and the excess
    that is charged at unit cost.
    """
    if limit is not None and amount > limit:
        return Decimal(limit), amount - limit
    return amount, Decimal("0")


def _groups(amount: Decimal, size: int) -> Tuple[int, Decimal]:
    # Whole groups only; a fractional tail (weighed items) stays in the remainder.
    qualifying = math.floor(amount / size)
    return qualifying, amount - qualifying * size


class PricingEngine:
    def __init__(self, catalog: Catalog, specials: SpecialsRegistry):
        self.catalog = catalog
        self.specials = specials

    def cost(self, item_id: str, amount: Quantity) -> Decimal:
        amount = to_decimal(amount)
        unit_cost = self.catalog.unit_cost(item_id)
        special = self.specials.get_special(item_id)

        if special is None:
            return unit_cost * amount
        if isinstance(special, NForX):
            return self._n_for_x(special, unit_cost, amount)
        if isinstance(special, NGetMAtXOff):
            return self._n_get_m_at_x_off(special, unit_cost, amount)
        raise UnsupportedSpecialType(type(special).__name__)

    def _n_for_x(self, special: NForX, unit_cost: Decimal, amount: Decimal) -> Decimal:
        applied, excess = split_limit(amount, special.limit)
        qualifying, remainder = _groups(applied, special.n)
        remaining = remainder + excess

        logger.debug("n_for_x: qualifying=%s remaining=%s", qualifying, remaining)
        return qualifying * special.x + remaining * unit_cost

    def _n_get_m_at_x_off(self, special: NGetMAtXOff, unit_cost: Decimal, amount: Decimal) -> Decimal:
        applied, excess = split_limit(amount, special.limit)
        qualifying, remainder = _groups(applied, special.n + special.m)

        full_priced = qualifying * special.n + remainder + excess
        discounted = qualifying * special.m

        logger.debug("n_get_m_at_x_off: full_priced=%s discounted=%s", full_priced, discounted)
        return full_priced * unit_cost + discounted * unit_cost * (1 - special.x)
