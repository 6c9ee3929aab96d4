from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

Quantity = Union[int, Decimal]


def to_decimal(value: Union[int, float, str, Decimal]) -> Decimal:
    if not isinstance(value, Decimal):
        # str() first so 1.5 stays 1.5 instead of its binary expansion
        value = Decimal(str(value))
    if not value.is_finite():
        raise ValueError(f"expected a finite number, got {value}")
    return value


@dataclass(slots=True)
class Item:
    id: str
    price: Decimal
    sold_by_weight: bool = False
    markdown: Optional[Decimal] = None

    @property
    def unit_cost(self) -> Decimal:
        if self.markdown is None:
            return self.price
        return self.price - self.markdown


@dataclass(frozen=True, slots=True)
class NForX:
    """Buy ``n`` units for a flat ``x``."""

    n: int
    x: Decimal
    limit: Optional[int] = None


@dataclass(frozen=True, slots=True)
class NGetMAtXOff:
    """
    For every ``n`` full-priced units the next ``m`` are discounted by
    the fraction ``x`` (0.5 means half off).
    """

    n: int
    m: int
    x: Decimal
    limit: Optional[int] = None


Special = Union[NForX, NGetMAtXOff]
