from pos_pricing.basket import Basket
from pos_pricing.errors import InvalidSpecialParameters, PricingError, UnknownItem, UnsupportedSpecialType
from pos_pricing.models import Item, NForX, NGetMAtXOff, Special
from pos_pricing.pricing import PricingEngine, split_limit
from pos_pricing.store import Catalog, SpecialsRegistry

__all__ = [
    "Basket",
    "Catalog",
    "InvalidSpecialParameters",
    "Item",
    "NForX",
    "NGetMAtXOff",
    "PricingEngine",
    "PricingError",
    "Special",
    "SpecialsRegistry",
    "UnknownItem",
    "UnsupportedSpecialType",
    "split_limit",
]
