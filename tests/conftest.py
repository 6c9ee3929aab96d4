"""Pytest fixtures: a small seeded catalog and an empty basket over it."""

from decimal import Decimal

import pytest

from pos_pricing.basket import Basket
from pos_pricing.pricing import PricingEngine
from pos_pricing.store import Catalog, SpecialsRegistry


@pytest.fixture
def catalog() -> Catalog:
    catalog = Catalog()

    catalog.set_price("apple", Decimal("1.00"))
    catalog.set_price("bread", Decimal("3.00"))
    catalog.set_price("soup", Decimal("1.89"))
    catalog.set_price("grapes", Decimal("2.50"), sold_by_weight=True)
    catalog.set_price("beef", Decimal("5.99"), sold_by_weight=True)

    return catalog


@pytest.fixture
def specials() -> SpecialsRegistry:
    return SpecialsRegistry()


@pytest.fixture
def engine(catalog, specials) -> PricingEngine:
    return PricingEngine(catalog, specials)


@pytest.fixture
def basket(catalog, specials) -> Basket:
    return Basket(catalog, specials)
