"""Tests for the pricing engine and its two special algorithms."""
from decimal import Decimal

import pytest

from pos_pricing.errors import UnknownItem, UnsupportedSpecialType
from pos_pricing.models import NForX, NGetMAtXOff
from pos_pricing.pricing import split_limit


@pytest.mark.parametrize("amount", [0, 1, 4, 11])
def test_plain_cost_is_unit_cost_times_amount(engine, catalog, amount):
    assert engine.cost("soup", amount) == catalog.unit_cost("soup") * amount


def test_plain_cost_uses_markdown(engine, catalog):
    catalog.set_markdown("soup", Decimal("0.20"))
    assert engine.cost("soup", 3) == Decimal("5.07")


def test_weighted_cost(engine):
    assert engine.cost("grapes", Decimal("1.5")) == Decimal("3.75")


def test_unknown_item(engine):
    with pytest.raises(UnknownItem):
        engine.cost("kiwi", 1)


def test_split_limit():
    assert split_limit(Decimal(8), 6) == (Decimal(6), Decimal(2))
    assert split_limit(Decimal(4), 6) == (Decimal(4), Decimal(0))
    assert split_limit(Decimal(6), 6) == (Decimal(6), Decimal(0))
    assert split_limit(Decimal(40), None) == (Decimal(40), Decimal(0))


def test_n_for_x_seven_apples(engine, specials):
    specials.set_special("apple", NForX(n=3, x=Decimal("2.00")))
    assert engine.cost("apple", 7) == Decimal("5.00")


@pytest.mark.parametrize("k,r", [(0, 0), (0, 2), (1, 0), (3, 1), (5, 2)])
def test_n_for_x_groups_and_remainder(engine, specials, k, r):
    specials.set_special("apple", NForX(n=3, x=Decimal("2.00")))
    assert engine.cost("apple", k * 3 + r) == k * Decimal("2.00") + r * Decimal("1.00")


def test_n_for_x_excess_over_limit_is_unit_priced(engine, specials):
    specials.set_special("apple", NForX(n=3, x=Decimal("2.00"), limit=6))

    # 6 under the special (2 groups), 4 beyond the limit at 1.00 each
    assert engine.cost("apple", 10) == Decimal("8.00")


def test_n_for_x_limit_not_multiple_of_n(engine, specials):
    specials.set_special("apple", NForX(n=3, x=Decimal("2.00"), limit=4))

    # one group, one leftover inside the limit, three past it
    assert engine.cost("apple", 7) == Decimal("2.00") + 4 * Decimal("1.00")


def test_n_for_x_under_limit_behaves_as_unlimited(engine, specials):
    specials.set_special("apple", NForX(n=3, x=Decimal("2.00"), limit=9))
    assert engine.cost("apple", 7) == Decimal("5.00")


def test_n_for_x_uses_marked_down_unit_cost_for_leftovers(engine, catalog, specials):
    catalog.set_markdown("apple", Decimal("0.25"))
    specials.set_special("apple", NForX(n=3, x=Decimal("2.00")))

    assert engine.cost("apple", 4) == Decimal("2.75")


def test_n_get_m_five_bread(engine, specials):
    specials.set_special("bread", NGetMAtXOff(n=2, m=1, x=Decimal("0.5")))
    assert engine.cost("bread", 5) == Decimal("13.50")


def test_n_get_m_free_item(engine, specials):
    specials.set_special("bread", NGetMAtXOff(n=1, m=1, x=Decimal("1")))
    assert engine.cost("bread", 4) == Decimal("6.00")


def test_n_get_m_partial_group_is_full_price(engine, specials):
    specials.set_special("bread", NGetMAtXOff(n=2, m=2, x=Decimal("0.5")))

    # 3 units never complete a group of 4
    assert engine.cost("bread", 3) == Decimal("9.00")


def test_n_get_m_with_limit(engine, specials):
    specials.set_special("bread", NGetMAtXOff(n=2, m=1, x=Decimal("0.5"), limit=6))

    # two discounted units inside the limit, 3 more at full price
    assert engine.cost("bread", 9) == 7 * Decimal("3.00") + 2 * Decimal("1.50")


@pytest.mark.parametrize("amount", range(0, 13))
def test_n_get_m_discounted_units_bounded(engine, specials, amount):
    specials.set_special("bread", NGetMAtXOff(n=2, m=1, x=Decimal("1")))

    discounted = (amount // 3) * 1
    assert engine.cost("bread", amount) == (amount - discounted) * Decimal("3.00")


def test_weighted_n_for_x_keeps_fractional_tail(engine, specials):
    specials.set_special("grapes", NForX(n=1, x=Decimal("2.00")))

    # one whole group for 2.00, the 0.5 tail at 2.50
    assert engine.cost("grapes", Decimal("1.5")) == Decimal("3.25")


def test_weighted_n_get_m_keeps_fractional_tail(engine, specials):
    specials.set_special("beef", NGetMAtXOff(n=1, m=1, x=Decimal("0.5")))

    # 2.0 forms one group (1 full, 1 half), the 0.5 tail is full price
    cost = engine.cost("beef", Decimal("2.5"))
    assert cost == Decimal("5.99") * Decimal("1.5") + Decimal("5.99") * Decimal("0.5")


def test_unsupported_special_in_registry(engine, specials):
    # bypass validation to simulate a special kind the engine does not know
    specials.specials["apple"] = object()

    with pytest.raises(UnsupportedSpecialType) as exc:
        engine.cost("apple", 1)
    assert exc.value.special_type == "object"


def test_n_for_x_below_limit_is_not_credited_for_unused_limit(engine, specials):
    """Four apples under a limit of six price as four, with no negative excess."""
    specials.set_special("apple", NForX(n=3, x=Decimal("2.00"), limit=6))
    assert engine.cost("apple", 4) == Decimal("3.00")
