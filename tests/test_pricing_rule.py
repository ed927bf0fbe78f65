import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import pytest
from pricing.domain import PricingRule


@pytest.fixture
def three_for_two():
    return PricingRule("apple", "discount", {"quantity": 3, "discountedQuantity": 2})


@pytest.fixture
def bulk():
    return PricingRule("ipad", "reducedPrice", {"quantity": 5, "bulkPrice": 8})


@pytest.fixture
def combined():
    return PricingRule(
        "hdmi", "both", {"quantity": 3, "discountedQuantity": 2, "bulkPrice": 5}
    )


# ТЕСТЫ discount
def test_discount_example(three_for_two):
    """7 штук по 3 за 2: 2 группы * 2 + 1 = 5 оплачиваемых"""
    assert three_for_two.apply(7, 10) == 50


@pytest.mark.parametrize("count", range(0, 25))
def test_discount_matches_formula(three_for_two, count):
    expected = (count // 3 * 2 + count % 3) * 10
    assert three_for_two.apply(count, 10) == expected


def test_discount_leftovers_pay_full_price(three_for_two):
    assert three_for_two.apply(2, 10) == 20
    assert three_for_two.apply(3, 10) == 20
    assert three_for_two.apply(4, 10) == 30


def test_discount_with_float_price(three_for_two):
    assert three_for_two.apply(6, 0.5) == pytest.approx(2.0)


# ТЕСТЫ reducedPrice
def test_reduced_price_threshold_is_strict(bulk):
    assert bulk.apply(5, 10) == 50
    assert bulk.apply(6, 10) == 48


def test_reduced_price_applies_to_all_units(bulk):
    assert bulk.apply(10, 10) == 80


def test_reduced_price_below_threshold(bulk):
    assert bulk.apply(1, 10) == 10


# ТЕСТЫ both
def test_both_compares_billed_units_not_raw_count(combined):
    """4 штуки -> 3 оплачиваемых, 3 не больше порога 3 -> обычная цена"""
    assert combined.apply(4, 10) == 30


def test_both_bulk_price_on_billed_units(combined):
    """10 штук -> 3*2+1 = 7 оплачиваемых > 3 -> 7 * 5"""
    assert combined.apply(10, 10) == 35


def test_both_bulk_price_once_billed_units_exceed_threshold(combined):
    # 5 штук: billed = 2 + 2 = 4 > 3 -> bulk
    assert combined.apply(5, 10) == 20
    # 3 штуки: billed = 2 -> обычная цена
    assert combined.apply(3, 10) == 20


def test_billed_units(three_for_two, bulk, combined):
    assert three_for_two.billed_units(7) == 5
    assert combined.billed_units(10) == 7
    assert bulk.billed_units(7) == 7


# Общие свойства
def test_zero_count_is_zero(three_for_two, bulk, combined):
    for rule in (three_for_two, bulk, combined):
        assert rule.apply(0, 10) == 0


def test_apply_is_idempotent(three_for_two, bulk, combined):
    for rule in (three_for_two, bulk, combined):
        first = rule.apply(11, 7)
        assert all(rule.apply(11, 7) == first for _ in range(5))


def test_apply_does_not_change_rule(combined):
    before = combined.definition
    combined.apply(100, 3)
    assert combined.definition == before


def test_zero_price(three_for_two, bulk):
    assert three_for_two.apply(9, 0) == 0
    assert bulk.apply(3, 0) == 0
