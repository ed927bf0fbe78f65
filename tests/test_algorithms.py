import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from decimal import Decimal
from pricing.algorithms import (
    billed_units,
    combined_total,
    discount_total,
    reduced_price_total,
)


def test_billed_units_groups_and_leftover():
    assert billed_units(7, 3, 2) == 5
    assert billed_units(6, 3, 2) == 4
    assert billed_units(2, 3, 2) == 2
    assert billed_units(0, 3, 2) == 0


def test_billed_units_is_int_for_float_definition():
    result = billed_units(7, 3.0, 2.0)
    assert result == 5
    assert isinstance(result, int)


def test_discount_total_free_group():
    # 2 за 0: каждая пара бесплатна
    assert discount_total(5, 10, 2, 0) == 10


def test_discount_quantity_one_charges_discounted_quantity_each():
    assert discount_total(4, 10, 1, 1) == 40
    assert discount_total(4, 10, 1, 0) == 0


def test_reduced_price_total():
    assert reduced_price_total(5, 10, 5, 8) == 50
    assert reduced_price_total(6, 10, 5, 8) == 48


def test_combined_total_examples():
    assert combined_total(4, 10, 3, 2, 5) == 30
    assert combined_total(10, 10, 3, 2, 5) == 35


def test_decimal_prices():
    assert discount_total(7, Decimal("1.10"), 3, 2) == Decimal("5.50")
    assert reduced_price_total(6, Decimal("1.10"), 5, Decimal("0.90")) == Decimal("5.40")
