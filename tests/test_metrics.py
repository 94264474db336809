import math
from types import SimpleNamespace

import pytest

from loigen.domain.metrics import (
    currency,
    derive_metrics,
    first_name,
    ltv,
    parse_amount,
    rounded_balance,
    short_address,
)


def test_first_name_takes_first_word():
    assert first_name("Jane Q. Doe") == "Jane"
    assert first_name("  Cher  ") == "Cher"


@pytest.mark.parametrize("value", [None, "", "   ", float("nan")])
def test_first_name_missing_is_empty(value):
    assert first_name(value) == ""


def test_short_address_drops_unit_city_and_house_number():
    assert short_address("123 Main St, Unit 4, Springfield") == "Main St"
    assert short_address("456 Oak Ave") == "Oak Ave"


def test_short_address_unit_marker_without_comma():
    assert short_address("789 Pine Rd Apt 2") == "Pine Rd"
    assert short_address("12 Elm Street UNIT B, Town") == "Elm Street"


def test_short_address_marker_must_be_whole_word():
    # "Community" contains "unit", "Aptos" contains "apt"
    assert short_address("10 Community Dr") == "Community Dr"
    assert short_address("55 Aptos Way, CA") == "Aptos Way"


def test_short_address_without_house_number_keeps_all_words():
    assert short_address("Main St, Springfield") == "Main St"


def test_short_address_collapses_whitespace():
    assert short_address("  7   Long    Lane ") == "Long Lane"


def test_short_address_missing():
    assert short_address(None) == ""
    assert short_address("") == ""


def test_parse_amount_strips_currency_noise():
    assert parse_amount("$123,456") == pytest.approx(123456.0)
    assert parse_amount(" 45.5% ") == pytest.approx(45.5)
    assert parse_amount(250000) == pytest.approx(250000.0)


@pytest.mark.parametrize("value", [None, "", "n/a", float("nan"), float("inf"), True, object()])
def test_parse_amount_garbage_is_none(value):
    assert parse_amount(value) is None


def test_rounded_balance_floors_to_thousand():
    assert rounded_balance("$123,456") == 123000
    assert rounded_balance(199_999.99) == 199000
    assert rounded_balance(5000) == 5000


@pytest.mark.parametrize("value", [None, 0, "0", "", "abc", "$0.00"])
def test_rounded_balance_missing_is_zero(value):
    assert rounded_balance(value) == 0


def test_currency_formats_whole_dollars():
    assert currency(250000) == "$250,000"
    assert currency("$1,234,567.40") == "$1,234,567"
    assert currency(-1500) == "-$1,500"


def test_currency_missing_is_zero():
    assert currency(0) == "$0"
    assert currency(None) == "$0"
    assert currency("garbage") == "$0"


def test_ltv_is_percent_of_list_price():
    assert ltv(200000, 250000) == pytest.approx(80.0)
    assert ltv("$195,500", "200000") == pytest.approx(97.75)


@pytest.mark.parametrize(
    "balance,price",
    [
        (None, 250000),
        (200000, None),
        (200000, 0),
        (0, 250000),
        ("abc", 250000),
        (-5000, 250000),
        (5000, -250000),
    ],
)
def test_ltv_degenerate_inputs_are_zero(balance, price):
    value = ltv(balance, price)
    assert value == 0.0
    assert math.isfinite(value)


def test_derive_metrics_from_record_like_object():
    rec = SimpleNamespace(
        list_price=250000.0,
        mortgage_balance=230500.0,
        address="42 Harbor Blvd, Apt 9, Bayside",
        agent_name="Sam Lee",
    )

    m = derive_metrics(rec)

    assert m.ltv == pytest.approx(92.2)
    assert m.rounded_balance == 230000
    assert m.short_address == "Harbor Blvd"
    assert m.agent_first_name == "Sam"


@pytest.mark.parametrize(
    "amount,expected",
    [
        (1234.5, "$1,235"),
        (2.5, "$3"),
        ("$999,999.50", "$1,000,000"),
        (-1500.5, "-$1,501"),
        (1234.49, "$1,234"),
    ],
)
def test_currency_rounds_halves_away_from_zero(amount, expected):
    assert currency(amount) == expected
