"""Tests for the ATM fee label rule."""

from decimal import Decimal

import pytest

from src.summary.fee_label import format_atm_fee, format_eur, format_percentage

NBSP = "\u00a0"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (12, "12%"),
        (Decimal("12.5"), "12.5%"),
        (Decimal("12.50"), "12.5%"),
        (10, "10%"),
        (Decimal("10.0"), "10%"),
        (1.7, "1.7%"),
        ("2.25", "2.25%"),
        (Decimal("10.001"), "10%"),
        (Decimal("0.125"), "0.13%"),
        (-5, "-5%"),
        (100, "100%"),
        (-100, "-100%"),
    ],
)
def test_small_values_render_as_percentages(raw, expected):
    assert format_atm_fee(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (150, f"150,00{NBSP}€"),
        (Decimal("100.01"), f"100,01{NBSP}€"),
        (Decimal("1234.5"), f"1.234,50{NBSP}€"),
        (Decimal("2500000"), f"2.500.000,00{NBSP}€"),
        (Decimal("-250.555"), f"-250,56{NBSP}€"),
    ],
)
def test_large_values_render_as_eur_amounts(raw, expected):
    assert format_atm_fee(raw) == expected


def test_percentage_labels_have_no_trailing_zero_artifacts():
    for raw in (Decimal("0.5"), Decimal("3.10"), Decimal("99.90"), Decimal("42.00")):
        label = format_atm_fee(raw)
        assert label.endswith("%")
        body = label[:-1]
        if "." in body:
            assert not body.endswith("0")
        assert not body.endswith(".")


@pytest.mark.parametrize("raw", [0, 0.0, Decimal("0"), Decimal("-0.00"), "0"])
def test_zero_is_free(raw):
    assert format_atm_fee(raw) == "Free"


@pytest.mark.parametrize("raw", [None, "", "abc", float("nan"), float("inf"), Decimal("NaN"), True, object()])
def test_missing_or_non_numeric_values_fall_back_to_dash(raw):
    assert format_atm_fee(raw) == "-"


def test_threshold_tie_goes_to_percentage_and_threshold_is_configurable():
    assert format_atm_fee(50, percentage_threshold=50) == "50%"
    assert format_atm_fee(51, percentage_threshold=50) == f"51,00{NBSP}€"
    assert format_atm_fee(150, percentage_threshold=200) == "150%"


def test_formatting_helpers_directly():
    assert format_percentage(Decimal("7")) == "7%"
    assert format_percentage(Decimal("7.10")) == "7.1%"
    assert format_eur(Decimal("999.999")) == f"1.000,00{NBSP}€"


@pytest.mark.parametrize(
    "raw, magnitude",
    [
        (Decimal("1e26"), 26),
        (1e30, 30),
        ("1e300", 300),
        (Decimal("-1e40"), 40),
    ],
)
def test_huge_amounts_still_render(raw, magnitude):
    digits = f"{10 ** magnitude:,}".replace(",", ".")
    sign = "-" if str(raw).startswith("-") else ""

    assert format_atm_fee(raw) == f"{sign}{digits},00{NBSP}€"


def test_huge_fractional_percentage_still_renders():
    raw = Decimal("1000000000000000000000000000000.125")

    assert format_atm_fee(raw, percentage_threshold=Decimal("1e40")) == "1000000000000000000000000000000.13%"
