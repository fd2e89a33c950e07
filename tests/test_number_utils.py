from decimal import Decimal

import pytest

from recipe_ingredient_parser.ingredients.number_utils import (
    convert_from_fraction,
    convert_to_number,
    expand_unicode_fractions,
    keep_three_decimals,
    text_to_number,
)


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("1/2", "0.5"),
        ("1 1/2", "1.5"),
        ("1/3", "0.333"),
        ("2/3", "0.666"),
        ("1/8", "0.125"),
        ("1/4-1/2", "0.25-0.5"),
        ("½", "0.5"),
        ("2½", "2.5"),
        ("3", "3"),
        ("flour", "flour"),
        ("1/0", "1/0"),
    ],
)
def test_convert_from_fraction(input_text, expected):
    """Test fraction, mixed number and range conversion to decimal text."""
    assert convert_from_fraction(input_text) == expected


def test_convert_from_fraction_comma_locale():
    """Test the locale decimal delimiter is used."""
    assert convert_from_fraction("1 1/2", ",") == "1,5"


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("0.333", 0.333),
        ("2", 2.0),
        ("0.6665", 0.667),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("NaN", 0.0),
        ("Infinity", 0.0),
    ],
)
def test_convert_to_number(input_text, expected):
    """Test decimal parsing with half-up rounding and a zero fallback."""
    assert convert_to_number(input_text) == pytest.approx(expected)


def test_convert_to_number_comma_locale():
    """Test comma decimals are read back with the locale delimiter."""
    assert convert_to_number("1,5", ",") == pytest.approx(1.5)


@pytest.mark.parametrize(
    "value, delimiter, expected",
    [
        (Decimal(2) / Decimal(3), ".", "0.666"),
        (1.5, ",", "1,5"),
        (Decimal(3), ".", "3"),
    ],
)
def test_keep_three_decimals(value, delimiter, expected):
    """Test truncation to three decimals."""
    assert keep_three_decimals(value, delimiter) == expected


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("2½ cups", "2 1/2 cups"),
        ("¾ cup", "3/4 cup"),
        ("no fractions", "no fractions"),
    ],
)
def test_expand_unicode_fractions(input_text, expected):
    """Test vulgar fraction glyphs become ASCII fractions."""
    assert expand_unicode_fractions(input_text) == expected


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("one", 1),
        ("Twelve", 12),
        ("twenty-one", 21),
        ("one hundred", 100),
        ("one thousand two hundred", 1200),
        ("banana", None),
        ("", None),
    ],
)
def test_text_to_number(eng, input_text, expected):
    """Test English number words."""
    assert text_to_number(input_text, eng) == expected


def test_text_to_number_german(deu):
    """Test number words come from the selected language."""
    assert text_to_number("zwei", deu) == 2
    assert text_to_number("two", deu) is None
