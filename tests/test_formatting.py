import pytest

from recipe_ingredient_parser.ingredients import ParsedIngredient, parse, pretty_printing_press
from recipe_ingredient_parser.ingredients.formatting import format_fraction


def _record(quantity, unit, ingredient):
    return ParsedIngredient(
        quantity=quantity,
        unit=unit,
        unit_plural=None,
        symbol=None,
        ingredient=ingredient,
        min_qty=quantity,
        max_qty=quantity,
    )


@pytest.mark.parametrize(
    "fraction, expected",
    [
        (0.5, "1/2"),
        (0.25, "1/4"),
        (0.375, "3/8"),
        (0.333, "1/3"),
        (0.667, "2/3"),
        (0.0, None),
    ],
)
def test_format_fraction(fraction, expected):
    """Test reduced and repeating fractions."""
    assert format_fraction(fraction) == expected


def test_pretty_print_parsed_line():
    """Test a parsed mixed number prints with a plural unit."""
    assert pretty_printing_press(parse("1 1/2 teaspoon water")) == "1 1/2 teaspoons water"


@pytest.mark.parametrize(
    "record, expected",
    [
        (_record(2, "cup", "flour"), "2 cups flour"),
        (_record(1, "cup", "flour"), "1 cup flour"),
        (_record(0.5, "cup", "milk"), "1/2 cup milk"),
        (_record(1.333, None, "eggs"), "1 1/3 eggs"),
        (_record(0, None, "salt"), "salt"),
    ],
)
def test_pretty_printing_press(record, expected):
    """Test pluralization rules and quantity-less records."""
    assert pretty_printing_press(record) == expected


def test_pretty_print_without_quantity():
    """Test a line without a quantity prints only the name."""
    assert pretty_printing_press(parse("salt")) == "salt"
