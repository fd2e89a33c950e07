import pytest

from recipe_ingredient_parser.ingredients.units import (
    TO_TASTE_UNIT,
    find_unit,
    get_preposition,
    get_symbol,
    unit_type,
)


@pytest.mark.parametrize(
    "input_text, expected_unit, expected_start",
    [
        ("cups flour", "cup", 0),
        ("100g tomatoes", "gram", 3),
        ("T water", "tablespoon", 0),
        ("t water", "teaspoon", 0),
        ("Tbs. water", "tablespoon", 0),
        ("t/s salt", "teaspoon", 0),
        ("c. water", "cup", 0),
        ("fl oz vegetable oil", "floz", 0),
        ("cloves garlic", "clove", 0),
        ("g of flour and 1 cup", "gram", 0),
    ],
)
def test_find_unit(eng, input_text, expected_unit, expected_start):
    """Test the earliest unit is found, honoring case-sensitive short names."""
    match = find_unit(input_text, eng)
    assert match.unit == expected_unit
    assert match.start == expected_start


def test_find_unit_details(eng):
    """Test plural, symbol and span of a match."""
    match = find_unit("cups flour", eng)
    assert (match.plural, match.symbol, match.text) == ("cups", "c", "cups")
    assert match.end == 4


def test_find_unit_to_taste(eng):
    """Test "to taste" is reported as a pseudo unit."""
    match = find_unit("salt to taste", eng)
    assert match.unit == TO_TASTE_UNIT
    assert match.start == 5


def test_problematic_unit_needs_context(eng):
    """Test cloves only count as a unit when garlic is mentioned."""
    assert find_unit("cloves", eng) is None


def test_find_unit_empty(eng):
    """Test empty text has no unit."""
    assert find_unit("", eng) is None


@pytest.mark.parametrize(
    "unit, expected",
    [
        ("tbsp", "tbs"),
        ("T", "tbs"),
        ("gram", "g"),
        ("CUP", "c"),
        ("pinch", ""),
        ("nonsense", ""),
    ],
)
def test_get_symbol(unit, expected):
    """Test symbol lookup by key or name."""
    assert get_symbol(unit) == expected


def test_get_symbol_other_language():
    """Test symbol lookup in another language's table."""
    assert get_symbol("kg", "deu") == "kg"


def test_get_preposition(eng):
    """Test preposition lookup is case-insensitive."""
    assert get_preposition("Of", eng) == "of"
    assert get_preposition("flour", eng) is None


@pytest.mark.parametrize(
    "key, expected",
    [("gram", "weight"), ("cup", "volume"), ("inch", "length"), (None, None)],
)
def test_unit_type(key, expected):
    """Test unit type lookup."""
    assert unit_type(key) == expected
