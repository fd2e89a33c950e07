import pytest

from recipe_ingredient_parser.ingredients.quantity import (
    canonical_quantity,
    clean_quantity_text,
    find_quantity,
)


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("1 1/2 cups flour", ("1.5", "cups flour")),
        ("10 to 20 almonds", ("10-20", "almonds")),
        ("1 to 2 chicken breasts", ("1-2", "chicken breasts")),
        ("a pinch of salt", ("1", "pinch of salt")),
        ("one cup sugar", ("1", "cup sugar")),
        ("½ cup milk", ("0.5", "cup milk")),
        ("1½ cups milk", ("1.5", "cups milk")),
        ("½-1 cup water", ("0.5-1", "cup water")),
        ("Juice from 1–2 limes", ("1-2", "Juice from limes")),
        ("1,000 g flour", ("1000", "g flour")),
        ("1 & 1/2 cups water", ("1.5", "cups water")),
        ("salt", (None, "salt")),
    ],
)
def test_find_quantity(eng, input_text, expected):
    """Test the leftmost quantity is found and removed."""
    assert find_quantity(input_text, eng) == expected


def test_find_quantity_comma_locale(deu):
    """Test comma decimals in a comma-delimited language."""
    assert find_quantity("1,5 kg Mehl", deu) == ("1,5", "kg Mehl")


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("1 & 1/2 cups", "1 1/2 cups"),
        ("1 /2 cup", "1/2 cup"),
        ("1\u200b cup", "1 cup"),
        ("1\u20442 cup", "1/2 cup"),
    ],
)
def test_clean_quantity_text(input_text, expected):
    """Test character-level repairs ahead of quantity detection."""
    assert clean_quantity_text(input_text) == expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("2½", "2.5"),
        ("1 1/2", "1.5"),
        ("3", "3"),
    ],
)
def test_canonical_quantity(eng, token, expected):
    """Test single quantity tokens are canonicalized."""
    assert canonical_quantity(token, eng) == expected
