import pytest

from recipe_ingredient_parser.ingredients.multiplier import (
    extract_container_size,
    extract_implicit_inch,
    extract_inch_descriptor,
    extract_multiplier,
)


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("2 x 100 g tomatoes", (2.0, "100 g tomatoes")),
        ("3x250ml broth", (3.0, "250ml broth")),
        ("2 100g tomatoes", (2.0, "100g tomatoes")),
        ("1 1.8kg chicken", (1.0, "1.8kg chicken")),
        ("1 1/2 cups flour", (1.0, "1 1/2 cups flour")),
        ("2 3-inch sticks cinnamon", (1.0, "2 3-inch sticks cinnamon")),
        ("2 eggs", (1.0, "2 eggs")),
    ],
)
def test_extract_multiplier(eng, input_text, expected):
    """Test explicit and stacked multipliers; length sizes are not multipliers."""
    assert extract_multiplier(input_text, eng) == expected


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("3-inch cinnamon stick", ("3-inch", "cinnamon stick")),
        ("2½ inch piece ginger", ("2½-inch", "piece ginger")),
        ("cinnamon stick", (None, "cinnamon stick")),
    ],
)
def test_extract_inch_descriptor(eng, input_text, expected):
    """Test inch sizes are normalized to "N-inch"."""
    assert extract_inch_descriptor(input_text, eng) == expected


def test_extract_implicit_inch(eng):
    """Test a count followed by "inch" and a unit becomes a size."""
    assert extract_implicit_inch("2", "inch piece ginger", eng) == (
        "1",
        "piece ginger",
        "2-inch",
    )
    assert extract_implicit_inch("2", "inch ginger", eng) is None
    assert extract_implicit_inch(None, "inch piece ginger", eng) is None


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("14-oz can tomatoes", ("14-oz", "can tomatoes")),
        ("of a 3.5-ounce package achiote", ("3.5-ounce", "package achiote")),
        ("can tomatoes", (None, "can tomatoes")),
    ],
)
def test_extract_container_size(eng, input_text, expected):
    """Test a size in front of a container word is split off."""
    assert extract_container_size(input_text, eng) == expected
