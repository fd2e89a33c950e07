import pytest

from recipe_ingredient_parser.ingredients import ParsedIngredient, combine, parse


def test_combine_sums_matching_entries():
    """Test entries with the same name and unit are summed and sorted."""
    combined = combine([parse("1 cup flour"), parse("1 tsp salt"), parse("2 cups flour")])
    assert [(c.ingredient, c.unit) for c in combined] == [("flour", "cup"), ("salt", "teaspoon")]
    assert combined[0].quantity == pytest.approx(3)
    assert (combined[0].min_qty, combined[0].max_qty) == (pytest.approx(3), pytest.approx(3))


def test_combine_keeps_different_units_apart():
    """Test the unit is part of the key."""
    combined = combine([parse("1 cup flour"), parse("100 g flour")])
    assert sorted(c.unit for c in combined) == ["cup", "gram"]


def test_combine_none_is_contagious():
    """Test a missing quantity makes the sum missing."""
    swap = ParsedIngredient(
        quantity=None,
        unit=None,
        unit_plural=None,
        symbol=None,
        ingredient="quinoa",
        min_qty=None,
        max_qty=None,
    )
    other = parse("2 quinoa")
    combined = combine([swap, other])
    assert combined[0].quantity is None
    assert other.quantity == 2


def test_combine_does_not_mutate_inputs():
    """Test inputs keep their original quantities."""
    first, second = parse("1 cup flour"), parse("2 cups flour")
    combine([first, second])
    assert (first.quantity, second.quantity) == (1, 2)


def test_combine_empty():
    """Test an empty input gives an empty list."""
    assert combine([]) == []
