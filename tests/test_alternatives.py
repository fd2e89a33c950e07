import pytest

from recipe_ingredient_parser.ingredients.alternatives import (
    AlternativeCandidate,
    apply_alternatives,
    promote_annotations,
    split_or_alternatives,
    split_slash_alternatives,
)
from recipe_ingredient_parser.ingredients.models import ParsedIngredient


def _record(ingredient, quantity=0, unit=None):
    return ParsedIngredient(
        quantity=quantity,
        unit=unit,
        unit_plural=None,
        symbol=None,
        ingredient=ingredient,
        min_qty=quantity,
        max_qty=quantity,
    )


def _fragment(text):
    return _record(text)


def test_split_slash_alternatives():
    """Test spaced slashes split off alternatives, with pure swaps marked."""
    line, candidates = split_slash_alternatives("8 oz / 225g pasta", _fragment)
    assert line == "8 oz"
    assert [(c.record.ingredient, c.kind, c.pure_swap) for c in candidates] == [
        ("225g pasta", "slash", False)
    ]

    line, candidates = split_slash_alternatives("yogurt / vegan yogurt / coconut milk", _fragment)
    assert line == "yogurt"
    assert [c.pure_swap for c in candidates] == [True, True]


def test_split_slash_ignores_fractions():
    """Test unspaced slashes are left alone."""
    assert split_slash_alternatives("1/2 cup milk", _fragment) == ("1/2 cup milk", [])


@pytest.mark.parametrize(
    "input_text, expected_line, expected_alternatives",
    [
        ("2 cups oats or quinoa", "2 cups oats", ["quinoa"]),
        ("3 or 4 eggs", "3 or 4 eggs", []),
        ("ground or whole black peppercorns", "ground or whole black peppercorns", []),
        ("salt", "salt", []),
    ],
)
def test_split_or_alternatives(eng, input_text, expected_line, expected_alternatives):
    """Test "or" splits, except numeric ranges and instruction pairs."""
    line, candidates = split_or_alternatives(input_text, eng, _fragment)
    assert line == expected_line
    assert [c.record.ingredient for c in candidates] == expected_alternatives


def test_promote_annotations(eng):
    """Test quantity-like annotations become alternatives and asides stay."""
    kept, candidates = promote_annotations(
        ["250 ml; see note", "page 237", "Note 1", "chopped 2 times"], eng, _fragment
    )
    assert kept == ["see note", "page 237", "Note 1", "chopped 2 times"]
    assert [(c.record.ingredient, c.kind) for c in candidates] == [("250 ml", "annotation")]


def test_apply_alternatives_reconciles():
    """Test swaps lose their quantity and unitless alternatives inherit the unit."""
    primary = _record("oats", quantity=2, unit="cup")
    candidates = [
        AlternativeCandidate(_record("quinoa"), "or", True),
        AlternativeCandidate(_record("barley", quantity=3), "slash", False),
        AlternativeCandidate(_record("rice", quantity=225, unit="gram"), "slash", False),
    ]
    result = apply_alternatives(primary, candidates)
    swap, inherited, own = result.alternatives
    assert (swap.quantity, swap.unit, swap.ingredient) == (None, None, "quinoa")
    assert (inherited.quantity, inherited.unit) == (3, "cup")
    assert (own.quantity, own.unit) == (225, "gram")
    assert primary.alternatives == []


def test_apply_alternatives_borrows_ingredient():
    """Test an empty primary ingredient takes the first alternative's."""
    primary = _record("", quantity=8, unit="ounce")
    candidates = [AlternativeCandidate(_record("pasta", 225, "gram"), "slash", False)]
    assert apply_alternatives(primary, candidates).ingredient == "pasta"


def test_apply_alternatives_without_candidates():
    """Test the primary record is returned untouched."""
    primary = _record("milk", 1, "cup")
    assert apply_alternatives(primary, []) is primary
