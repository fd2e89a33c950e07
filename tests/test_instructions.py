import pytest

from recipe_ingredient_parser.ingredients.instructions import (
    extract_instructions,
    is_instruction_word,
    remove_lone_separators,
    split_glued_instructions,
)


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("ripe tomatoes peeled and diced", ("tomatoes and", ["ripe", "peeled", "diced"])),
        ("finely chopped parsley", ("parsley", ["finely chopped"])),
        ("black pepper freshly", ("black pepper", ["freshly"])),
        ("sun-dried tomatoes", ("sun-dried tomatoes", [])),
        ("flour", ("flour", [])),
    ],
)
def test_extract_instructions(eng, input_text, expected):
    """Test preparation phrases are removed in order, adverbs included."""
    assert extract_instructions(input_text, eng) == expected


def test_is_instruction_word(eng):
    """Test single-word lookup ignores case and trailing punctuation."""
    assert is_instruction_word("Chopped,", eng)
    assert is_instruction_word("finely", eng)
    assert not is_instruction_word("flour", eng)


def test_split_glued_instructions(eng):
    """Test glued instruction pairs are spaced out, other words left alone."""
    assert split_glued_instructions("chopped/diced onion", eng) == "chopped / diced onion"
    assert split_glued_instructions("salt/pepper", eng) == "salt/pepper"


def test_remove_lone_separators():
    """Test separators standing alone between words are dropped."""
    assert remove_lone_separators("salt & pepper") == "salt pepper"
    assert remove_lone_separators("salt&pepper") == "salt&pepper"


def test_remove_lone_separators_keeping_slash():
    """Test a spaced slash survives while lone joiners are still dropped."""
    assert remove_lone_separators("yogurt / vegan yogurt", keep_slash=True) == "yogurt / vegan yogurt"
    assert remove_lone_separators("salt & pepper", keep_slash=True) == "salt pepper"
    assert remove_lone_separators("yogurt / vegan yogurt") == "yogurt vegan yogurt"
