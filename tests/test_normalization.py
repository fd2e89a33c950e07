import pytest

from recipe_ingredient_parser.ingredients.normalization import (
    extract_comma_clauses,
    extract_dash_clauses,
    extract_parenthetical_segments,
    normalize_stray_fraction_separators,
    normalize_word_number_cans,
    remove_list_markers,
    remove_optional_label,
    tidy,
)


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("  sugar   cubes , ", "sugar cubes"),
        ("; salt", "salt"),
        (None, ""),
    ],
)
def test_tidy(input_text, expected):
    """Test whitespace collapsing and separator trimming."""
    assert tidy(input_text) == expected


def test_remove_optional_label(eng):
    """Test a leading "Optional:" label is removed and reported."""
    assert remove_optional_label("Optional: parsley", eng) == (True, "parsley")
    assert remove_optional_label("parsley", eng) == (False, "parsley")


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("- 500 g water", "500 g water"),
        ("• salt", "salt"),
        ("-1 cup milk", "-1 cup milk"),
    ],
)
def test_remove_list_markers(input_text, expected):
    """Test bullet markers are dropped when followed by a space."""
    assert remove_list_markers(input_text) == expected


def test_normalize_word_number_cans(eng):
    """Test spelled-out can counts are rewritten and the size is kept."""
    assert normalize_word_number_cans("Three 15-ounce cans of hominy", eng) == (
        "3 cans of hominy",
        "15-ounce",
        True,
    )
    line = "2 cans of hominy"
    assert normalize_word_number_cans(line, eng) == (line, None, False)


@pytest.mark.parametrize(
    "input_text, expected",
    [
        (
            "coconut water (Indonesian: air (kelapa)) x",
            ("coconut water x", ["Indonesian: air (kelapa)"]),
        ),
        ("1 cup olives (pitted) (optional)", ("1 cup olives", ["pitted", "optional"])),
        ("salt (", ("salt (", [])),
        ("salt )", ("salt )", [])),
    ],
)
def test_extract_parenthetical_segments(input_text, expected):
    """Test top-level parentheses are extracted and unbalanced ones kept."""
    assert extract_parenthetical_segments(input_text) == expected


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("1 cup Water, room temperature", ("1 cup Water", ["room temperature"])),
        ("1,5 kg Mehl", ("1,5 kg Mehl", [])),
    ],
)
def test_extract_comma_clauses(input_text, expected):
    """Test trailing comma clauses are split off but decimal commas stay."""
    assert extract_comma_clauses(input_text) == expected


def test_extract_dash_clauses():
    """Test a spaced dash after a word starts an annotation."""
    assert extract_dash_clauses("450 g cherries - stalks removed") == (
        "450 g cherries",
        ["stalks removed"],
    )
    assert extract_dash_clauses("1 - 2 cups flour") == ("1 - 2 cups flour", [])


def test_normalize_stray_fraction_separators():
    """Test odd separators between digits become slashes."""
    assert normalize_stray_fraction_separators("1÷2 cup") == "1/2 cup"
    assert normalize_stray_fraction_separators("1-2 cups") == "1-2 cups"
