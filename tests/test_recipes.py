import pandas as pd
import pytest

from recipe_ingredient_parser.ingredients import parse
from recipe_ingredient_parser.recipes import (
    DATAFRAME_COLUMNS,
    ingredients_to_dataframe,
    multi_line_parse,
    split_lines,
)


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("1 cup flour\n2 eggs, salt", ["1 cup flour", "2 eggs", "salt"]),
        ("\U0001f449\U0001f3fb 1 cup sugar \U0001f449 2 eggs", ["1 cup sugar", "2 eggs"]),
        ("1 cup milk\r\n\r\n", ["1 cup milk"]),
    ],
)
def test_split_lines(input_text, expected):
    """Test recipe text splits on line breaks, commas and bullets."""
    assert split_lines(input_text) == expected


def test_multi_line_parse():
    """Test each fragment is parsed and nameless ones are dropped."""
    results = multi_line_parse("1 cup flour\n2 eggs\n2")
    assert [r.ingredient for r in results] == ["flour", "eggs"]
    assert results[0].unit == "cup"


def test_multi_line_parse_malformed():
    """Test non-string input gives no ingredients."""
    assert multi_line_parse(None) == []


def test_ingredients_to_dataframe():
    """Test one row per record with joined instructions."""
    df = ingredients_to_dataframe(
        [parse("1 cup tomatoes, peeled and diced"), parse("2 eggs")]
    )
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == DATAFRAME_COLUMNS
    assert len(df) == 2
    assert df.loc[0, "instructions"] == "peeled; diced"
    assert df.loc[1, "instructions"] == ""
    assert df.loc[0, "unit"] == "cup"


def test_ingredients_to_dataframe_empty():
    """Test an empty batch still carries the columns."""
    df = ingredients_to_dataframe([])
    assert df.empty
    assert list(df.columns) == DATAFRAME_COLUMNS
