import logging

import pytest

from recipe_ingredient_parser.i18n import (
    available_languages,
    get_profile,
    get_unit_system,
)


def test_available_languages():
    """Test every bundled language is listed."""
    assert available_languages() == ["ces", "deu", "eng", "esp", "fra", "hun", "por"]


@pytest.mark.parametrize("code", ["ces", "deu", "eng", "esp", "fra", "hun", "por"])
def test_profiles_load(code):
    """Test each profile loads, is shared, and keys units by English names."""
    profile = get_profile(code)
    assert profile is get_profile(code)
    assert profile.code == code
    assert profile.units
    assert set(profile.units) <= set(get_profile("eng").units)


def test_unknown_language_warns(caplog):
    """Test an unsupported code logs a warning and yields None."""
    with caplog.at_level(logging.WARNING):
        assert get_profile("qqq") is None
    assert "qqq" in caplog.text


@pytest.mark.parametrize(
    "unit, expected",
    [
        ("gram", "metric"),
        ("cup", "americanVolumetric"),
        ("ounce", "imperial"),
        ("pinch", None),
        ("unknown", None),
        (None, None),
    ],
)
def test_get_unit_system(unit, expected):
    """Test measurement system lookup by canonical unit key."""
    assert get_unit_system(unit) == expected


def test_metadata_merged_from_english(deu):
    """Test non-English units inherit system and type from the English table."""
    assert deu.units["gram"]["system"] == "metric"
    assert deu.unit_type("gram") == "weight"
    assert deu.unit_symbol("gram") == "g"


def test_delimiters(eng, deu):
    """Test decimal and magnitude delimiters follow the locale."""
    assert (eng.decimal_delimiter, eng.magnitude_delimiter) == (".", ",")
    assert (deu.decimal_delimiter, deu.magnitude_delimiter) == (",", ".")


def test_profile_unit_helpers(eng):
    """Test unit name, plural, symbol and type accessors."""
    assert "cups" in eng.unit_names("cup")
    assert eng.unit_plural("teaspoon") == "teaspoons"
    assert eng.unit_symbol("teaspoon") == "tsp"
    assert eng.unit_symbol("pinch") is None
    assert eng.unit_names("unknown") == []
    assert eng.unit_keys_of_type("length") == ["inch", "centimetre"]
