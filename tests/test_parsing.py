import logging

import pytest

from recipe_ingredient_parser.i18n import get_profile
from recipe_ingredient_parser.ingredients import IngredientParser, ParsedIngredient, parse
from recipe_ingredient_parser.ingredients.flags import flag_patterns
from recipe_ingredient_parser.ingredients.number_utils import (
    UNICODE_FRACTIONS,
    convert_from_fraction,
    convert_to_number,
)
from recipe_ingredient_parser.ingredients.units import unit_patterns


def test_parse_full_record():
    """Test the complete dictionary for a simple mixed-number line."""
    assert parse("1 1/2 teaspoon water").to_dict() == {
        "quantity": 1.5,
        "unit": "teaspoon",
        "unit_plural": "teaspoons",
        "symbol": "tsp",
        "ingredient": "water",
        "min_qty": 1.5,
        "max_qty": 1.5,
        "additional": None,
        "original_string": "1 1/2 teaspoon water",
    }


def test_parse_container_with_size():
    """Test a parenthesized size becomes an annotation of the container."""
    assert parse("1 (14.5 oz) can tomatoes").to_dict() == {
        "quantity": 1,
        "unit": "can",
        "unit_plural": "cans",
        "symbol": None,
        "ingredient": "tomatoes",
        "min_qty": 1,
        "max_qty": 1,
        "additional": "14.5 oz",
        "original_string": "1 (14.5 oz) can tomatoes",
    }


def test_parse_without_quantity():
    """Test a bare name yields zero quantities and no unit."""
    result = parse("Powdered Sugar")
    assert (result.quantity, result.min_qty, result.max_qty) == (0, 0, 0)
    assert result.unit is None
    assert result.ingredient == "Powdered Sugar"
    assert result.additional is None


@pytest.mark.parametrize(
    "input_text, expected_quantity, expected_unit, expected_ingredient",
    [
        ("3 cloves", 3, None, "cloves"),
        ("1 Tbs. water", 1, "tablespoon", "water"),
        ("1 t/s salt", 1, "teaspoon", "salt"),
        ("2 c. water", 2, "cup", "water"),
        ("3 fl oz vegetable oil", 3, "floz", "vegetable oil"),
        ("1 T water", 1, "tablespoon", "water"),
        ("1 t water", 1, "teaspoon", "water"),
        ("1/3 cup confectioners’ sugar", 0.333, "cup", "confectioners’ sugar"),
        ("1\u20442 cup carrot, shredded", 0.5, "cup", "carrot"),
        ("1 & 1/2 Cups Water, room temperature", 1.5, "cup", "Water"),
        ("- 500 g water", 500, "gram", "water"),
        ("1 healthy pinch each salt and pepper", 1, "pinch", "salt and pepper"),
        ("60ml cup (generous) superfine granulated sugar", 60, "milliliter", "superfine granulated sugar"),
    ],
)
def test_parse_quantity_unit_ingredient(input_text, expected_quantity, expected_unit, expected_ingredient):
    """Test quantity, unit and name across common spellings."""
    result = parse(input_text)
    assert result.quantity == pytest.approx(expected_quantity)
    assert result.unit == expected_unit
    assert result.ingredient == expected_ingredient


def test_parse_range():
    """Test ranges fill min and max with the low end as quantity."""
    result = parse("1 to 2 chicken breasts")
    assert (result.quantity, result.min_qty, result.max_qty) == (1, 1, 2)
    assert result.ingredient == "chicken breasts"


def test_parse_range_after_words():
    """Test a range further into the line is still found."""
    result = parse("Juice from 1–2 limes")
    assert (result.min_qty, result.max_qty) == (1, 2)
    assert result.ingredient == "Juice from limes"


@pytest.mark.parametrize(
    "input_text, expected_quantity, expected_unit, expected_multiplier, expected_per_item",
    [
        ("2 x 100 g tomatoes", 200, "gram", 2, 100),
        ("3x250ml broth", 750, "milliliter", 3, 250),
        ("2 x ½ cup milk", 1, "cup", 2, 0.5),
        ("3 x ¼ tsp salt", 0.75, "teaspoon", 3, 0.25),
    ],
)
def test_parse_multiplier(input_text, expected_quantity, expected_unit, expected_multiplier, expected_per_item):
    """Test multiplied quantities keep the per-item amount."""
    result = parse(input_text)
    assert result.quantity == pytest.approx(expected_quantity)
    assert result.unit == expected_unit
    assert result.multiplier == expected_multiplier
    assert result.per_item_quantity == pytest.approx(expected_per_item)
    assert result.to_dict()["per_item_max_qty"] == pytest.approx(expected_per_item)


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("2 x ½ cup milk", "milk"),
        ("3 x ¼ tsp salt", "salt"),
    ],
)
def test_parse_multiplier_with_fraction_glyph(input_text, expected):
    """Test a glyph after the multiplier sign is not left in the name."""
    assert parse(input_text).ingredient == expected


@pytest.mark.parametrize("glyph, fraction", list(UNICODE_FRACTIONS.items()))
def test_parse_every_fraction_glyph(glyph, fraction):
    """Test each vulgar fraction glyph parses alone and after a whole number."""
    single = parse(f"{glyph} teaspoon water")
    assert single.quantity == pytest.approx(convert_to_number(convert_from_fraction(fraction)))
    assert single.unit == "teaspoon"
    assert single.ingredient == "water"

    mixed = parse(f"2{glyph} teaspoon water")
    expected = convert_to_number(convert_from_fraction(f"2 {fraction}"))
    assert mixed.quantity == pytest.approx(expected)
    assert mixed.unit == "teaspoon"
    assert mixed.ingredient == "water"


def test_parse_stacked_count_of_one():
    """Test "1 1.8kg chicken" reads the weight, not a multiplier."""
    result = parse("1 1.8kg chicken")
    assert result.quantity == pytest.approx(1.8)
    assert result.unit == "kilogram"
    assert result.multiplier is None
    assert "multiplier" not in result.to_dict()


@pytest.mark.parametrize(
    "input_text, expected_quantity, expected_unit, expected_ingredient, expected_additional",
    [
        ("1 3-inch cinammon stick", 1, "stick", "cinammon", "3-inch"),
        ("1 1-inch piece ginger", 1, "piece", "ginger", "1-inch"),
        ("1 2½-inch piece ginger, peeled, finely grated", 1, "piece", "ginger", "2½-inch"),
        ("2 inch piece ginger", 1, "piece", "ginger", "2-inch"),
        ("Three 15-ounce cans of hominy, drained", 3, "can", "hominy", "15-ounce"),
        ("1 3-4 lb whole chicken", 1, None, "chicken", "3-4 lb"),
    ],
)
def test_parse_size_descriptors(input_text, expected_quantity, expected_unit, expected_ingredient, expected_additional):
    """Test sizes in front of the unit are kept as annotations."""
    result = parse(input_text)
    assert result.quantity == pytest.approx(expected_quantity)
    assert result.unit == expected_unit
    assert result.ingredient == expected_ingredient
    assert result.additional == expected_additional


def test_parse_number_word_with_size():
    """Test a spelled-out count with an inch size and instructions."""
    result = parse("One 1-inch piece ginger, peeled and thinly sliced")
    assert result.quantity == 1
    assert result.unit == "piece"
    assert result.ingredient == "ginger"
    assert result.instructions == ["peeled", "thinly sliced"]


def test_parse_fraction_of_package():
    """Test a package size stays in the name for packs."""
    result = parse("1/2 of a 3.5-ounce package prepared achiote seasoning")
    assert result.quantity == pytest.approx(0.5)
    assert result.unit == "pack"
    assert result.ingredient == "3.5-ounce prepared achiote seasoning"


@pytest.mark.parametrize(
    "input_text, expected_ingredient",
    [
        ("1 teaspoon salt, more to taste", "salt"),
        ("1 tbs pepper adjust to taste", "pepper"),
    ],
)
def test_parse_to_taste(input_text, expected_ingredient):
    """Test to-taste phrases set the flag and leave no annotation."""
    result = parse(input_text)
    assert result.to_taste
    assert result.ingredient == expected_ingredient
    assert result.additional is None


def test_parse_optional_and_to_serve():
    """Test flags found in parentheses and trailing clauses."""
    result = parse("(optional) finely chopped parsley (for garnish), to serve")
    assert result.optional
    assert result.to_serve
    assert result.ingredient == "parsley"
    assert result.instructions == ["finely chopped"]
    assert result.additional is None


def test_parse_optional_parenthetical():
    """Test instructions and flags inside parentheses."""
    result = parse("1 cup olives (pitted) (optional)")
    assert result.ingredient == "olives"
    assert result.instructions == ["pitted"]
    assert result.optional


def test_parse_approx():
    """Test a leading approximation word."""
    result = parse("about 1 cup ripe tomatoes, peeled and diced")
    assert result.approx
    assert result.ingredient == "tomatoes"
    assert result.instructions == ["ripe", "peeled", "diced"]
    assert result.to_dict()["approx"] is True


@pytest.mark.parametrize(
    "input_text, expected_ingredient, expected_instructions",
    [
        ("1 pound Brussels sprouts trimmed and halved", "Brussels sprouts", ["trimmed", "halved"]),
        ("6 large cloves of garlic, diced or grated", "garlic", ["large", "diced", "grated"]),
        ("480g raw almonds chopped coarsely", "almonds", ["raw", "chopped", "coarsely"]),
        ("200g medium oatmeal", "oatmeal", ["medium"]),
        ("152g lukewarm water", "water", ["lukewarm"]),
        ("25g walnut pieces (chopped)", "walnut pieces", ["chopped"]),
        ("2 tsp freshly ground or whole black peppercorns", "black peppercorns", ["freshly ground", "whole"]),
        ("1 cup nuts (toasted), finely chopped", "nuts", ["toasted", "finely chopped"]),
        ("1 dash \u200b\u200bground cinnamon", "cinnamon", ["ground"]),
    ],
)
def test_parse_instructions(input_text, expected_ingredient, expected_instructions):
    """Test preparation words are moved out of the ingredient name."""
    result = parse(input_text)
    assert result.ingredient == expected_ingredient
    assert result.instructions == expected_instructions


def test_parse_dash_annotation():
    """Test a spaced dash clause is split between instructions and notes."""
    result = parse("450 g cherries - stalks removed and stoned")
    assert result.ingredient == "cherries"
    assert result.instructions == ["stoned"]
    assert result.additional == "stalks removed"


def test_parse_long_annotation():
    """Test long trailing comments end up in additional."""
    line = (
        "2 cans full-fat coconut milk, 13.5 ounces, do not use “lite” – and if "
        "you like an even richer broth, add a third can."
    )
    result = parse(line)
    assert result.unit == "can"
    assert result.ingredient == "full-fat coconut milk"
    assert result.additional == (
        "13.5 ounces, do not use “lite” – and if you like an even richer broth, "
        "add a third can."
    )


def test_parse_spaced_fraction_with_page_reference():
    """Test "1 /2" is read as a fraction and page notes are kept."""
    result = parse("1 /2 cup Sprinkling Crumbs (page 237 )")
    assert result.quantity == pytest.approx(0.5)
    assert result.unit == "cup"
    assert result.additional == "page 237"


def test_parse_scant_with_parenthetical():
    """Test filler words are dropped and parentheses become notes."""
    result = parse("1 scant tablespoon thinly sliced scallion (green and white)")
    assert result.ingredient == "scallion"
    assert result.instructions == ["thinly sliced"]
    assert result.additional == "green and white"


def test_parse_comma_language():
    """Test comma decimals in German."""
    result = parse("1,5 kg Mehl", language="deu")
    assert result.quantity == pytest.approx(1.5)
    assert result.unit == "kilogram"
    assert result.ingredient == "Mehl"


@pytest.mark.parametrize(
    "phrase",
    get_profile("eng").approx
    + get_profile("eng").optional
    + get_profile("eng").to_serve
    + get_profile("eng").to_taste,
)
def test_flag_phrases_stay_out_of_name(phrase):
    """Test flag phrases never leak into the ingredient name."""
    assert parse(f"{phrase} of salt").ingredient == "salt"


@pytest.mark.parametrize(
    "name",
    [
        name
        for key in get_profile("eng").units
        if key != "clove"
        for name in get_profile("eng").unit_names(key)
    ],
)
def test_every_unit_name_is_recognized(name):
    """Test each English unit spelling is recognized after a quantity."""
    profile = get_profile("eng")
    key = next(k for k in profile.units if name in profile.unit_names(k))
    assert parse(f"1 {name} salt").unit == key


@pytest.mark.parametrize("line", [None, 42, ["1 cup"]])
def test_parse_malformed_input(line, caplog):
    """Test non-string input returns the zero record."""
    with caplog.at_level(logging.DEBUG):
        assert parse(line) == ParsedIngredient.zero()
    assert "Cannot parse" in caplog.text


def test_parse_unknown_language():
    """Test an unknown language still returns a record."""
    result = parse("2 eggs", language="xxx")
    assert result.quantity == 2
    assert result.ingredient == "eggs"


def test_parse_unknown_languages_share_pattern_caches():
    """Test unknown language codes do not grow the pattern caches."""
    parse("2 eggs", language="xxx")
    flag_size = flag_patterns.cache_info().currsize
    unit_size = unit_patterns.cache_info().currsize
    for code in ("xxx", "yyy", "zz", "qq-QQ"):
        assert parse("2 eggs", language=code).ingredient == "eggs"
    assert flag_patterns.cache_info().currsize == flag_size
    assert unit_patterns.cache_info().currsize == unit_size


def test_parse_keeps_spaced_slash_without_alternatives():
    """Test a spaced slash stays in the name when alternatives are off."""
    result = parse("1/2 cup yogurt / vegan yogurt")
    assert result.quantity == 0.5
    assert result.unit == "cup"
    assert result.ingredient == "yogurt / vegan yogurt"


@pytest.mark.parametrize(
    "input_text, expected_unit, expected_min, expected_max",
    [
        ("1/3 cup", "cup", 0.333, 0.333),
        ("2 to 3 cups", "cup", 2, 3),
    ],
)
def test_parse_without_ingredient_name(input_text, expected_unit, expected_min, expected_max):
    """Test a line with only an amount does not reuse its unit or range as the name."""
    result = parse(input_text)
    assert result.ingredient == ""
    assert result.unit == expected_unit
    assert result.min_qty == pytest.approx(expected_min)
    assert result.max_qty == pytest.approx(expected_max)


def test_unit_systems():
    """Test the unit system is attached when requested."""
    result = parse("1 cup milk", include_unit_systems=True)
    assert result.unit_system == "americanVolumetric"
    assert result.to_dict()["unit_system"] == "americanVolumetric"
    assert "unit_system" not in parse("1 cup milk").to_dict()


def test_ingredient_parser_binds_options():
    """Test the parser object forwards its language and options."""
    parser = IngredientParser(language="deu")
    results = parser.parse_many(["1,5 kg Mehl", "200 g Zucker"])
    assert [r.unit for r in results] == ["kilogram", "gram"]
    assert results[0].quantity == pytest.approx(1.5)


def test_alternative_from_parentheses():
    """Test a parenthesized quantity becomes an alternative."""
    result = parse("1 cup oats (250 ml)", include_alternatives=True)
    assert result.ingredient == "oats"
    assert result.additional is None
    [alternative] = result.alternatives
    assert alternative.quantity == pytest.approx(250)
    assert alternative.unit == "milliliter"
    assert alternative.ingredient is None


def test_alternative_ingredient_swap():
    """Test "or" with only a name swaps the ingredient."""
    result = parse("2 cups oats or quinoa", include_alternatives=True)
    assert result.ingredient == "oats"
    [alternative] = result.alternatives
    assert (alternative.quantity, alternative.unit, alternative.ingredient) == (None, None, "quinoa")


def test_alternative_slash_measure():
    """Test a slash measure lends its ingredient to the primary."""
    result = parse("8 oz / 225g pasta", include_alternatives=True)
    assert (result.quantity, result.unit, result.ingredient) == (8, "ounce", "pasta")
    [alternative] = result.alternatives
    assert (alternative.quantity, alternative.unit) == (225, "gram")
    assert result.to_dict()["alternatives"][0]["ingredient"] == "pasta"


def test_no_alternatives():
    """Test a plain line has no alternatives even when enabled."""
    result = parse("1 1/2 cups milk", include_alternatives=True)
    assert result.alternatives == []
    assert "alternatives" not in result.to_dict()
