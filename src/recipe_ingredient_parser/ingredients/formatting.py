"""Render a parsed ingredient back into a human readable line."""

import math
from typing import Optional

from ..i18n import get_profile
from .models import ParsedIngredient

# --- Constants ---

# Three significant decimals of repeating fractions
REPEATING_FRACTIONS = {
    "333": "1/3",
    "666": "2/3",
    "667": "2/3",
    "111": "1/9",
    "222": "2/9",
    "444": "4/9",
    "555": "5/9",
    "556": "5/9",
    "777": "7/9",
    "778": "7/9",
    "888": "8/9",
    "889": "8/9",
    "166": "1/6",
    "167": "1/6",
    "833": "5/6",
    "142": "1/7",
    "143": "1/7",
    "285": "2/7",
    "286": "2/7",
    "428": "3/7",
    "429": "3/7",
    "571": "4/7",
    "714": "5/7",
    "857": "6/7",
}


# --- Functions ---


def format_fraction(fraction: float) -> Optional[str]:
    """Format the fractional part of a quantity ("1/2", "1/3", "3/8").

    Returns None when there is no fractional part at three decimals.
    """
    digits = format(fraction, "#.3g").split(".")[1]
    if not digits.strip("0"):
        return None
    if digits in REPEATING_FRACTIONS:
        return REPEATING_FRACTIONS[digits]
    denominator = 10 ** len(digits)
    numerator = int(digits)
    divisor = math.gcd(numerator, denominator)
    return f"{numerator // divisor}/{denominator // divisor}"


def pretty_printing_press(ingredient: ParsedIngredient, language: str = "eng") -> str:
    """Print an ingredient as "1 1/2 cups flour".

    The unit is pluralized when the whole part is above one, or when there is
    a whole part and a fraction. Without a quantity only the name is printed.

    Args:
        ingredient: A parsed ingredient.
        language: Language whose plural unit names are used.

    Returns:
        The formatted line.

    Examples:
        >>> pretty_printing_press(parse("1 1/2 cups flour"))
        '1 1/2 cups flour'
        >>> pretty_printing_press(parse("salt"))
        'salt'
    """
    if not ingredient.quantity:
        return ingredient.ingredient or ""

    whole = math.floor(ingredient.quantity)
    remainder = round(ingredient.quantity - whole, 3)
    if remainder >= 1:
        whole += 1
        remainder = 0
    fraction = format_fraction(remainder) if remainder else None

    pieces = []
    if whole:
        pieces.append(str(whole))
    if fraction:
        pieces.append(fraction)
    quantity = " ".join(pieces)

    unit = ingredient.unit
    if unit and (whole > 1 or (whole and fraction)):
        profile = get_profile(language)
        plural = profile.unit_plural(unit) if profile else None
        unit = plural or unit

    return f"{quantity}{' ' + unit if unit else ''} {ingredient.ingredient}"
