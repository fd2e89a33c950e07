import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from ..i18n.profile import LanguageProfile

# --- Constants ---

UNICODE_FRACTIONS = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅐": "1/7",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
    "⅑": "1/9",
    "⅒": "1/10",
}

FRACTION_GLYPHS = "".join(UNICODE_FRACTIONS)

# Python's \w treats vulgar fractions as alphanumeric; these classes do not.
LETTER = f"[^\\W\\d_{FRACTION_GLYPHS}]"
ALNUM = f"[^\\W_{FRACTION_GLYPHS}]"

_GLYPH_WITH_WHOLE = re.compile(rf"(\d*)\s*([{FRACTION_GLYPHS}])")
_THOUSANDTH = Decimal("0.001")


def _is_integer(text: str) -> bool:
    """Check if a string represents a valid integer."""
    try:
        int(text)
        return True
    except ValueError:
        return False


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Decimal:
    """Parse a fraction string (e.g., '1/2') into a Decimal."""
    if "/" not in text:
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    numerator = Decimal(numerator_str.strip())
    denominator = Decimal(denominator_str.strip())

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def expand_unicode_fractions(text: str) -> str:
    """Rewrite vulgar fraction glyphs as ASCII fractions ("2½" -> "2 1/2")."""

    def _replace(match: re.Match) -> str:
        fraction = UNICODE_FRACTIONS[match.group(2)]
        return f"{match.group(1)} {fraction}" if match.group(1) else fraction

    return _GLYPH_WITH_WHOLE.sub(_replace, text)


def keep_three_decimals(value: Union[Decimal, float], delimiter: str = ".") -> str:
    """Truncate a number to three decimals, rendered with ``delimiter``.

    Examples:
        >>> keep_three_decimals(Decimal(2) / Decimal(3))
        '0.666'
        >>> keep_three_decimals(1.5, ",")
        '1,5'
    """
    text = str(value)
    if "." not in text:
        return text
    whole, decimals = text.split(".", 1)
    return f"{whole}{delimiter}{decimals[:3]}"


def convert_from_fraction(value: str, delimiter: str = ".") -> str:
    """Convert a fraction, mixed number or range of them into decimal text.

    Args:
        value: Quantity text such as "1/2", "1 1/2", "1/4-1/2" or "⅝".
        delimiter: Decimal delimiter of the target locale.

    Returns:
        The decimal form ("0.5", "1.5", "0.25-0.5"), or the input unchanged
        when it is not a fraction.
    """
    value = expand_unicode_fractions(value.strip())
    if "-" in value:
        return "-".join(
            convert_from_fraction(part, delimiter) for part in value.split("-")
        )

    try:
        if " " in value:
            whole, fraction = value.split(None, 1)
            if _is_integer(whole) and _is_fraction(fraction):
                return keep_three_decimals(
                    Decimal(whole) + _parse_fraction(fraction), delimiter
                )
            return value
        if _is_fraction(value):
            return keep_three_decimals(_parse_fraction(value), delimiter)
    except (ValueError, ZeroDivisionError, InvalidOperation):
        return value
    return value


def convert_to_number(value: Union[str, float, int, None], delimiter: str = ".") -> float:
    """Parse decimal text back into a float rounded (half up) to 3 places.

    Unparseable input yields 0 rather than raising.
    """
    if value is None:
        return 0.0
    text = str(value).strip()
    if delimiter != ".":
        text = text.replace(delimiter, ".", 1)
    try:
        number = Decimal(text)
        if not number.is_finite():
            return 0.0
        return float(number.quantize(_THOUSANDTH, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return 0.0


def text_to_number(text: str, profile: LanguageProfile) -> Optional[int]:
    """Decode spelled-out numbers using the profile's number words.

    Args:
        text: Words separated by spaces or hyphens, e.g. "twenty-one".
        profile: Language whose number tables are used.

    Returns:
        The integer value, or None when any word is not a number word.

    Example:
        >>> text_to_number("one thousand two hundred", get_profile("eng"))
        1200
    """
    words = [word for word in re.split(r"[\s-]+", text.strip().lower()) if word]
    if not words:
        return None

    group = 0
    total = 0
    for word in words:
        if word in profile.numbers_small:
            group += profile.numbers_small[word]
            continue
        magnitude = profile.numbers_magnitude.get(word)
        if magnitude is None:
            return None
        if magnitude == 100:
            group = group * 100 if group > 0 else 100
        else:
            total += group * magnitude
            group = 0
    return total + group
