"""Locate and canonicalize the quantity expression of an ingredient line."""

import functools
import re
from decimal import Decimal
from typing import List, Optional, Tuple

from ..i18n.profile import LanguageProfile
from .flags import plain_alternation
from .number_utils import (
    FRACTION_GLYPHS,
    UNICODE_FRACTIONS,
    _parse_fraction,
    convert_from_fraction,
    keep_three_decimals,
    text_to_number,
)

# --- Constants ---

ZERO_WIDTH_PATTERN = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")
CONTROL_CHAR_PATTERN = re.compile(r"[\x00-\x1f\x7f]")
AMPERSAND_MIXED_PATTERN = re.compile(r"(\d)\s*&\s*(\d+/\d+)")
SPACED_SLASH_PATTERN = re.compile(r"(\d)\s*/\s*(\d)")
ARTICLE_PATTERN = re.compile(r"^an?\s+", re.IGNORECASE)

NUMBER = r"\d+\s+\d+\s*/\s*\d+|\d+\s*/\s*\d+|\d+(?:[.,]\d+)?"
GLYPH = rf"(?P<whole>\d*)\s*(?P<glyph>[{FRACTION_GLYPHS}])"
GLYPH_RANGE_HIGH = rf"\d*[{FRACTION_GLYPHS}]|\d+/\d+|\d+(?:[.,]\d+)?"

MOJIBAKE_REPLACEMENTS = (
    ("¬Ω", "1/2"),
    ("â„", "/"),
    ("Â", ""),
    ("\u2044", "/"),
)


# --- Functions ---


def clean_quantity_text(text: str) -> str:
    """Repair the character-level noise that breaks quantity detection.

    Removes zero-width characters, turns control characters into spaces, fixes
    common mojibake for fractions, and rewrites "1 & 1/2" and "1 /2" into
    plain fractions.
    """
    text = ZERO_WIDTH_PATTERN.sub("", text)
    text = CONTROL_CHAR_PATTERN.sub(" ", text)
    for broken, fixed in MOJIBAKE_REPLACEMENTS:
        text = text.replace(broken, fixed)
    text = AMPERSAND_MIXED_PATTERN.sub(r"\1 \2", text)
    text = SPACED_SLASH_PATTERN.sub(r"\1/\2", text)
    return text


@functools.lru_cache(maxsize=None)
def _quantity_patterns(profile: LanguageProfile) -> Tuple[re.Pattern, re.Pattern, re.Pattern]:
    joiners = plain_alternation(profile.joiners)
    separator = r"\s*[-–]\s*"
    if joiners:
        separator = rf"(?:{separator}|\s+(?:{joiners})\s+)"
    range_pattern = re.compile(
        rf"(?P<low>{NUMBER}){separator}(?P<high>{NUMBER})", re.IGNORECASE
    )
    glyph_range = rf"^\s*[-–]\s*(?P<high>{GLYPH_RANGE_HIGH})"
    if joiners:
        glyph_range = (
            rf"^(?:\s*[-–]\s*|\s+(?:{joiners})\s+)(?P<high>{GLYPH_RANGE_HIGH})"
        )
    return (
        range_pattern,
        re.compile(NUMBER),
        re.compile(glyph_range, re.IGNORECASE),
    )


def _strip_magnitude_separators(text: str, profile: LanguageProfile) -> str:
    if profile.is_comma_delimited:
        return re.sub(r"(?<=\d)\.(?=\d{3}(?!\d))", "", text)
    return re.sub(r"(?<=\d),(?=\d)", "", text)


def _glyph_value(whole: str, glyph: str) -> Decimal:
    return Decimal(whole or 0) + _parse_fraction(UNICODE_FRACTIONS[glyph])


def canonical_quantity(token: str, profile: LanguageProfile) -> str:
    """Canonical decimal text of one quantity token ("1 1/2", "2½", "1,5")."""
    token = re.sub(r"\s*/\s*", "/", token.strip())
    glyph = re.fullmatch(GLYPH, token)
    if glyph:
        return keep_three_decimals(
            _glyph_value(glyph.group("whole"), glyph.group("glyph")),
            profile.decimal_delimiter,
        )
    return convert_from_fraction(token, profile.decimal_delimiter)


def _remove_span(text: str, start: int, end: int) -> str:
    return " ".join(f"{text[:start]} {text[end:]}".split())


def _leading_number_words(line: str, profile: LanguageProfile) -> Optional[Tuple[int, str]]:
    tokens = line.split()
    taken: List[str] = []
    for token in tokens:
        if text_to_number(token, profile) is None:
            break
        taken.append(token)
    if not taken:
        return None
    value = text_to_number(" ".join(taken), profile)
    if value is None:
        return None
    return value, " ".join(tokens[len(taken):])


def find_quantity(text: str, profile: LanguageProfile) -> Tuple[Optional[str], str]:
    """Find the leftmost quantity in ``text``.

    Args:
        text: Working ingredient line.
        profile: Language used for decimal delimiters, joiners and number words.

    Returns:
        A ``(quantity, rest)`` tuple. ``quantity`` is a canonical decimal
        ("1.5") or range ("1-2") string using the locale delimiter, or None
        when nothing was found, in which case ``rest`` is the input.

    Examples:
        >>> find_quantity("1 1/2 cups flour", get_profile("eng"))
        ('1.5', 'cups flour')
        >>> find_quantity("10 to 20 almonds", get_profile("eng"))
        ('10-20', 'almonds')
    """
    line = " ".join(clean_quantity_text(text).split())
    if not line:
        return None, text

    article = ARTICLE_PATTERN.match(line)
    if article:
        return "1", line[article.end():].strip()

    line = _strip_magnitude_separators(line, profile)
    range_pattern, number_pattern, glyph_range_pattern = _quantity_patterns(profile)

    glyph = re.search(GLYPH, line)
    ranged = range_pattern.search(line)
    number = number_pattern.search(line)

    starts = [match.start() for match in (glyph, ranged, number) if match]
    if not starts or min(starts) > 0:
        words = _leading_number_words(line, profile)
        if words is not None:
            return str(words[0]), words[1]
    if not starts:
        return None, text

    earliest = min(starts)
    if glyph and glyph.start() == earliest:
        low = keep_three_decimals(
            _glyph_value(glyph.group("whole"), glyph.group("glyph")),
            profile.decimal_delimiter,
        )
        end = glyph.end()
        follow = glyph_range_pattern.match(line[end:])
        if follow:
            high = canonical_quantity(follow.group("high"), profile)
            return f"{low}-{high}", _remove_span(line, glyph.start(), end + follow.end())
        return low, _remove_span(line, glyph.start(), end)

    if ranged and ranged.start() == earliest:
        low = canonical_quantity(ranged.group("low"), profile)
        high = canonical_quantity(ranged.group("high"), profile)
        return f"{low}-{high}", _remove_span(line, ranged.start(), ranged.end())

    value = canonical_quantity(number.group(), profile)
    return value, _remove_span(line, number.start(), number.end())
