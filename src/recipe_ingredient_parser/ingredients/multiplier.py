"""Multipliers ("2 x 100 g") and size descriptors ("3-inch", "15-ounce")."""

import functools
import re
from typing import Optional, Tuple

from ..i18n.profile import LanguageProfile
from .flags import plain_alternation
from .number_utils import ALNUM, FRACTION_GLYPHS, LETTER, convert_to_number, text_to_number
from .quantity import find_quantity
from .units import CONTAINER_UNITS, TO_TASTE_UNIT, find_unit

# --- Constants ---

EXPLICIT_MULTIPLIER_PATTERN = re.compile(
    rf"^(\d+(?:[.,]\d+)?)\s*[x×]\s*([\d{FRACTION_GLYPHS}].*)$", re.IGNORECASE
)
MIXED_NUMBER_PATTERN = re.compile(r"^\d+\s+\d+/\d+")
STACKED_PATTERN = re.compile(r"^(\S+)\s+(.+)$")
STACKED_LEAD_PATTERN = re.compile(rf"^(\d+(?:[.,]\d+)?)\s*[-–]?\s*{LETTER}")
LEADING_FRACTION_PATTERN = re.compile(rf"^(?:[{FRACTION_GLYPHS}]|\d+/\d+)")

SIZE_NUMBER = r"\d+(?:[.,]\d+)?"


# --- Functions ---


@functools.lru_cache(maxsize=None)
def _stacked_range_pattern(profile: LanguageProfile) -> re.Pattern:
    joiners = plain_alternation(profile.joiners)
    alternatives = r"[-–]" + (rf"|(?:{joiners})\b" if joiners else "")
    return re.compile(rf"^(?:{alternatives})\s*\d", re.IGNORECASE)


@functools.lru_cache(maxsize=None)
def _inch_pattern(profile: LanguageProfile) -> Optional[re.Pattern]:
    names = plain_alternation(profile.unit_names("inch"))
    if not names:
        return None
    number = rf"\d+(?:[.,]\d+)?[{FRACTION_GLYPHS}]?"
    return re.compile(
        rf"^({number}(?:\s*[-–]\s*{number})?)\s*-?\s*({names})(?!{ALNUM})[-\s]*(?=\S)",
        re.IGNORECASE,
    )


@functools.lru_cache(maxsize=None)
def _leading_inch_pattern(profile: LanguageProfile) -> Optional[re.Pattern]:
    names = plain_alternation(profile.unit_names("inch"))
    if not names:
        return None
    return re.compile(rf"^({names})(?!{ALNUM})[-\s]*", re.IGNORECASE)


@functools.lru_cache(maxsize=None)
def _container_size_pattern(profile: LanguageProfile) -> Optional[re.Pattern]:
    measures = []
    for key in profile.unit_keys_of_type("weight", "volume"):
        measures.extend(profile.unit_names(key))
    containers = []
    for key in CONTAINER_UNITS:
        containers.extend(profile.unit_names(key))
    if not measures or not containers:
        return None
    prepositions = plain_alternation(profile.prepositions)
    prefix = rf"(?:(?:{prepositions})\s+)?" if prepositions else ""
    return re.compile(
        rf"^{prefix}(?:an?\s+)?"
        rf"({SIZE_NUMBER}(?:\s*[-–]\s*{SIZE_NUMBER})?\s*-?\s*(?:{plain_alternation(measures)}))"
        rf"(?!{ALNUM})[-\s]*(?=(?:{plain_alternation(containers)})(?!{ALNUM}))",
        re.IGNORECASE,
    )


def extract_inch_descriptor(text: str, profile: LanguageProfile) -> Tuple[Optional[str], str]:
    """Split a leading "3-inch" / "2½ inch" size off the text.

    Returns:
        ``(descriptor, rest)``; the descriptor is normalized to "3-inch".
    """
    pattern = _inch_pattern(profile)
    match = pattern.match(text) if pattern else None
    if not match:
        return None, text
    number = re.sub(r"\s+", "", match.group(1))
    return f"{number}-{match.group(2).lower()}", text[match.end():]


def extract_implicit_inch(
    quantity: Optional[str], rest: str, profile: LanguageProfile
) -> Optional[Tuple[str, str, str]]:
    """Handle "2 inch piece ginger": the number was a size, not a count.

    Only applies when the inch word is directly followed by another unit.

    Returns:
        ``(quantity, rest, descriptor)`` with quantity "1", or None.
    """
    if not quantity:
        return None
    pattern = _leading_inch_pattern(profile)
    match = pattern.match(rest) if pattern else None
    if not match:
        return None
    remainder = rest[match.end():]
    unit = find_unit(remainder, profile, include_to_taste=False)
    if unit is None or unit.start != 0:
        return None
    return "1", remainder, f"{quantity}-{match.group(1).lower()}"


def extract_container_size(text: str, profile: LanguageProfile) -> Tuple[Optional[str], str]:
    """Split a "15-ounce" size that sits right before a container word.

    Example:
        >>> extract_container_size("14-oz can tomatoes", get_profile("eng"))
        ('14-oz', 'can tomatoes')
    """
    pattern = _container_size_pattern(profile)
    match = pattern.match(text) if pattern else None
    if not match:
        return None, text
    return " ".join(match.group(1).split()), text[match.end():]


def _is_stacked_excluded(rest: str, profile: LanguageProfile) -> bool:
    if _stacked_range_pattern(profile).match(rest):
        return True
    if LEADING_FRACTION_PATTERN.match(rest):
        return True
    size, _ = extract_container_size(rest, profile)
    return size is not None


def extract_multiplier(line: str, profile: LanguageProfile) -> Tuple[float, str]:
    """Peel a leading multiplier off the line.

    Handles the explicit "2 x 100 g" form and stacked numbers such as
    "2 100g" where the second number carries a non-length unit.

    Args:
        line: Working line, starting with the quantity.
        profile: Language used for number words, joiners and units.

    Returns:
        ``(multiplier, rest)``. The multiplier is 1 when none was found; rest
        is then the unchanged line, except for stacked forms where the
        leading count is dropped even when it is 1 ("1 1.8kg chicken").
    """
    explicit = EXPLICIT_MULTIPLIER_PATTERN.match(line)
    if explicit:
        factor = convert_to_number(explicit.group(1).replace(",", "."))
        return factor, explicit.group(2)

    if MIXED_NUMBER_PATTERN.match(line):
        return 1.0, line

    stacked = STACKED_PATTERN.match(line)
    if not stacked:
        return 1.0, line
    first, rest = stacked.groups()
    if first.isdigit():
        count = int(first)
    else:
        count = text_to_number(first, profile)
        if count is None:
            return 1.0, line

    if _is_stacked_excluded(rest, profile) or not STACKED_LEAD_PATTERN.match(rest):
        return 1.0, line

    quantity, remainder = find_quantity(rest, profile)
    if quantity is None:
        return 1.0, line
    remainder = remainder.lstrip("-– ")
    unit = find_unit(remainder, profile, include_to_taste=False)
    if unit is None or unit.start != 0 or unit.unit == TO_TASTE_UNIT:
        return 1.0, line
    if profile.unit_type(unit.unit) == "length":
        return 1.0, line
    return float(count), rest
