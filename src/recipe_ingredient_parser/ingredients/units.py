"""Unit recognition against a language's unit dictionary."""

import collections
import dataclasses
import functools
import re
from typing import List, Optional, Tuple

from ..i18n import get_profile
from ..i18n.profile import LanguageProfile
from .flags import flag_patterns
from .number_utils import ALNUM, LETTER

# --- Constants ---

TO_TASTE_UNIT = "t.t."

CONTAINER_UNITS = ("can", "pack", "bag", "box", "bottle", "container")


@dataclasses.dataclass(frozen=True)
class UnitMatch:
    unit: str
    plural: Optional[str]
    symbol: Optional[str]
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


# --- Functions ---


def _colliding_names(profile: LanguageProfile) -> set:
    """Names that only differ by case between two units ("t" vs "T")."""
    owners = collections.defaultdict(set)
    for key in profile.units:
        for name in profile.unit_names(key):
            owners[name.lower()].add(key)
    return {lowered for lowered, keys in owners.items() if len(keys) > 1}


@functools.lru_cache(maxsize=None)
def unit_patterns(profile: LanguageProfile) -> Tuple[Tuple[str, re.Pattern], ...]:
    """One compiled pattern per unit key, longest names first."""
    colliding = _colliding_names(profile)
    patterns = []
    for key in profile.units:
        names = sorted(set(profile.unit_names(key)), key=len, reverse=True)
        if not names:
            continue
        alternatives = [
            re.escape(name) if name.lower() in colliding else f"(?i:{re.escape(name)})"
            for name in names
        ]
        pattern = re.compile(
            rf"(?<!{LETTER})(?:{'|'.join(alternatives)})(?!{ALNUM})"
        )
        patterns.append((key, pattern))
    return tuple(patterns)


def _is_problematic(key: str, text: str, profile: LanguageProfile) -> bool:
    clues = profile.problematic_units.get(key)
    if clues is None:
        return False
    return not any(clue in text for clue in clues)


def find_unit(
    text: str, profile: LanguageProfile, include_to_taste: bool = True
) -> Optional[UnitMatch]:
    """Find the unit mentioned earliest in ``text``.

    The to-taste pseudo unit is considered first. Units listed as
    problematic are ignored unless one of their context words appears in the
    text. Ties on position go to the longer match.

    Args:
        text: Text to scan, usually the line after the quantity was removed.
        profile: Language whose unit dictionary is used.
        include_to_taste: Whether "to taste" phrases count as a unit.

    Returns:
        The winning UnitMatch, or None.
    """
    if not text:
        return None

    candidates: List[UnitMatch] = []
    if include_to_taste:
        to_taste = flag_patterns(profile).to_taste_core
        match = to_taste.search(text) if to_taste else None
        if match:
            candidates.append(
                UnitMatch(TO_TASTE_UNIT, None, None, match.group(), match.start())
            )

    for key, pattern in unit_patterns(profile):
        if _is_problematic(key, text, profile):
            continue
        match = pattern.search(text)
        if match:
            candidates.append(
                UnitMatch(
                    key,
                    profile.unit_plural(key),
                    profile.unit_symbol(key),
                    match.group(),
                    match.start(),
                )
            )

    best = None
    for candidate in candidates:
        if best is None or candidate.start < best.start:
            best = candidate
        elif candidate.start == best.start and len(candidate.text.strip()) > len(
            best.text.strip()
        ):
            best = candidate
    return best


def get_symbol(unit: str, language: str = "eng") -> str:
    """Symbol of a unit given its key or any of its names; "" when unknown.

    Example:
        >>> get_symbol("tbsp")
        'tbs'
    """
    profile = get_profile(language)
    if profile is None or not unit:
        return ""
    for key in profile.units:
        if unit == key or unit in profile.unit_names(key):
            return profile.unit_symbol(key) or ""
    lowered = unit.lower()
    for key in profile.units:
        if lowered == key or lowered in (name.lower() for name in profile.unit_names(key)):
            return profile.unit_symbol(key) or ""
    return ""


def get_preposition(word: str, profile: LanguageProfile) -> Optional[str]:
    """Return ``word`` as written in the preposition list, if it is one."""
    lowered = word.strip().lower()
    for preposition in profile.prepositions:
        if preposition.lower() == lowered:
            return preposition
    return None


def unit_type(key: Optional[str], language: str = "eng") -> Optional[str]:
    profile = get_profile(language)
    if profile is None or not key:
        return None
    return profile.unit_type(key)
