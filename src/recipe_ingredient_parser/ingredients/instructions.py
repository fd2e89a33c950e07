"""Preparation words ("finely chopped", "peeled") pulled out of the name."""

import functools
import re
from typing import List, Optional, Tuple

from ..i18n.profile import LanguageProfile
from .flags import phrase_alternation

# --- Constants ---

GLUED_PATTERN = re.compile(r"(\w+)([/&+])(\w+)")
LONE_SEPARATOR_PATTERN = re.compile(r"(?:^|\s)[/&+](?=\s|$)")
LONE_JOINER_PATTERN = re.compile(r"(?:^|\s)[&+](?=\s|$)")


# --- Functions ---


@functools.lru_cache(maxsize=None)
def _instruction_pattern(profile: LanguageProfile) -> Optional[re.Pattern]:
    phrases = phrase_alternation(profile.instructions)
    if not phrases:
        return None
    adverbs = phrase_alternation(profile.adverbs)
    prefix = rf"(?:(?:{adverbs})\s+)?" if adverbs else ""
    return re.compile(rf"(?<!-){prefix}(?:{phrases})(?!-)", re.IGNORECASE)


@functools.lru_cache(maxsize=None)
def _adverb_pattern(profile: LanguageProfile) -> Optional[re.Pattern]:
    adverbs = phrase_alternation(profile.adverbs)
    if not adverbs:
        return None
    return re.compile(rf"(?<!-)(?:{adverbs})(?!-)", re.IGNORECASE)


def _collect(pattern: Optional[re.Pattern], text: str) -> Tuple[str, List[str]]:
    if pattern is None:
        return text, []
    found = [" ".join(match.group().split()) for match in pattern.finditer(text)]
    if not found:
        return text, []
    return " ".join(pattern.sub(" ", text).split()), found


def extract_instructions(text: str, profile: LanguageProfile) -> Tuple[str, List[str]]:
    """Remove preparation phrases from ``text`` and return them in order.

    An adverb directly in front of a phrase is kept with it ("finely
    chopped"); adverbs left on their own are swept up afterwards. Words
    inside hyphenated compounds ("sun-dried") are not touched.

    Args:
        text: Ingredient text or annotation fragment.
        profile: Language providing the instruction and adverb lists.

    Returns:
        ``(cleaned_text, instructions)``.

    Example:
        >>> extract_instructions("ripe tomatoes peeled and diced", get_profile("eng"))
        ('tomatoes and', ['ripe', 'peeled', 'diced'])
    """
    if not text:
        return text, []
    text, instructions = _collect(_instruction_pattern(profile), text)
    text, adverbs = _collect(_adverb_pattern(profile), text)
    return text, instructions + adverbs


@functools.lru_cache(maxsize=None)
def _instruction_words(profile: LanguageProfile) -> frozenset:
    return frozenset(word.lower() for word in profile.instructions + profile.adverbs)


def is_instruction_word(word: str, profile: LanguageProfile) -> bool:
    """Whether a single word is a known instruction or adverb."""
    return word.strip(" ,;.").lower() in _instruction_words(profile)


def split_glued_instructions(text: str, profile: LanguageProfile) -> str:
    """Space out "chopped/diced", "peeled&sliced" so both words are found."""

    def _spread(match: re.Match) -> str:
        left, separator, right = match.groups()
        if is_instruction_word(left, profile) or is_instruction_word(right, profile):
            return f"{left} {separator} {right}"
        return match.group()

    return GLUED_PATTERN.sub(_spread, text)


def remove_lone_separators(text: str, keep_slash: bool = False) -> str:
    """Drop lone "/", "&" and "+"; ``keep_slash`` keeps a spaced "/"."""
    pattern = LONE_JOINER_PATTERN if keep_slash else LONE_SEPARATOR_PATTERN
    return " ".join(pattern.sub(" ", text).split())
