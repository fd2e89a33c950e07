"""Approx / optional / to-serve / to-taste phrase detection."""

import dataclasses
import functools
import re
from typing import Iterable, List, Optional, Tuple

from ..i18n.profile import LanguageProfile

# --- Constants ---

FLAG_CATEGORIES = ("approx", "optional", "to_serve", "to_taste")


@dataclasses.dataclass(frozen=True)
class FlagPatterns:
    """Compiled flag regexes for one language; None when it has no phrases."""

    approx: Optional[re.Pattern]
    optional: Optional[re.Pattern]
    to_serve: Optional[re.Pattern]
    to_taste: Optional[re.Pattern]
    to_taste_core: Optional[re.Pattern]
    to_taste_additional: Optional[re.Pattern]


# --- Functions ---


def phrase_alternation(phrases: Iterable[str]) -> str:
    """Build a longest-first alternation of escaped phrases.

    Word boundaries are added only on sides where the phrase starts or ends
    with a word character, so "~" and "approx." still match.
    """
    parts = []
    for phrase in sorted(set(phrases), key=len, reverse=True):
        phrase = phrase.strip()
        if not phrase:
            continue
        escaped = re.escape(phrase)
        if re.match(r"\w", phrase):
            escaped = rf"\b{escaped}"
        if re.search(r"\w$", phrase):
            escaped = rf"{escaped}\b"
        parts.append(escaped)
    return "|".join(parts)


def plain_alternation(words: Iterable[str]) -> str:
    """Longest-first alternation of escaped words without boundaries."""
    unique = {word for word in words if word}
    return "|".join(re.escape(word) for word in sorted(unique, key=len, reverse=True))


def taste_abbreviations(phrases: Iterable[str]) -> List[str]:
    """First-letter abbreviation patterns, e.g. "to taste" -> t.t. / tt."""
    patterns = []
    for phrase in phrases:
        letters = re.findall(r"\b(\w)", phrase.lower())
        if len(letters) < 2:
            continue
        pattern = r"\b" + "".join(rf"{re.escape(letter)}\.?" for letter in letters) + r"(?!\w)"
        if pattern not in patterns:
            patterns.append(pattern)
    return patterns


def _compile(pattern: str) -> Optional[re.Pattern]:
    return re.compile(pattern, re.IGNORECASE) if pattern else None


@functools.lru_cache(maxsize=None)
def flag_patterns(profile: LanguageProfile) -> FlagPatterns:
    """Compile (once per profile) the flag regexes."""
    approx = phrase_alternation(profile.approx)
    optional = phrase_alternation(profile.optional)
    to_serve = phrase_alternation(profile.to_serve)
    additional = phrase_alternation(profile.to_taste_additional)

    core_parts = taste_abbreviations(profile.to_taste)
    phrases = phrase_alternation(profile.to_taste)
    if phrases:
        core_parts.append(phrases)
    core = "|".join(core_parts)

    to_taste = ""
    if core:
        to_taste = f"(?:{core})"
        if additional:
            to_taste = rf"(?:(?:{additional})\s+)?{to_taste}"

    return FlagPatterns(
        approx=_compile(rf"^\s*(?:{approx})" if approx else ""),
        optional=_compile(rf"(?:^|[\s,(])\s*(?:{optional})" if optional else ""),
        to_serve=_compile(to_serve),
        to_taste=_compile(to_taste),
        to_taste_core=_compile(f"(?:{core})" if core else ""),
        to_taste_additional=_compile(additional),
    )


def _strip(pattern: Optional[re.Pattern], text: str) -> Tuple[bool, str]:
    if pattern is None or not pattern.search(text):
        return False, text
    return True, " ".join(pattern.sub(" ", text).split())


def detect_approx(text: str, profile: LanguageProfile) -> Tuple[bool, str]:
    """Detect and strip a leading approximation word ("about", "~")."""
    return _strip(flag_patterns(profile).approx, text)


def detect_optional(text: str, profile: LanguageProfile) -> Tuple[bool, str]:
    return _strip(flag_patterns(profile).optional, text)


def detect_to_serve(text: str, profile: LanguageProfile) -> Tuple[bool, str]:
    return _strip(flag_patterns(profile).to_serve, text)


def detect_to_taste(text: str, profile: LanguageProfile) -> Tuple[bool, str]:
    """Detect "to taste" (and "tt", "adjust to taste", ...) and strip it."""
    return _strip(flag_patterns(profile).to_taste, text)


DETECTORS = {
    "approx": detect_approx,
    "optional": detect_optional,
    "to_serve": detect_to_serve,
    "to_taste": detect_to_taste,
}


def clean_additional_part(part: str, category: str, profile: LanguageProfile) -> str:
    """Remove a flag category's phrases that leaked into an annotation.

    Args:
        part: One annotation fragment, e.g. "more to taste".
        category: One of ``FLAG_CATEGORIES``.
        profile: Language whose phrase lists are used.

    Returns:
        The fragment without the phrases and without dangling punctuation.
    """
    _, cleaned = DETECTORS[category](part, profile)
    return cleaned.strip(" ,;:-–")
