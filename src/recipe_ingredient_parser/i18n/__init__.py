"""Per-language vocabularies and the lazily built profile registry."""

import functools
import importlib
import logging
from typing import List, Optional

from . import lang_eng
from .profile import LanguageProfile

logger = logging.getLogger(__name__)

# --- Constants ---

LANGUAGE_MODULES = {
    "eng": "lang_eng",
    "deu": "lang_deu",
    "esp": "lang_esp",
    "fra": "lang_fra",
    "por": "lang_por",
    "ces": "lang_ces",
    "hun": "lang_hun",
}

# Keys copied from the English table onto every language's unit entries
UNIT_METADATA_KEYS = (
    "system",
    "unit_type",
    "conversion_factor",
    "skip_conversion",
    "decimal_places",
)

# --- Functions ---


def available_languages() -> List[str]:
    return sorted(LANGUAGE_MODULES)


@functools.lru_cache(maxsize=None)
def get_profile(code: str) -> Optional[LanguageProfile]:
    """Return the profile for a language code, building it on first use.

    Args:
        code: Three-letter language code such as "eng" or "deu".

    Returns:
        The shared LanguageProfile, or None when the code is not supported.
    """
    module_name = LANGUAGE_MODULES.get(code)
    if module_name is None:
        logger.warning(f"Unsupported language code: {code!r}")
        return None

    data = importlib.import_module(f".{module_name}", __name__)
    return LanguageProfile(
        code=code,
        units=_merge_unit_metadata(data.UNITS),
        numbers_small=dict(data.NUMBERS_SMALL),
        numbers_magnitude=dict(data.NUMBERS_MAGNITUDE),
        prepositions=list(data.PREPOSITIONS),
        joiners=list(data.JOINERS),
        to_taste=list(data.TO_TASTE),
        to_taste_additional=list(data.TO_TASTE_ADDITIONAL),
        additional_stopwords=list(data.ADDITIONAL_STOPWORDS),
        approx=list(data.APPROX),
        optional=list(data.OPTIONAL),
        to_serve=list(data.TO_SERVE),
        instructions=list(data.INSTRUCTIONS),
        adverbs=list(data.ADVERBS),
        problematic_units={
            key: list(clues) for key, clues in data.PROBLEMATIC_UNITS.items()
        },
        alternative_words=list(data.ALTERNATIVE_WORDS),
        filler_words=list(data.FILLER_WORDS),
        is_comma_delimited=data.IS_COMMA_DELIMITED,
    )


def get_unit_system(unit: Optional[str]) -> Optional[str]:
    """Measurement system ("metric", "imperial", ...) of a canonical unit key."""
    if not unit:
        return None
    entry = lang_eng.UNITS.get(unit)
    return entry.get("system") if entry else None


def _merge_unit_metadata(units: dict) -> dict:
    merged = {}
    for key, entry in units.items():
        english = lang_eng.UNITS.get(key)
        if english is None:
            continue
        combined = {name: english.get(name) for name in UNIT_METADATA_KEYS}
        combined.update(entry)
        merged[key] = combined
    return merged


__all__ = [
    "LanguageProfile",
    "available_languages",
    "get_profile",
    "get_unit_system",
]
