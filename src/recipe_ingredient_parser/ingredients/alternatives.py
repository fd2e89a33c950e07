"""Secondary quantities and swaps: "450g (1 lb)", "8 oz / 225g", "oats or quinoa"."""

import dataclasses
import functools
import logging
import re
from typing import Callable, List, Optional, Tuple

from ..i18n import get_unit_system
from ..i18n.profile import LanguageProfile
from .flags import phrase_alternation
from .instructions import is_instruction_word
from .models import ParsedIngredient
from .number_utils import FRACTION_GLYPHS

logger = logging.getLogger(__name__)

# --- Constants ---

ASIDE_PATTERN = re.compile(
    r"\bnote\b|\bpage\s+\d+|\bsee\s+note\b|\bif\s+frozen\b|\bcut\b|\bchunks?\b",
    re.IGNORECASE,
)
SPACED_SLASH_SPLIT = re.compile(r"\s+/\s+")
DIGIT_PATTERN = re.compile(r"\d")
RANGE_START_PATTERN = re.compile(rf"^[\d{FRACTION_GLYPHS}]")

ParseFragment = Callable[[str], ParsedIngredient]


@dataclasses.dataclass(frozen=True)
class AlternativeCandidate:
    """A parsed alternative before it is reconciled with the primary record.

    ``kind`` is "annotation", "slash" or "or"; ``pure_swap`` marks fragments
    without any digit, which only name a different ingredient.
    """

    record: ParsedIngredient
    kind: str
    pure_swap: bool


# --- Functions ---


@functools.lru_cache(maxsize=None)
def _alternative_word_patterns(profile: LanguageProfile) -> Tuple[Optional[re.Pattern], Optional[re.Pattern]]:
    words = phrase_alternation(profile.alternative_words)
    if not words:
        return None, None
    return (
        re.compile(rf"\s+(?:{words})\s+", re.IGNORECASE),
        re.compile(rf"^\s*(?:{words})\s+", re.IGNORECASE),
    )


def _strip_alternative_word(fragment: str, profile: LanguageProfile) -> str:
    _, leading = _alternative_word_patterns(profile)
    return leading.sub("", fragment) if leading else fragment


def _is_meaningful(record: ParsedIngredient) -> bool:
    return bool(record.unit or record.quantity or record.ingredient)


def promote_annotations(
    parts: List[str], profile: LanguageProfile, parse_fragment: ParseFragment
) -> Tuple[List[str], List[AlternativeCandidate]]:
    """Turn annotation fragments that parse as a quantity into alternatives.

    Fragments are considered one ";"-separated piece at a time. A piece must
    contain a digit, must not read like an aside ("see note", "page 12",
    "cut into chunks") and must not start with an instruction word.

    Args:
        parts: Annotation fragments collected so far.
        profile: Language of the line.
        parse_fragment: Parses a fragment with alternatives disabled.

    Returns:
        ``(kept_parts, candidates)``.
    """
    kept: List[str] = []
    candidates: List[AlternativeCandidate] = []
    for part in parts:
        remaining = []
        for piece in part.split(";"):
            piece = piece.strip()
            if not piece:
                continue
            text = _strip_alternative_word(piece, profile)
            words = text.split()
            if (
                not DIGIT_PATTERN.search(text)
                or ASIDE_PATTERN.search(text)
                or (words and is_instruction_word(words[0], profile))
            ):
                remaining.append(piece)
                continue
            record = parse_fragment(text)
            if not _is_meaningful(record):
                remaining.append(piece)
                continue
            logger.debug(f"Promoted annotation {piece!r} to an alternative")
            candidates.append(AlternativeCandidate(record, "annotation", False))
        if remaining:
            kept.append("; ".join(remaining))
    return kept, candidates


def split_slash_alternatives(
    line: str, parse_fragment: ParseFragment
) -> Tuple[str, List[AlternativeCandidate]]:
    """Split "8 oz / 225g pasta" style lists on spaced slashes."""
    segments = [segment.strip() for segment in SPACED_SLASH_SPLIT.split(line)]
    segments = [segment for segment in segments if segment]
    if len(segments) < 2:
        return line, []
    candidates = [
        AlternativeCandidate(
            parse_fragment(segment), "slash", not DIGIT_PATTERN.search(segment)
        )
        for segment in segments[1:]
    ]
    return segments[0], candidates


def split_or_alternatives(
    line: str, profile: LanguageProfile, parse_fragment: ParseFragment
) -> Tuple[str, List[AlternativeCandidate]]:
    """Split the line at the first alternative word ("or", "oder", ...).

    Numeric ranges ("3 or 4 eggs") and instruction pairs ("ground or
    whole") are left alone.
    """
    splitter, _ = _alternative_word_patterns(profile)
    match = splitter.search(line) if splitter else None
    if not match:
        return line, []
    left = line[: match.start()].rstrip(" -–,;")
    right = line[match.end():].strip()
    if not left or not right:
        return line, []
    if left[-1].isdigit() and RANGE_START_PATTERN.match(right):
        return line, []
    if is_instruction_word(left.split()[-1], profile):
        return line, []
    candidate = AlternativeCandidate(
        parse_fragment(right), "or", not DIGIT_PATTERN.search(right)
    )
    return left, [candidate]


def _reconcile(
    candidate: AlternativeCandidate,
    primary: ParsedIngredient,
    include_unit_systems: bool,
) -> ParsedIngredient:
    record = candidate.record
    changes = {"ingredient": record.ingredient or None}
    if candidate.pure_swap:
        changes.update(
            quantity=None,
            min_qty=None,
            max_qty=None,
            unit=None,
            unit_plural=None,
            symbol=None,
        )
    elif candidate.kind in ("slash", "or"):
        if record.unit is None:
            changes.update(
                unit=primary.unit,
                unit_plural=primary.unit_plural,
                symbol=primary.symbol,
            )
        elif not record.quantity:
            changes.update(
                quantity=primary.quantity,
                min_qty=primary.min_qty,
                max_qty=primary.max_qty,
            )
    record = dataclasses.replace(record, **changes)
    if include_unit_systems:
        record = dataclasses.replace(
            record,
            unit_system=get_unit_system(record.unit),
            include_unit_system=True,
        )
    return record


def apply_alternatives(
    primary: ParsedIngredient,
    candidates: List[AlternativeCandidate],
    include_unit_systems: bool = False,
) -> ParsedIngredient:
    """Attach reconciled alternatives to the primary record.

    Slash and "or" alternatives with digits inherit the primary unit when
    they have none, and the primary quantity when they have a unit but no
    quantity. An empty primary ingredient borrows the first alternative's.
    """
    if not candidates:
        return primary
    alternatives = [
        _reconcile(candidate, primary, include_unit_systems) for candidate in candidates
    ]

    ingredient = primary.ingredient
    if not ingredient:
        ingredient = next((alt.ingredient for alt in alternatives if alt.ingredient), "")

    instructions = list(primary.instructions)
    for candidate in candidates:
        if candidate.kind != "or":
            continue
        for instruction in candidate.record.instructions:
            if instruction not in instructions:
                instructions.append(instruction)

    return dataclasses.replace(
        primary,
        ingredient=ingredient,
        instructions=instructions,
        alternatives=alternatives,
    )
