"""Ingredient line parsing.

A line travels through a fixed sequence of stages. Each stage takes a
``ParseState`` and returns a new one; the order matters (multipliers must be
peeled off before the quantity is read, annotations must be removed before
units are searched, and so on). ``_assemble`` turns the final state into a
``ParsedIngredient``.
"""

import dataclasses
import logging
import re
from typing import Iterable, List, Optional, Tuple

from ..i18n import get_profile, get_unit_system
from ..i18n.profile import LanguageProfile
from .alternatives import (
    AlternativeCandidate,
    ParseFragment,
    apply_alternatives,
    promote_annotations,
    split_or_alternatives,
    split_slash_alternatives,
)
from .flags import (
    DETECTORS,
    FLAG_CATEGORIES,
    clean_additional_part,
    detect_approx,
    phrase_alternation,
    plain_alternation,
)
from .instructions import extract_instructions, remove_lone_separators, split_glued_instructions
from .models import ParsedIngredient
from .multiplier import (
    extract_container_size,
    extract_implicit_inch,
    extract_inch_descriptor,
    extract_multiplier,
)
from .normalization import (
    extract_comma_clauses,
    extract_dash_clauses,
    extract_parenthetical_segments,
    normalize_stray_fraction_separators,
    normalize_word_number_cans,
    remove_list_markers,
    remove_optional_label,
    tidy,
)
from .number_utils import ALNUM, FRACTION_GLYPHS, LETTER, convert_to_number
from .quantity import canonical_quantity, clean_quantity_text, find_quantity
from .units import CONTAINER_UNITS, TO_TASTE_UNIT, UnitMatch, find_unit, unit_patterns

logger = logging.getLogger(__name__)

# --- Constants ---

# Weight/volume units that give way to a container word on the same line
CONTAINER_PREFERENCE_UNITS = ("ounce", "pound", "gram", "kilogram", "liter", "milliliter")
PREFERRED_CONTAINERS = ("can", "pack", "bag")
SMALL_CAN_LIMIT = 14

TRAILING_DOT_PATTERN = re.compile(r"\.(\s|$)")
DIGIT_PATTERN = re.compile(r"\d")
PUNCTUATION_TOKEN_PATTERN = re.compile(r"^[^\w]+$")
GLUED_SLASH_PATTERN = re.compile(
    rf"^({LETTER}+\.?)\s*/\s*([\d{FRACTION_GLYPHS}][\d.,/{FRACTION_GLYPHS}]*\s*-?\s*{LETTER}*\.?)"
)
LEADING_FRACTION_PATTERN = re.compile(rf"^(?:\d+/\d+|\d*[{FRACTION_GLYPHS}])(?=\s|$)")
ORIGINAL_RANGE_PATTERN = re.compile(
    rf"([\d{FRACTION_GLYPHS}][\d{FRACTION_GLYPHS}/]*)\s*[-–]\s*([\d{FRACTION_GLYPHS}][\d{FRACTION_GLYPHS}/]*)"
)
FALLBACK_INGREDIENT_PATTERN = re.compile(r"^[^A-Za-z]+(?:[A-Za-z]+\s+)?")

# Shared by every unsupported language code so the pattern caches stay bounded
EMPTY_PROFILE = LanguageProfile(code="")


@dataclasses.dataclass(frozen=True)
class ParseOptions:
    include_unit_systems: bool = False
    include_alternatives: bool = False
    # Fragments parsed for alternatives skip the best-effort guesses
    fallbacks: bool = True


@dataclasses.dataclass(frozen=True)
class ParseState:
    """Working state threaded through the parse stages."""

    original: str
    line: str
    profile: LanguageProfile
    options: ParseOptions
    additional_parts: Tuple[str, ...] = ()
    instructions: Tuple[str, ...] = ()
    alternatives: Tuple[AlternativeCandidate, ...] = ()
    approx: bool = False
    optional: bool = False
    to_serve: bool = False
    to_taste: bool = False
    multiplier: float = 1.0
    quantity: Optional[str] = None
    rest: str = ""
    unit: Optional[UnitMatch] = None
    # The remainder as it was before the unit was cut out of it
    rest_before_unit: str = ""
    ingredient: str = ""
    container_size: Optional[str] = None
    had_word_number_can: bool = False
    force_unit_null: bool = False


# --- Helpers ---


def _remove_span(text: str, start: int, end: int) -> str:
    return " ".join(f"{text[:start]} {text[end:]}".split())


def _fragment_parser(state: ParseState) -> ParseFragment:
    options = ParseOptions(
        include_unit_systems=state.options.include_unit_systems,
        include_alternatives=False,
        fallbacks=False,
    )
    return lambda text: _parse_line(text, state.profile, options)


def _is_unit_word(word: str, profile: LanguageProfile, *unit_types: str) -> bool:
    match = find_unit(word, profile, include_to_taste=False)
    if match is None or match.start != 0 or len(match.text) != len(word):
        return False
    return not unit_types or profile.unit_type(match.unit) in unit_types


def _lower_set(*groups: Iterable[str]) -> set:
    return {word.lower() for group in groups for word in group}


def _strip_edge_words(text: str, leading: set, trailing: set) -> str:
    tokens = text.split()
    while tokens and (
        tokens[0].lower() in leading or PUNCTUATION_TOKEN_PATTERN.match(tokens[0])
    ):
        tokens.pop(0)
    while tokens and (
        tokens[-1].lower() in trailing or PUNCTUATION_TOKEN_PATTERN.match(tokens[-1])
    ):
        tokens.pop()
    return " ".join(tokens)


def _only_stopwords(text: str, profile: LanguageProfile) -> bool:
    stopwords = _lower_set(profile.additional_stopwords)
    return all(token.lower() in stopwords for token in text.split())


def _quantity_value(quantity: Optional[str], profile: LanguageProfile) -> float:
    if not quantity:
        return 0.0
    return convert_to_number(quantity.split("-")[0], profile.decimal_delimiter)


def _container_pattern(key: str, profile: LanguageProfile) -> Optional[re.Pattern]:
    return dict(unit_patterns(profile)).get(key)


def _unit_from_key(key: str, text: str, start: int, profile: LanguageProfile) -> UnitMatch:
    return UnitMatch(key, profile.unit_plural(key), profile.unit_symbol(key), text, start)


# --- Stages ---


def _sanitize(state: ParseState) -> ParseState:
    line = " ".join(clean_quantity_text(state.line).split())
    optional, line = remove_optional_label(line, state.profile)
    line = remove_list_markers(line).strip()
    return dataclasses.replace(state, line=line, optional=state.optional or optional)


def _normalize_cans(state: ParseState) -> ParseState:
    line, size, matched = normalize_word_number_cans(state.line, state.profile)
    if not matched:
        return state
    return dataclasses.replace(
        state,
        line=line,
        additional_parts=state.additional_parts + (size,),
        had_word_number_can=True,
    )


def _extract_annotations(state: ParseState) -> ParseState:
    line, segments = extract_parenthetical_segments(state.line)
    line, clauses = extract_comma_clauses(line)
    line, dashes = extract_dash_clauses(line)
    return dataclasses.replace(
        state,
        line=line,
        additional_parts=state.additional_parts + tuple(segments + clauses + dashes),
    )


def _resolve_alternatives(state: ParseState) -> ParseState:
    if not state.options.include_alternatives:
        return state
    parse_fragment = _fragment_parser(state)
    parts, promoted = promote_annotations(
        list(state.additional_parts), state.profile, parse_fragment
    )
    line, slashed = split_slash_alternatives(state.line, parse_fragment)
    line, either = split_or_alternatives(line, state.profile, parse_fragment)
    return dataclasses.replace(
        state,
        line=line,
        additional_parts=tuple(parts),
        alternatives=state.alternatives + tuple(promoted + slashed + either),
    )


def _detect_flags(state: ParseState) -> ParseState:
    """First flag pass: the original is only read, the working line is stripped."""
    flags = {}
    line = state.line
    for category in FLAG_CATEGORIES:
        detect = DETECTORS[category]
        seen, _ = detect(state.original, state.profile)
        found, line = detect(line, state.profile)
        flags[category] = getattr(state, category) or seen or found
    return dataclasses.replace(state, line=line, **flags)


def _normalize_fractions(state: ParseState) -> ParseState:
    return dataclasses.replace(state, line=normalize_stray_fraction_separators(state.line))


def _extract_multiplier(state: ParseState) -> ParseState:
    multiplier, line = extract_multiplier(state.line, state.profile)
    return dataclasses.replace(state, multiplier=multiplier, line=line)


def _extract_quantity(state: ParseState) -> ParseState:
    quantity, rest = find_quantity(state.line, state.profile)
    return dataclasses.replace(state, quantity=quantity, rest=rest)


def _detect_trailing_flags(state: ParseState) -> ParseState:
    flags = {}
    rest = state.rest
    for category in FLAG_CATEGORIES:
        found, rest = DETECTORS[category](rest, state.profile)
        flags[category] = getattr(state, category) or found
    return dataclasses.replace(state, rest=rest, **flags)


def _resolve_descriptors(state: ParseState) -> ParseState:
    profile = state.profile
    rest = state.rest
    quantity = state.quantity
    parts = list(state.additional_parts)
    found = list(state.alternatives)

    glued = GLUED_SLASH_PATTERN.match(rest)
    if glued and _is_unit_word(glued.group(1), profile):
        fragment = tidy(glued.group(2))
        rest = f"{glued.group(1)} {rest[glued.end():]}".strip()
        if state.options.include_alternatives:
            record = _fragment_parser(state)(fragment)
            found.append(AlternativeCandidate(record, "slash", False))
        else:
            parts.append(fragment)

    rest = rest.lstrip("-– ")
    descriptor, rest = extract_inch_descriptor(rest, profile)
    if descriptor:
        parts.append(descriptor)
    implicit = extract_implicit_inch(quantity, rest, profile)
    if implicit:
        quantity, rest, descriptor = implicit
        parts.append(descriptor)
    size, rest = extract_container_size(rest, profile)

    return dataclasses.replace(
        state,
        rest=rest.strip(),
        quantity=quantity,
        additional_parts=tuple(parts),
        alternatives=tuple(found),
        container_size=size,
    )


def _demote_weight_range(state: ParseState) -> Optional[ParseState]:
    """Move a weight range after a count ("1 3-4 lb chicken") to the annotations."""
    unit = state.unit
    if state.quantity is None or state.profile.unit_type(unit.unit) != "weight":
        return None
    pattern = re.compile(
        rf"^\s*(\d+(?:[.,]\d+)?\s*[-–]\s*\d+(?:[.,]\d+)?)\s*{re.escape(unit.text)}(?!{ALNUM})",
        re.IGNORECASE,
    )
    match = pattern.match(state.rest_before_unit)
    if not match:
        return None
    return dataclasses.replace(
        state,
        unit=None,
        ingredient=tidy(state.rest_before_unit[match.end():]),
        additional_parts=state.additional_parts + (f"{match.group(1)} {unit.text}",),
        force_unit_null=True,
    )


def _prefer_container(state: ParseState) -> ParseState:
    unit = state.unit
    if unit.unit not in CONTAINER_PREFERENCE_UNITS:
        return state
    for key in PREFERRED_CONTAINERS:
        pattern = _container_pattern(key, state.profile)
        match = pattern.search(state.ingredient) if pattern else None
        if not match:
            continue
        small_can = _quantity_value(state.quantity, state.profile) <= SMALL_CAN_LIMIT
        if key == "can" and small_can and not state.had_word_number_can:
            return state
        measure = f"{state.quantity} {unit.text}" if state.quantity else unit.text
        return dataclasses.replace(
            state,
            unit=_unit_from_key(key, match.group(), match.start(), state.profile),
            quantity="1",
            ingredient=_remove_span(state.ingredient, match.start(), match.end()),
            additional_parts=state.additional_parts + (measure,),
        )
    return state


def _prefer_piece(state: ParseState) -> ParseState:
    unit = state.unit
    if unit.unit != "inch":
        return state
    pattern = _container_pattern("piece", state.profile)
    match = pattern.search(state.ingredient) if pattern else None
    if not match:
        return state
    size = f"{state.quantity}-{unit.text}" if state.quantity else unit.text
    return dataclasses.replace(
        state,
        unit=_unit_from_key("piece", match.group(), match.start(), state.profile),
        quantity="1",
        ingredient=_remove_span(state.ingredient, match.start(), match.end()),
        additional_parts=state.additional_parts + (size,),
    )


def _find_unit(state: ParseState) -> ParseState:
    rest = state.rest
    unit = find_unit(rest, state.profile)
    if unit is None:
        return dataclasses.replace(state, ingredient=rest, rest_before_unit=rest)

    state = dataclasses.replace(
        state,
        unit=unit,
        rest_before_unit=rest,
        ingredient=_remove_span(rest, unit.start, unit.end),
    )
    if unit.unit == TO_TASTE_UNIT:
        return dataclasses.replace(state, unit=None, to_taste=True)
    demoted = _demote_weight_range(state)
    if demoted is not None:
        return demoted
    return _prefer_piece(_prefer_container(state))


def _tidy_ingredient(state: ParseState) -> ParseState:
    profile = state.profile
    ingredient = TRAILING_DOT_PATTERN.sub(r"\1", state.ingredient).strip()

    if state.unit is not None and state.unit.unit not in CONTAINER_UNITS:
        containers = []
        for key in CONTAINER_UNITS:
            containers.extend(profile.unit_names(key))
        if containers:
            ingredient = re.sub(
                rf"^(?:{plain_alternation(containers)})(?!{ALNUM})\s*",
                "",
                ingredient,
                flags=re.IGNORECASE,
            )

    prepositions = phrase_alternation(profile.prepositions)
    if prepositions:
        ingredient = re.sub(rf"^(?:{prepositions})\s*", "", ingredient, flags=re.IGNORECASE)
    return dataclasses.replace(state, ingredient=ingredient.strip())


def _clean_ingredient(state: ParseState) -> ParseState:
    profile = state.profile
    ingredient = split_glued_instructions(state.ingredient, profile)
    ingredient, found = extract_instructions(ingredient, profile)
    instructions = list(state.instructions) + found

    stopwords = _lower_set(profile.additional_stopwords)
    parts: List[str] = []
    for part in state.additional_parts:
        part, found = extract_instructions(part, profile)
        instructions.extend(found)
        part = _strip_edge_words(part, stopwords, stopwords)
        if part:
            parts.append(part)

    leading = _lower_set(profile.filler_words, profile.prepositions, profile.additional_stopwords)
    ingredient = remove_lone_separators(
        ingredient, keep_slash=not state.options.include_alternatives
    )
    ingredient = _strip_edge_words(ingredient, leading, stopwords)

    if state.unit is not None and ingredient:
        first, _, remainder = ingredient.partition(" ")
        if len(first) > 1 and _is_unit_word(first, profile, "weight", "volume"):
            parts.append(first)
            ingredient = remainder.strip()

    if not ingredient:
        for index, part in enumerate(parts):
            if DIGIT_PATTERN.search(part):
                continue
            candidate = part
            for category in ("optional", "to_serve", "to_taste"):
                candidate = clean_additional_part(candidate, category, profile)
            if candidate:
                ingredient = candidate
                del parts[index]
                break

    if state.container_size:
        if state.unit is not None and state.unit.unit == "pack":
            ingredient = f"{state.container_size} {ingredient}".strip()
        else:
            parts.append(state.container_size)

    return dataclasses.replace(
        state,
        ingredient=ingredient,
        instructions=tuple(instructions),
        additional_parts=tuple(parts),
    )


def _resolve_leading_fraction(state: ParseState) -> ParseState:
    if state.quantity is not None or not LEADING_FRACTION_PATTERN.match(state.ingredient):
        return state
    quantity, rest = find_quantity(state.ingredient, state.profile)
    if quantity is None:
        return state
    return dataclasses.replace(state, quantity=quantity, ingredient=rest)


def _resolve_range(state: ParseState) -> ParseState:
    if state.quantity is not None:
        return state
    match = ORIGINAL_RANGE_PATTERN.search(clean_quantity_text(state.original))
    if not match:
        return state
    low = canonical_quantity(match.group(1), state.profile)
    high = canonical_quantity(match.group(2), state.profile)
    return dataclasses.replace(state, quantity=f"{low}-{high}")


PIPELINE = (
    _sanitize,
    _normalize_cans,
    _extract_annotations,
    _resolve_alternatives,
    _detect_flags,
    _normalize_fractions,
    _extract_multiplier,
    _extract_quantity,
    _detect_trailing_flags,
    _resolve_descriptors,
    _find_unit,
    _tidy_ingredient,
    _clean_ingredient,
    _resolve_leading_fraction,
    _resolve_range,
)


# --- Assembly ---


def _quantity_bounds(quantity: Optional[str], profile: LanguageProfile) -> Tuple[float, float]:
    if not quantity:
        return 0.0, 0.0
    values = [
        convert_to_number(value, profile.decimal_delimiter)
        for value in quantity.split("-")
        if value.strip()
    ]
    if not values:
        return 0.0, 0.0
    low, high = values[0], values[-1]
    if low > high:
        low, high = high, low
    return low, high


def _final_parts(state: ParseState) -> Tuple[List[str], bool]:
    """Annotations after flag phrases were cleaned out of them."""
    approx = state.approx
    parts = []
    for part in state.additional_parts:
        found, part = detect_approx(part, state.profile)
        approx = approx or found
        for category in ("optional", "to_serve", "to_taste"):
            if getattr(state, category):
                part = clean_additional_part(part, category, state.profile)
        part = tidy(part)
        if part and not _only_stopwords(part, state.profile):
            parts.append(part)
    return parts, approx


def _guess_ingredient(original: str, profile: LanguageProfile) -> str:
    """Best-effort name for lines the stages left without one.

    A guess that still holds a number or is only a unit word is discarded.
    """
    guess = FALLBACK_INGREDIENT_PATTERN.sub("", original)
    guess = re.split(r"[/,]", guess)[0].strip()
    if DIGIT_PATTERN.search(guess) or _is_unit_word(guess, profile):
        return ""
    return guess


def _assemble(state: ParseState) -> ParsedIngredient:
    profile = state.profile
    options = state.options
    low, high = _quantity_bounds(state.quantity, profile)

    multiplier = per_item = None
    if state.multiplier != 1:
        multiplier = state.multiplier
        per_item = (low, low, high)
        low = round(low * multiplier, 3)
        high = round(high * multiplier, 3)

    force_unit_null = state.force_unit_null or (state.to_taste and state.quantity is None)
    unit = None if force_unit_null else state.unit
    parts, approx = _final_parts(state)

    record = ParsedIngredient(
        quantity=low,
        unit=unit.unit if unit else None,
        unit_plural=unit.plural if unit else None,
        symbol=unit.symbol if unit else None,
        ingredient=state.ingredient,
        min_qty=low,
        max_qty=high,
        additional=", ".join(parts) or None,
        original_string=state.original,
        approx=approx,
        optional=state.optional,
        to_serve=state.to_serve,
        to_taste=state.to_taste,
        instructions=list(state.instructions),
    )
    if multiplier is not None:
        record = dataclasses.replace(
            record,
            multiplier=multiplier,
            per_item_quantity=per_item[0],
            per_item_min_qty=per_item[1],
            per_item_max_qty=per_item[2],
        )

    record = apply_alternatives(
        record, list(state.alternatives), options.include_unit_systems
    )

    if options.fallbacks:
        if record.unit is None and not force_unit_null:
            guess = find_unit(state.original, profile, include_to_taste=False)
            if guess is not None:
                record = dataclasses.replace(
                    record, unit=guess.unit, unit_plural=guess.plural, symbol=guess.symbol
                )
        if not record.ingredient:
            record = dataclasses.replace(
                record, ingredient=_guess_ingredient(state.original, profile)
            )

    if options.include_unit_systems:
        record = dataclasses.replace(
            record, unit_system=get_unit_system(record.unit), include_unit_system=True
        )
    return record


def _parse_line(line: str, profile: LanguageProfile, options: ParseOptions) -> ParsedIngredient:
    original = line.strip()
    state = ParseState(original=original, line=original, profile=profile, options=options)
    for stage in PIPELINE:
        state = stage(state)
    return _assemble(state)


# --- Public API ---


def parse(
    line: str,
    language: str = "eng",
    include_unit_systems: bool = False,
    include_alternatives: bool = False,
) -> ParsedIngredient:
    """Parse one ingredient line.

    Args:
        line: Free-form ingredient text such as "1 1/2 cups flour, sifted".
        language: Three-letter language code of the line.
        include_unit_systems: Attach the unit's measurement system.
        include_alternatives: Resolve "or", slash and parenthetical
            alternatives into ``alternatives``.

    Returns:
        The parsed record. Input that is not a string yields
        ``ParsedIngredient.zero()``.

    Examples:
        >>> parse("1 1/2 teaspoon water").quantity
        1.5
        >>> parse("1 (14.5 oz) can tomatoes").additional
        '14.5 oz'
    """
    if not isinstance(line, str):
        logger.debug(f"Cannot parse ingredient line of type {type(line).__name__}")
        return ParsedIngredient.zero()
    profile = get_profile(language) or EMPTY_PROFILE
    options = ParseOptions(
        include_unit_systems=include_unit_systems,
        include_alternatives=include_alternatives,
    )
    return _parse_line(line, profile, options)


class IngredientParser:
    """Parser bound to a language and a set of options."""

    def __init__(
        self,
        language: str = "eng",
        include_unit_systems: bool = False,
        include_alternatives: bool = False,
    ):
        self.language = language
        self.include_unit_systems = include_unit_systems
        self.include_alternatives = include_alternatives

    def parse(self, line: str) -> ParsedIngredient:
        return parse(
            line,
            self.language,
            include_unit_systems=self.include_unit_systems,
            include_alternatives=self.include_alternatives,
        )

    def parse_many(self, lines: Iterable[str]) -> List[ParsedIngredient]:
        return [self.parse(line) for line in lines]
