"""Line normalization stages that run before quantity and unit detection."""

import functools
import re
from typing import List, Optional, Tuple

from ..i18n.profile import LanguageProfile
from .flags import phrase_alternation
from .number_utils import ALNUM, FRACTION_GLYPHS, LETTER, text_to_number

# --- Constants ---

LIST_MARKER_PATTERN = re.compile(r"^\s*[-•*]\s+")
COMMA_CLAUSE_PATTERN = re.compile(r"(?<![0-9]),\s*([^,]+)\s*(?![0-9])")
DASH_CLAUSE_PATTERN = re.compile(rf"(?<=[^\d\s])\s+[-–]\s+(?={LETTER})(.+)$")
STRAY_SEPARATOR_PATTERN = re.compile(r"(\d)\s*[^\w\s\-–.,&×~+()]\s*(\d)")


# --- Functions ---


def tidy(text: Optional[str]) -> str:
    """Collapse whitespace and trim separators left behind by removals."""
    if not text:
        return ""
    return " ".join(text.split()).strip(" ,;")


@functools.lru_cache(maxsize=None)
def _optional_label_pattern(profile: LanguageProfile) -> Optional[re.Pattern]:
    words = phrase_alternation(profile.optional)
    if not words:
        return None
    return re.compile(rf"^\s*(?:{words})\s*:\s*", re.IGNORECASE)


@functools.lru_cache(maxsize=None)
def _word_number_can_pattern(profile: LanguageProfile) -> Optional[re.Pattern]:
    names = profile.unit_names("can")
    if not names:
        return None
    cans = "|".join(re.escape(name) for name in sorted(names, key=len, reverse=True))
    return re.compile(
        rf"^({LETTER}+)\s+(\d[\d.,/{FRACTION_GLYPHS}]*\s*-?\s*{LETTER}*\.?)\s+"
        rf"({cans})(?!{ALNUM})\s*(.*)$",
        re.IGNORECASE,
    )


def remove_optional_label(line: str, profile: LanguageProfile) -> Tuple[bool, str]:
    """Strip a leading "Optional:" label; the flag is returned separately."""
    pattern = _optional_label_pattern(profile)
    if pattern is None:
        return False, line
    match = pattern.match(line)
    if not match:
        return False, line
    return True, line[match.end():]


def remove_list_markers(line: str) -> str:
    return LIST_MARKER_PATTERN.sub("", line)


def normalize_word_number_cans(
    line: str, profile: LanguageProfile
) -> Tuple[str, Optional[str], bool]:
    """Rewrite "Three 15-ounce cans of X" as "3 cans of X".

    Args:
        line: Working ingredient line.
        profile: Language providing number words and can names.

    Returns:
        ``(line, size, matched)`` where ``size`` is the can size text
        ("15-ounce") destined for the annotations.
    """
    pattern = _word_number_can_pattern(profile)
    match = pattern.match(line) if pattern else None
    if not match:
        return line, None, False
    value = text_to_number(match.group(1), profile)
    if value is None:
        return line, None, False
    rewritten = f"{value} {match.group(3)} {match.group(4)}".strip()
    return rewritten, tidy(match.group(2)), True


def extract_parenthetical_segments(line: str) -> Tuple[str, List[str]]:
    """Pull out top-level parenthesized text, keeping nested parens inside.

    A stray ")" is left in place and an unclosed "(" keeps its text on the
    line.

    Example:
        >>> extract_parenthetical_segments("coconut water (Indonesian: air (kelapa)) x")
        ('coconut water x', ['Indonesian: air (kelapa)'])
    """
    kept: List[str] = []
    segments: List[str] = []
    buffer: List[str] = []
    depth = 0
    for char in line:
        if char == "(":
            if depth:
                buffer.append(char)
            else:
                buffer = []
            depth += 1
        elif char == ")" and depth:
            depth -= 1
            if depth:
                buffer.append(char)
                continue
            segment = tidy("".join(buffer))
            if segment:
                segments.append(segment)
            kept.append(" ")
        elif depth:
            buffer.append(char)
        else:
            kept.append(char)
    if depth:
        kept.append("(" + "".join(buffer))
    return " ".join("".join(kept).split()), segments


def extract_comma_clauses(line: str) -> Tuple[str, List[str]]:
    """Move comma-separated trailing clauses out of the line.

    Commas between digits ("1,5") are left alone.
    """
    clauses = [tidy(clause) for clause in COMMA_CLAUSE_PATTERN.findall(line)]
    stripped = COMMA_CLAUSE_PATTERN.sub(" ", line)
    return " ".join(stripped.split()).strip(" ,"), [c for c in clauses if c]


def extract_dash_clauses(line: str) -> Tuple[str, List[str]]:
    """Split "450 g cherries - stalks removed" at the spaced dash."""
    match = DASH_CLAUSE_PATTERN.search(line)
    if not match:
        return line, []
    clause = tidy(match.group(1))
    return tidy(line[: match.start()]), [clause] if clause else []


def normalize_stray_fraction_separators(line: str) -> str:
    """Turn odd separators between digits ("1÷2", "1 \\ 2") into "/"."""
    return STRAY_SEPARATOR_PATTERN.sub(r"\1/\2", line)
