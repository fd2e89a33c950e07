"""Split a block of recipe text into ingredient lines and parse them."""

import logging
import re
from typing import List

from ..ingredients.models import ParsedIngredient
from ..ingredients.parsing import parse

logger = logging.getLogger(__name__)

# --- Constants ---

LINE_SEPARATOR_PATTERN = re.compile("[,\r\n\\-]|\U0001f449\U0001f3fb|\U0001f449|\U0001f3fb")


# --- Functions ---


def split_lines(text: str) -> List[str]:
    """Split recipe text on commas, hyphens, line breaks and pointing-hand bullets."""
    return [fragment.strip() for fragment in LINE_SEPARATOR_PATTERN.split(text) if fragment.strip()]


def multi_line_parse(text: str, language: str = "eng") -> List[ParsedIngredient]:
    """Parse every ingredient found in a block of text.

    Fragments that do not yield an ingredient name are dropped.

    Args:
        text: Recipe ingredient block, e.g. copied from a web page.
        language: Three-letter language code.

    Returns:
        Parsed ingredients in the order they appear.

    Examples:
        >>> [i.ingredient for i in multi_line_parse("1 cup flour\\n2 eggs")]
        ['flour', 'eggs']
    """
    if not isinstance(text, str):
        logger.debug(f"Cannot split recipe text of type {type(text).__name__}")
        return []

    results = []
    for fragment in split_lines(text):
        ingredient = parse(fragment, language)
        if ingredient.ingredient:
            results.append(ingredient)
    return results
