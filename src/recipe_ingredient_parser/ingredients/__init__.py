"""Ingredient parsing and normalization utilities."""

from .combine import combine
from .formatting import pretty_printing_press
from .instructions import extract_instructions
from .models import ParsedIngredient
from .number_utils import convert_from_fraction, convert_to_number, text_to_number
from .parsing import IngredientParser, ParseOptions, parse
from .quantity import find_quantity
from .units import find_unit, get_preposition, get_symbol

__all__ = [
    "IngredientParser",
    "ParseOptions",
    "ParsedIngredient",
    "combine",
    "convert_from_fraction",
    "convert_to_number",
    "extract_instructions",
    "find_quantity",
    "find_unit",
    "get_preposition",
    "get_symbol",
    "parse",
    "pretty_printing_press",
    "text_to_number",
]
