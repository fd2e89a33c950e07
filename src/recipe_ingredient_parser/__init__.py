"""Recipe Ingredient Parser - Structured parsing of multilingual recipe ingredient lines."""

__version__ = "0.1.0"
__author__ = "Kurt Thorn"
__email__ = "kurt.thorn@gmail.com"

from . import i18n, ingredients, recipes
from .ingredients import IngredientParser, ParsedIngredient, parse

__all__ = ["i18n", "ingredients", "recipes", "IngredientParser", "ParsedIngredient", "parse"]
