"""Tabular export of parsed ingredients."""

from typing import Iterable

import pandas as pd

from ..ingredients.models import ParsedIngredient

# --- Constants ---

DATAFRAME_COLUMNS = [
    "original_string",
    "quantity",
    "min_qty",
    "max_qty",
    "unit",
    "symbol",
    "ingredient",
    "additional",
    "approx",
    "optional",
    "to_serve",
    "to_taste",
    "instructions",
    "multiplier",
    "unit_system",
]


# --- Functions ---


def ingredients_to_dataframe(ingredients: Iterable[ParsedIngredient]) -> pd.DataFrame:
    """Build a DataFrame with one row per parsed ingredient.

    Args:
        ingredients: Parsed ingredient records.

    Returns:
        DataFrame with ``DATAFRAME_COLUMNS``; instructions are joined with
        "; " and flags are plain booleans.
    """
    data = []
    for ingredient in ingredients:
        data.append(
            {
                "original_string": ingredient.original_string,
                "quantity": ingredient.quantity,
                "min_qty": ingredient.min_qty,
                "max_qty": ingredient.max_qty,
                "unit": ingredient.unit,
                "symbol": ingredient.symbol,
                "ingredient": ingredient.ingredient,
                "additional": ingredient.additional,
                "approx": ingredient.approx,
                "optional": ingredient.optional,
                "to_serve": ingredient.to_serve,
                "to_taste": ingredient.to_taste,
                "instructions": "; ".join(ingredient.instructions),
                "multiplier": ingredient.multiplier,
                "unit_system": ingredient.unit_system,
            }
        )
    return pd.DataFrame(data, columns=DATAFRAME_COLUMNS)
