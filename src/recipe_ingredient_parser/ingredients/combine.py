import dataclasses
from typing import Dict, Iterable, List, Optional, Tuple

from .models import ParsedIngredient


def _add(left: Optional[float], right: Optional[float]) -> Optional[float]:
    if left is None or right is None:
        return None
    return left + right


def combine_two(existing: ParsedIngredient, other: ParsedIngredient) -> ParsedIngredient:
    """Sum quantity, min and max of two entries; None is contagious."""
    return dataclasses.replace(
        existing,
        quantity=_add(existing.quantity, other.quantity),
        min_qty=_add(existing.min_qty, other.min_qty),
        max_qty=_add(existing.max_qty, other.max_qty),
    )


def combine(ingredients: Iterable[ParsedIngredient]) -> List[ParsedIngredient]:
    """Merge entries sharing ingredient name and unit.

    Args:
        ingredients: Parsed ingredients, e.g. from several recipes.

    Returns:
        One entry per (ingredient, unit), sorted by ingredient name. The
        inputs are left untouched.
    """
    combined: Dict[Tuple[Optional[str], Optional[str]], ParsedIngredient] = {}
    for ingredient in ingredients or []:
        key = (ingredient.ingredient, ingredient.unit)
        if key in combined:
            combined[key] = combine_two(combined[key], ingredient)
        else:
            combined[key] = ingredient
    return sorted(combined.values(), key=lambda item: item.ingredient or "")
