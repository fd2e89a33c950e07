import dataclasses
from typing import Any, Dict, List, Optional


@dataclasses.dataclass
class ParsedIngredient:
    """Structured view of one ingredient line.

    ``unit`` is always the canonical English unit key; ``unit_plural`` and
    ``symbol`` come from the language the line was parsed with. Alternatives
    carry ``None`` quantities when they only swap the ingredient.
    """

    quantity: Optional[float]
    unit: Optional[str]
    unit_plural: Optional[str]
    symbol: Optional[str]
    ingredient: Optional[str]
    min_qty: Optional[float]
    max_qty: Optional[float]
    additional: Optional[str] = None
    original_string: str = ""
    approx: bool = False
    optional: bool = False
    to_serve: bool = False
    to_taste: bool = False
    instructions: List[str] = dataclasses.field(default_factory=list)
    multiplier: Optional[float] = None
    per_item_quantity: Optional[float] = None
    per_item_min_qty: Optional[float] = None
    per_item_max_qty: Optional[float] = None
    unit_system: Optional[str] = None
    include_unit_system: bool = dataclasses.field(default=False, repr=False)
    alternatives: List["ParsedIngredient"] = dataclasses.field(default_factory=list)

    @classmethod
    def zero(cls) -> "ParsedIngredient":
        """The record returned for input that cannot be parsed at all."""
        return cls(
            quantity=0,
            unit=None,
            unit_plural=None,
            symbol=None,
            ingredient="",
            min_qty=0,
            max_qty=0,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict view; flags and optional groups appear only when set."""
        data: Dict[str, Any] = {
            "quantity": self.quantity,
            "unit": self.unit,
            "unit_plural": self.unit_plural,
            "symbol": self.symbol,
            "ingredient": self.ingredient,
            "min_qty": self.min_qty,
            "max_qty": self.max_qty,
            "additional": self.additional,
            "original_string": self.original_string,
        }
        for flag in ("approx", "optional", "to_serve", "to_taste"):
            if getattr(self, flag):
                data[flag] = True
        if self.instructions:
            data["instructions"] = list(self.instructions)
        if self.multiplier is not None:
            data["multiplier"] = self.multiplier
            data["per_item_quantity"] = self.per_item_quantity
            data["per_item_min_qty"] = self.per_item_min_qty
            data["per_item_max_qty"] = self.per_item_max_qty
        if self.include_unit_system:
            data["unit_system"] = self.unit_system
        if self.alternatives:
            data["alternatives"] = [alt.to_dict() for alt in self.alternatives]
        return data
