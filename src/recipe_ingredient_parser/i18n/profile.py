import dataclasses
from typing import Dict, List, Optional


@dataclasses.dataclass(frozen=True, eq=False)
class LanguageProfile:
    """Read-only vocabulary for one language.

    Profiles hash by identity so the compiled regexes built from them can be
    memoized with ``functools.lru_cache``.
    """

    code: str
    units: Dict[str, dict] = dataclasses.field(default_factory=dict)
    numbers_small: Dict[str, int] = dataclasses.field(default_factory=dict)
    numbers_magnitude: Dict[str, int] = dataclasses.field(default_factory=dict)
    prepositions: List[str] = dataclasses.field(default_factory=list)
    joiners: List[str] = dataclasses.field(default_factory=list)
    to_taste: List[str] = dataclasses.field(default_factory=list)
    to_taste_additional: List[str] = dataclasses.field(default_factory=list)
    additional_stopwords: List[str] = dataclasses.field(default_factory=list)
    approx: List[str] = dataclasses.field(default_factory=list)
    optional: List[str] = dataclasses.field(default_factory=list)
    to_serve: List[str] = dataclasses.field(default_factory=list)
    instructions: List[str] = dataclasses.field(default_factory=list)
    adverbs: List[str] = dataclasses.field(default_factory=list)
    problematic_units: Dict[str, List[str]] = dataclasses.field(default_factory=dict)
    alternative_words: List[str] = dataclasses.field(default_factory=list)
    filler_words: List[str] = dataclasses.field(default_factory=list)
    is_comma_delimited: bool = False

    @property
    def decimal_delimiter(self) -> str:
        return "," if self.is_comma_delimited else "."

    @property
    def magnitude_delimiter(self) -> str:
        return "." if self.is_comma_delimited else ","

    def unit_names(self, key: str) -> List[str]:
        """All surface forms of a unit: its name variants plus the plural."""
        entry = self.units.get(key)
        if not entry:
            return []
        names = list(entry.get("names", []))
        plural = entry.get("plural")
        if plural and plural not in names:
            names.append(plural)
        return names

    def unit_plural(self, key: str) -> Optional[str]:
        entry = self.units.get(key)
        return entry.get("plural") if entry else None

    def unit_symbol(self, key: str) -> Optional[str]:
        entry = self.units.get(key)
        return (entry.get("symbol") or None) if entry else None

    def unit_type(self, key: str) -> Optional[str]:
        entry = self.units.get(key)
        return entry.get("unit_type") if entry else None

    def unit_keys_of_type(self, *unit_types: str) -> List[str]:
        return [
            key
            for key, entry in self.units.items()
            if entry.get("unit_type") in unit_types
        ]
