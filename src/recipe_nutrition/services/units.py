"""Unit normalization table for ingredient lines."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class UnitDefinition:
    """Canonical unit token and the reference grams of one unit."""

    canonical: str
    reference_grams: float


# canonical -> (reference grams, accepted spellings)
_UNIT_SPELLINGS: dict[str, tuple[float, tuple[str, ...]]] = {
    "g": (1.0, ("g", "gram", "grams")),
    "kg": (1000.0, ("kg", "kilogram", "kilograms")),
    "ml": (1.0, ("ml", "milliliter", "milliliters")),
    "l": (1000.0, ("l", "liter", "liters")),
    "cup": (240.0, ("cup", "cups", "c")),
    "tbsp": (15.0, ("tbsp", "tablespoon", "tablespoons", "tbl", "t")),
    "tsp": (5.0, ("tsp", "teaspoon", "teaspoons")),
    "oz": (28.35, ("oz", "ounce", "ounces")),
    "lb": (453.59, ("lb", "lbs", "pound", "pounds")),
}

CANONICAL_UNITS = frozenset(_UNIT_SPELLINGS)


@dataclass(frozen=True)
class UnitTable:
    """Case-insensitive lookup from unit spellings to canonical units.

    The reference grams are carried as metadata only; nutrient totals use
    each food's own grams per measure.
    """

    entries: Mapping[str, UnitDefinition] = field(default_factory=dict)

    def __post_init__(self) -> None:
        folded = {key.lower(): value for key, value in self.entries.items()}
        object.__setattr__(self, "entries", MappingProxyType(folded))

    @classmethod
    def from_spellings(
        cls, spellings: Mapping[str, tuple[float, Iterable[str]]]
    ) -> "UnitTable":
        """Build a table from ``canonical -> (reference grams, spellings)``."""
        entries: dict[str, UnitDefinition] = {}
        for canonical, (reference_grams, names) in spellings.items():
            definition = UnitDefinition(canonical, reference_grams)
            for name in names:
                entries[name] = definition
        return cls(entries)

    def lookup(self, token: str) -> UnitDefinition | None:
        """Return the unit definition for a token, if it is a known unit."""
        if not token or not token.strip():
            return None
        return self.entries.get(token.strip().lower())

    def is_unit(self, token: str) -> bool:
        return self.lookup(token) is not None

    def normalize(self, unit: str | None) -> tuple[str, str]:
        """Return ``(normalized, canonical)`` for a raw unit string.

        Known units map to their canonical token; unknown units pass through
        trimmed but otherwise unchanged; blank input gives empty strings.
        """
        if unit is None or not unit.strip():
            return "", ""
        definition = self.lookup(unit)
        if definition is None:
            trimmed = unit.strip()
            return trimmed, trimmed
        return definition.canonical, definition.canonical


DEFAULT_UNIT_TABLE = UnitTable.from_spellings(_UNIT_SPELLINGS)


def normalize_unit(unit: str | None) -> tuple[str, str]:
    """Normalize a unit with the default table."""
    return DEFAULT_UNIT_TABLE.normalize(unit)
