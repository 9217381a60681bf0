"""Ingredient line parsing: quantity, unit and food name."""

import math
import re
from dataclasses import dataclass, field

from recipe_nutrition.domain.ingredients import ParsedIngredient
from recipe_nutrition.services.units import DEFAULT_UNIT_TABLE, UnitTable

DEFAULT_QUANTITY = 1.0

_DECIMAL = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


@dataclass(frozen=True)
class IngredientParser:
    """Splits one free-text ingredient line into its parts.

    Tokens are consumed left to right: an optional quantity (a decimal, a
    simple fraction, or a whole number followed by a fraction such as
    ``1 1/2``), an optional unit from the unit table, and the remaining
    tokens as the food name. Lines without a food name yield ``None``.
    """

    unit_table: UnitTable = field(default=DEFAULT_UNIT_TABLE)

    def parse(self, line: str | None) -> ParsedIngredient | None:
        """Parse an ingredient line, or return None if it has no food name."""
        if line is None or not line.strip():
            return None

        raw_line = line.strip()
        tokens = raw_line.split()
        if not tokens:
            return None

        quantity, consumed = _parse_quantity(tokens)

        unit = ""
        if consumed < len(tokens) and self.unit_table.is_unit(tokens[consumed]):
            unit = tokens[consumed]
            consumed += 1

        food_name = " ".join(tokens[consumed:])
        if not food_name:
            return None

        normalized_unit, canonical_unit = self.unit_table.normalize(unit)
        return ParsedIngredient(
            raw_line=raw_line,
            quantity=quantity,
            unit=normalized_unit,
            canonical_unit=canonical_unit,
            food_name=food_name,
        )

    def normalize_unit(self, unit: str | None) -> tuple[str, str]:
        """Return ``(normalized, canonical)`` for a raw unit."""
        return self.unit_table.normalize(unit)


def _parse_quantity(tokens: list[str]) -> tuple[float, int]:
    """Parse the leading quantity and return it with the number of tokens used."""
    amount = _parse_number(tokens[0])
    if amount is None:
        return DEFAULT_QUANTITY, 0

    # Mixed number: "1 1/2"
    if len(tokens) > 1 and "/" in tokens[1]:
        remainder = _parse_fraction(tokens[1])
        if remainder is not None:
            return amount + remainder, 2
    return amount, 1


def _parse_number(token: str) -> float | None:
    """Parse a positive decimal or ``a/b`` fraction token."""
    if _DECIMAL.match(token):
        return _positive(float(token))
    fraction = _parse_fraction(token)
    if fraction is None:
        return None
    return _positive(fraction)


def _parse_fraction(token: str) -> float | None:
    """Parse ``a/b`` where both parts are decimals and ``b`` is non-zero."""
    parts = token.split("/")
    if len(parts) != 2 or not all(_DECIMAL.match(part) for part in parts):
        return None
    numerator, denominator = float(parts[0]), float(parts[1])
    if denominator == 0:
        return None
    value = numerator / denominator
    return value if math.isfinite(value) else None


def _positive(value: float) -> float | None:
    if math.isfinite(value) and value > 0:
        return value
    return None


DEFAULT_PARSER = IngredientParser()


def parse_ingredient(line: str | None) -> ParsedIngredient | None:
    """Parse an ingredient line with the default unit table.

    Examples:
        >>> parse_ingredient("1 1/2 cups milk").quantity
        1.5
        >>> parse_ingredient("salt").food_name
        'salt'
    """
    return DEFAULT_PARSER.parse(line)
