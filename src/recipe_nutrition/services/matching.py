"""Resolve parsed ingredient lines against a food catalog."""

import logging
import re
from dataclasses import dataclass, field

from recipe_nutrition.domain.ingredients import IngredientMatch, ParsedIngredient
from recipe_nutrition.services.catalog import FoodCatalog
from recipe_nutrition.services.distance import levenshtein_distance
from recipe_nutrition.services.parsing import DEFAULT_PARSER, IngredientParser

FUZZY_MAX_DISTANCE = 3

_LINE_SEPARATORS = re.compile(r"[\r\n]+")

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngredientMatcher:
    """Parses ingredient blocks and matches each food name to the catalog."""

    parser: IngredientParser = field(default=DEFAULT_PARSER)
    max_distance: int = FUZZY_MAX_DISTANCE
    debug: bool = False

    def match_all(
        self, block: str | None, catalog: FoodCatalog
    ) -> list[IngredientMatch]:
        """Match every parseable line of a newline-separated block.

        Blank and unparseable lines produce no entry.
        """
        if block is None or not block.strip():
            return []
        matches: list[IngredientMatch] = []
        for line in _LINE_SEPARATORS.split(block):
            parsed = self.parser.parse(line)
            if parsed is None:
                continue
            matches.append(self.match(parsed, catalog))
        return matches

    def match(self, parsed: ParsedIngredient, catalog: FoodCatalog) -> IngredientMatch:
        """Resolve one parsed ingredient: exact name first, then fuzzy."""
        exact = catalog.lookup_exact(parsed.food_name)
        if exact is not None:
            return IngredientMatch(
                parsed_ingredient=parsed, matched_food=exact, match_distance=0
            )

        fuzzy = catalog.lookup_fuzzy(parsed.food_name, self.max_distance)
        if fuzzy is not None:
            food, _ = fuzzy
            # Report the distance of the pair actually returned.
            distance = levenshtein_distance(
                parsed.food_name.lower(), food.name.lower()
            )
            if self.debug:
                _logger.info(
                    "Fuzzy match: food=%s matched=%s distance=%s",
                    parsed.food_name,
                    food.name,
                    distance,
                )
            return IngredientMatch(
                parsed_ingredient=parsed, matched_food=food, match_distance=distance
            )

        if self.debug:
            _logger.info("No catalog match: food=%s", parsed.food_name)
        return IngredientMatch.unmatched(parsed)


DEFAULT_MATCHER = IngredientMatcher()


def parse_and_match_all(
    block: str | None, catalog: FoodCatalog
) -> list[IngredientMatch]:
    """Parse a block of ingredient lines and match them with the default policy."""
    return DEFAULT_MATCHER.match_all(block, catalog)
