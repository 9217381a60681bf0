"""Recipe-level nutrition totals."""

from dataclasses import dataclass

from recipe_nutrition.domain.ingredients import IngredientMatch
from recipe_nutrition.domain.nutrition import EMPTY_MACROS, MacroProfile
from recipe_nutrition.domain.recipes import RecipeNutritionSummary
from recipe_nutrition.services.catalog import FoodCatalogService
from recipe_nutrition.services.matching import IngredientMatcher


@dataclass
class RecipeNutritionService:
    """Computes macros for a whole ingredient list against the active catalog."""

    catalog_service: FoodCatalogService
    matcher: IngredientMatcher

    def summarize(
        self, ingredients: str | None, servings: int | None = None
    ) -> RecipeNutritionSummary:
        """Match every ingredient line and total the macros."""
        if servings is not None and servings < 1:
            raise ValueError("servings must be at least 1")

        catalog = self.catalog_service.current()
        matches = self.matcher.match_all(ingredients, catalog)
        totals = _sum_totals(matches)
        return RecipeNutritionSummary(
            matches=matches,
            totals=totals,
            total_weight_g=sum(match.weight_grams() for match in matches),
            matched_count=sum(1 for match in matches if match.is_matched),
            unmatched_foods=[
                match.parsed_ingredient.food_name
                for match in matches
                if not match.is_matched
            ],
            servings=servings,
            per_serving=totals.scaled(1 / servings) if servings else None,
        )


def _sum_totals(matches: list[IngredientMatch]) -> MacroProfile:
    total = EMPTY_MACROS
    for match in matches:
        total = total + match.macros()
    return total
