"""Domain models for recipe-level nutrition summaries."""

from dataclasses import dataclass

from recipe_nutrition.domain.ingredients import IngredientMatch
from recipe_nutrition.domain.nutrition import MacroProfile


@dataclass(frozen=True)
class RecipeNutritionSummary:
    """Totals for every ingredient line of a recipe."""

    matches: list[IngredientMatch]
    totals: MacroProfile
    total_weight_g: float
    matched_count: int
    unmatched_foods: list[str]
    servings: int | None = None
    per_serving: MacroProfile | None = None
