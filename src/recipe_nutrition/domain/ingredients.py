"""Domain models for parsed and matched ingredient lines."""

from dataclasses import dataclass

from recipe_nutrition.domain.foods import FoodRecord
from recipe_nutrition.domain.nutrition import MacroProfile

NO_MATCH_DISTANCE = -1


@dataclass(frozen=True)
class ParsedIngredient:
    """Quantity, unit and food name extracted from one ingredient line."""

    raw_line: str
    quantity: float
    unit: str
    canonical_unit: str
    food_name: str


@dataclass(frozen=True)
class IngredientMatch:
    """A parsed ingredient paired with the catalog food it resolved to.

    ``match_distance`` is 0 for an exact hit, the edit distance for a fuzzy hit
    and -1 when nothing in the catalog was close enough.
    """

    parsed_ingredient: ParsedIngredient
    matched_food: FoodRecord | None
    match_distance: int

    @classmethod
    def unmatched(cls, parsed: ParsedIngredient) -> "IngredientMatch":
        """Build the result for an ingredient with no catalog food."""
        return cls(
            parsed_ingredient=parsed,
            matched_food=None,
            match_distance=NO_MATCH_DISTANCE,
        )

    @property
    def is_matched(self) -> bool:
        return self.matched_food is not None

    def weight_grams(self) -> float:
        """Total weight: quantity times the food's grams per measure."""
        if self.matched_food is None:
            return 0.0
        return self.parsed_ingredient.quantity * self.matched_food.grams_per_measure

    def nutrient(self, per_100g: float) -> float:
        """Scale a per-100g nutrient value to the ingredient's total weight."""
        if self.matched_food is None:
            return 0.0
        return (self.weight_grams() / 100.0) * per_100g

    def calories(self) -> float:
        if self.matched_food is None:
            return 0.0
        return self.nutrient(self.matched_food.calories_per_100g)

    def fat(self) -> float:
        if self.matched_food is None:
            return 0.0
        return self.nutrient(self.matched_food.fat_per_100g)

    def protein(self) -> float:
        if self.matched_food is None:
            return 0.0
        return self.nutrient(self.matched_food.protein_per_100g)

    def carbohydrates(self) -> float:
        if self.matched_food is None:
            return 0.0
        return self.nutrient(self.matched_food.carbs_per_100g)

    def macros(self) -> MacroProfile:
        """Return all four macros as a profile."""
        return MacroProfile(
            calories=self.calories(),
            protein_g=self.protein(),
            fat_g=self.fat(),
            carbs_g=self.carbohydrates(),
        )
