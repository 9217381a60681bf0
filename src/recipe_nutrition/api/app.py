"""FastAPI application factory."""

from fastapi import FastAPI, Request

from recipe_nutrition.api.admin import router as admin_router
from recipe_nutrition.api.models import (
    MatchIngredientsRequest,
    ParseIngredientRequest,
    RecipeNutritionRequest,
)
from recipe_nutrition.app_logging import configure_logging
from recipe_nutrition.containers import AppContainer
from recipe_nutrition.domain.foods import FoodRecord
from recipe_nutrition.domain.ingredients import IngredientMatch, ParsedIngredient
from recipe_nutrition.domain.nutrition import MacroProfile
from recipe_nutrition.domain.recipes import RecipeNutritionSummary


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)

    app = FastAPI()
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/ingredients/parse")
    async def parse_ingredient(
        payload: ParseIngredientRequest, request: Request
    ) -> dict[str, object]:
        """Parse one ingredient line without matching it."""
        state_container: AppContainer = request.app.state.container
        parsed = state_container.parser.parse(payload.line)
        return {"ingredient": _serialize_parsed(parsed) if parsed else None}

    @app.post("/ingredients/match")
    async def match_ingredients(
        payload: MatchIngredientsRequest, request: Request
    ) -> dict[str, object]:
        """Parse and match every line of an ingredient block."""
        state_container: AppContainer = request.app.state.container
        catalog = state_container.catalog_service.current()
        matches = state_container.matcher.match_all(payload.ingredients, catalog)
        return {"matches": [_serialize_match(match) for match in matches]}

    @app.post("/recipes/nutrition")
    async def recipe_nutrition(
        payload: RecipeNutritionRequest, request: Request
    ) -> dict[str, object]:
        """Return total and per-serving macros for an ingredient block."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.recipe_service.summarize(
            payload.ingredients, servings=payload.servings
        )
        return _serialize_summary(summary)

    @app.get("/foods/lookup")
    async def lookup_food(
        name: str, request: Request, fuzzy: bool = True
    ) -> dict[str, object]:
        """Look up a catalog food by name, falling back to a fuzzy match."""
        state_container: AppContainer = request.app.state.container
        catalog = state_container.catalog_service.current()
        food = catalog.lookup_exact(name)
        if food is not None:
            return {"food": _serialize_food(food), "distance": 0}
        if fuzzy:
            result = catalog.lookup_fuzzy(name, state_container.matcher.max_distance)
            if result is not None:
                fuzzy_food, distance = result
                return {"food": _serialize_food(fuzzy_food), "distance": distance}
        return {"food": None, "distance": -1}

    return app


def _serialize_parsed(parsed: ParsedIngredient) -> dict[str, object]:
    return {
        "raw_line": parsed.raw_line,
        "quantity": parsed.quantity,
        "unit": parsed.unit,
        "canonical_unit": parsed.canonical_unit,
        "food_name": parsed.food_name,
    }


def _serialize_food(food: FoodRecord) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "measure": food.measure_label,
        "grams_per_measure": food.grams_per_measure,
        "notes": food.notes,
        "calories_per_100g": food.calories_per_100g,
        "fat_per_100g": food.fat_per_100g,
        "carbs_per_100g": food.carbs_per_100g,
        "protein_per_100g": food.protein_per_100g,
    }


def _serialize_macros(macros: MacroProfile) -> dict[str, float]:
    return {
        "calories": macros.calories,
        "protein_g": macros.protein_g,
        "fat_g": macros.fat_g,
        "carbs_g": macros.carbs_g,
    }


def _serialize_match(match: IngredientMatch) -> dict[str, object]:
    return {
        "ingredient": _serialize_parsed(match.parsed_ingredient),
        "food": _serialize_food(match.matched_food) if match.matched_food else None,
        "match_distance": match.match_distance,
        "is_matched": match.is_matched,
        "weight_g": match.weight_grams(),
        "macros": _serialize_macros(match.macros()),
    }


def _serialize_summary(summary: RecipeNutritionSummary) -> dict[str, object]:
    return {
        "matches": [_serialize_match(match) for match in summary.matches],
        "totals": _serialize_macros(summary.totals),
        "total_weight_g": summary.total_weight_g,
        "matched_count": summary.matched_count,
        "unmatched_foods": summary.unmatched_foods,
        "servings": summary.servings,
        "per_serving": _serialize_macros(summary.per_serving)
        if summary.per_serving
        else None,
    }
