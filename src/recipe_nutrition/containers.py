"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from recipe_nutrition.config import Settings, resolve_catalog_path
from recipe_nutrition.services.catalog import FoodCatalogService
from recipe_nutrition.services.matching import IngredientMatcher
from recipe_nutrition.services.parsing import IngredientParser
from recipe_nutrition.services.recipes import RecipeNutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: FoodCatalogService
    parser: IngredientParser
    matcher: IngredientMatcher
    recipe_service: RecipeNutritionService


def build_container(
    settings: Settings | None = None, base_dir: Path | None = None
) -> AppContainer:
    """Create the default dependency container and load the food catalog."""
    resolved_settings = settings or Settings()
    catalog_service = FoodCatalogService(
        resolve_catalog_path(resolved_settings, base_dir)
    )
    catalog_service.reload()
    parser = IngredientParser()
    matcher = IngredientMatcher(parser=parser, debug=resolved_settings.debug)
    recipe_service = RecipeNutritionService(
        catalog_service=catalog_service,
        matcher=matcher,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        parser=parser,
        matcher=matcher,
        recipe_service=recipe_service,
    )
