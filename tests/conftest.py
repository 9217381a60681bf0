"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from recipe_nutrition.config import Settings
from recipe_nutrition.containers import AppContainer, build_container
from recipe_nutrition.domain.foods import FoodRecord
from recipe_nutrition.services.catalog import FoodCatalog, InMemoryFoodCatalog

SAMPLE_FOODS: list[dict[str, object]] = [
    {
        "Id": 1,
        "Name": "Apple",
        "Measure": "medium",
        "GramsPerMeasure": 182.0,
        "CaloriesPer100g": 52.0,
        "FatPer100g": 0.2,
        "CarbohydratesPer100g": 13.8,
        "ProteinPer100g": 0.3,
    },
    {
        "Id": 2,
        "Name": "Banana",
        "Measure": "medium",
        "GramsPerMeasure": 118.0,
        "CaloriesPer100g": 89.0,
        "FatPer100g": 0.3,
        "CarbohydratesPer100g": 23.0,
        "ProteinPer100g": 1.1,
    },
    {
        "Id": 3,
        "Name": "Butter",
        "Measure": "tbsp",
        "GramsPerMeasure": 14.2,
        "CaloriesPer100g": 717.0,
        "FatPer100g": 81.0,
        "CarbohydratesPer100g": 0.1,
        "ProteinPer100g": 0.9,
    },
    {
        "Id": 4,
        "Name": "Chicken",
        "Measure": "g",
        "GramsPerMeasure": 1.0,
        "CaloriesPer100g": 239.0,
        "FatPer100g": 13.6,
        "CarbohydratesPer100g": 0.0,
        "ProteinPer100g": 27.3,
    },
    {
        "Id": 5,
        "Name": "Chicken Breast",
        "Measure": "g",
        "GramsPerMeasure": 1.0,
        "CaloriesPer100g": 165.0,
        "FatPer100g": 3.6,
        "CarbohydratesPer100g": 0.0,
        "ProteinPer100g": 31.0,
    },
    {
        "Id": 6,
        "Name": "Flour",
        "Measure": "cup",
        "GramsPerMeasure": 125.0,
        "CaloriesPer100g": 364.0,
        "FatPer100g": 1.0,
        "CarbohydratesPer100g": 76.3,
        "ProteinPer100g": 10.3,
    },
    {
        "Id": 7,
        "Name": "Milk",
        "Measure": "cup",
        "GramsPerMeasure": 240.0,
        "CaloriesPer100g": 61.0,
        "FatPer100g": 3.3,
        "CarbohydratesPer100g": 4.8,
        "ProteinPer100g": 3.2,
    },
    {
        "Id": 8,
        "Name": "Egg",
        "Measure": "large",
        "GramsPerMeasure": 50.0,
        "CaloriesPer100g": 143.0,
        "FatPer100g": 9.5,
        "CarbohydratesPer100g": 0.7,
        "ProteinPer100g": 12.6,
    },
]


def make_food(name: str, **overrides: object) -> FoodRecord:
    """Build a food record with neutral defaults."""
    values: dict[str, object] = {
        "name": name,
        "measure_label": "g",
        "grams_per_measure": 1.0,
        "calories_per_100g": 0.0,
        "fat_per_100g": 0.0,
        "carbs_per_100g": 0.0,
        "protein_per_100g": 0.0,
    }
    values.update(overrides)
    return FoodRecord(**values)


@dataclass
class StaticFoodCatalog(FoodCatalog):
    """Catalog fake with canned lookup results."""

    exact: dict[str, FoodRecord] = field(default_factory=dict)
    fuzzy: tuple[FoodRecord, int] | None = None
    fuzzy_calls: list[tuple[str, int]] = field(default_factory=list)

    def lookup_exact(self, name: str) -> FoodRecord | None:
        return self.exact.get(name)

    def lookup_fuzzy(
        self, name: str, max_distance: int
    ) -> tuple[FoodRecord, int] | None:
        self.fuzzy_calls.append((name, max_distance))
        return self.fuzzy


def write_catalog(path: Path, foods: list[dict[str, object]]) -> Path:
    """Write foods to a JSON catalog file."""
    path.write_text(json.dumps(foods), encoding="utf-8")
    return path


@pytest.fixture
def catalog() -> InMemoryFoodCatalog:
    return InMemoryFoodCatalog.from_payload(SAMPLE_FOODS, source="sample")


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    return write_catalog(tmp_path / "food_database.json", SAMPLE_FOODS)


@pytest.fixture
def settings(catalog_path: Path) -> Settings:
    return Settings(food_catalog_path=str(catalog_path), admin_token="admin-token")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
