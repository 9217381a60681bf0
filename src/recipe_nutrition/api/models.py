"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field


class ParseIngredientRequest(BaseModel):
    """Single ingredient line to parse."""

    line: str


class MatchIngredientsRequest(BaseModel):
    """Newline-separated ingredient lines to parse and match."""

    ingredients: str


class RecipeNutritionRequest(BaseModel):
    """Ingredient block with an optional serving count."""

    ingredients: str
    servings: int | None = Field(default=None, ge=1)
