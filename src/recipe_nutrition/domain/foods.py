"""Domain models for the reference food catalog."""

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class FoodRecord:
    """Reference food with per-100g macros and the weight of one measure."""

    name: str
    measure_label: str
    grams_per_measure: float
    calories_per_100g: float
    fat_per_100g: float
    carbs_per_100g: float
    protein_per_100g: float
    notes: str | None = None
    id: int | None = None


class FoodRecordPayload(BaseModel):
    """Catalog source entry, validated before it becomes a FoodRecord.

    Keys are expected lower-cased; the catalog loader folds the source keys so
    that ``GramsPerMeasure`` and ``gramsPerMeasure`` are treated alike.
    """

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    id: int | None = None
    name: str
    measure: str | None = None
    grams_per_measure: float = Field(
        gt=0, validation_alias=AliasChoices("gramspermeasure", "grams_per_measure")
    )
    notes: str | None = None
    calories_per_100g: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices("caloriesper100g", "calories_per_100g"),
    )
    fat_per_100g: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices("fatper100g", "fat_per_100g"),
    )
    carbs_per_100g: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices(
            "carbsper100g", "carbohydratesper100g", "carbs_per_100g"
        ),
    )
    protein_per_100g: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices("proteinper100g", "protein_per_100g"),
    )

    def to_record(self) -> FoodRecord:
        """Convert the validated payload into an immutable catalog record."""
        return FoodRecord(
            id=self.id,
            name=self.name.strip(),
            measure_label=self.measure or "",
            grams_per_measure=self.grams_per_measure,
            calories_per_100g=self.calories_per_100g,
            fat_per_100g=self.fat_per_100g,
            carbs_per_100g=self.carbs_per_100g,
            protein_per_100g=self.protein_per_100g,
            notes=self.notes,
        )
