"""In-memory food catalog with exact and fuzzy name lookup."""

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from pydantic import ValidationError

from recipe_nutrition.domain.foods import FoodRecord, FoodRecordPayload
from recipe_nutrition.services.distance import levenshtein_distance

_logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when a catalog source cannot be read or parsed."""


class FoodCatalog(Protocol):
    """Name-based food lookup used by the ingredient matcher."""

    def lookup_exact(self, name: str) -> FoodRecord | None:
        """Return the food whose name equals ``name``, ignoring case."""

    def lookup_fuzzy(
        self, name: str, max_distance: int
    ) -> tuple[FoodRecord, int] | None:
        """Return the closest food within ``max_distance`` edits and its distance."""


@dataclass(frozen=True)
class CatalogLoadStats:
    """Counts collected while building a catalog."""

    loaded: int = 0
    skipped: int = 0
    duplicates: int = 0


class InMemoryFoodCatalog(FoodCatalog):
    """Read-only catalog keyed by lower-cased food name.

    The first record seen for a name wins; later duplicates are dropped.
    Fuzzy lookups scan every record in load order and keep the first
    candidate at the best distance. That order is an implementation detail,
    so callers must not rely on which of several equally close foods wins.
    """

    def __init__(
        self,
        records: Iterable[FoodRecord] = (),
        source: str | None = None,
        skipped: int = 0,
    ) -> None:
        foods: dict[str, FoodRecord] = {}
        duplicates = 0
        for record in records:
            key = _name_key(record.name)
            if not key:
                skipped += 1
                continue
            if key in foods:
                duplicates += 1
                continue
            foods[key] = record
        self._foods = MappingProxyType(foods)
        self.source = source
        self.stats = CatalogLoadStats(
            loaded=len(foods), skipped=skipped, duplicates=duplicates
        )

    @classmethod
    def from_payload(
        cls, payload: object, source: str | None = None
    ) -> "InMemoryFoodCatalog":
        """Build a catalog from decoded JSON (a list of food objects or None).

        Unusable entries are skipped and counted in ``stats.skipped``.
        """
        if payload is None:
            return cls(source=source)
        if not isinstance(payload, list):
            raise CatalogLoadError(
                f"Food catalog must be a JSON array, got {type(payload).__name__}"
            )
        records: list[FoodRecord] = []
        skipped = 0
        for index, entry in enumerate(payload):
            if not isinstance(entry, dict):
                skipped += 1
                continue
            folded = {str(key).lower(): value for key, value in entry.items()}
            name = folded.get("name")
            if not isinstance(name, str) or not name.strip():
                skipped += 1
                continue
            try:
                record = FoodRecordPayload.model_validate(folded).to_record()
            except ValidationError as exc:
                _logger.warning(
                    "Skipping invalid food record: index=%s name=%s errors=%s",
                    index,
                    name,
                    exc.error_count(),
                )
                skipped += 1
                continue
            records.append(record)
        return cls(records, source=source, skipped=skipped)

    @classmethod
    def from_json(cls, text: str, source: str | None = None) -> "InMemoryFoodCatalog":
        """Build a catalog from JSON text; blank text gives an empty catalog."""
        if not text.strip():
            return cls(source=source)
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(f"Food catalog is not valid JSON: {exc}") from exc
        return cls.from_payload(payload, source=source)

    def lookup_exact(self, name: str) -> FoodRecord | None:
        """Return the food with this name, ignoring case and outer whitespace."""
        _require_name(name)
        key = _name_key(name)
        if not key:
            return None
        return self._foods.get(key)

    def lookup_fuzzy(
        self, name: str, max_distance: int
    ) -> tuple[FoodRecord, int] | None:
        """Return the closest food within ``max_distance`` edits, if any."""
        _require_name(name)
        query = _name_key(name)
        if not query or not self._foods or max_distance < 0:
            return None

        best: FoodRecord | None = None
        best_distance = max_distance + 1
        for key, record in self._foods.items():
            distance = levenshtein_distance(query, key, max_distance)
            if distance < best_distance:
                best = record
                best_distance = distance
                if distance == 0:
                    break
        if best is None:
            return None
        return best, best_distance

    def all_records(self) -> list[FoodRecord]:
        """Return a snapshot of every record; order is not guaranteed."""
        return list(self._foods.values())

    def __len__(self) -> int:
        return len(self._foods)

    def __iter__(self) -> Iterator[FoodRecord]:
        return iter(self.all_records())


def load_catalog(path: str | Path) -> InMemoryFoodCatalog:
    """Load a catalog from a JSON file.

    A missing file yields an empty catalog. Any other read or parse failure
    raises CatalogLoadError.
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        _logger.warning("Food catalog not found: path=%s; using empty catalog", path)
        return InMemoryFoodCatalog(source=str(catalog_path))
    try:
        text = catalog_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Cannot read food catalog {path}: {exc}") from exc

    catalog = InMemoryFoodCatalog.from_json(text, source=str(catalog_path))
    _logger.info(
        "Loaded food catalog: path=%s records=%s skipped=%s duplicates=%s",
        catalog_path,
        catalog.stats.loaded,
        catalog.stats.skipped,
        catalog.stats.duplicates,
    )
    return catalog


@dataclass
class FoodCatalogService:
    """Owns the active catalog for a path and swaps it on reload."""

    path: Path
    _catalog: InMemoryFoodCatalog | None = None

    def current(self) -> InMemoryFoodCatalog:
        """Return the active catalog, loading it on first use."""
        catalog = self._catalog
        if catalog is None:
            catalog = self.reload()
        return catalog

    def reload(self) -> InMemoryFoodCatalog:
        """Load a fresh catalog and make it active.

        The previous catalog stays active when loading fails.
        """
        catalog = load_catalog(self.path)
        self._catalog = catalog
        return catalog


def _name_key(name: str) -> str:
    return name.strip().lower()


def _require_name(name: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f"Food name must be a string, got {type(name).__name__}")
