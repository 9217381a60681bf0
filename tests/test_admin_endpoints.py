"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from recipe_nutrition.api.app import create_app
from recipe_nutrition.config import Settings
from recipe_nutrition.containers import AppContainer, build_container
from tests.conftest import SAMPLE_FOODS, write_catalog


def test_admin_requires_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/admin/health")
    wrong = client.get("/admin/health", headers={"X-Admin-Token": "nope"})
    ok = client.get("/admin/health", headers={"X-Admin-Token": "admin-token"})

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert ok.status_code == 200


def test_admin_disabled_without_configured_token(settings: Settings) -> None:
    container = build_container(settings.model_copy(update={"admin_token": None}))
    client = TestClient(create_app(container))

    response = client.get("/admin/health", headers={"X-Admin-Token": ""})

    assert response.status_code == 401


def test_admin_catalog_info(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/catalog", headers={"X-Admin-Token": "admin-token"})

    assert response.status_code == 200
    data = response.json()
    assert data["records"] == len(SAMPLE_FOODS)
    assert data["duplicates"] == 0
    assert data["source"] == str(container.catalog_service.path)


def test_admin_catalog_reload(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    write_catalog(
        container.catalog_service.path,
        [
            {"Name": "Quinoa", "GramsPerMeasure": 170},
            {"Name": "quinoa", "GramsPerMeasure": 1},
            {"Name": "Mystery", "CaloriesPer100g": 10},
        ],
    )

    response = client.post(
        "/admin/catalog/reload", headers={"X-Admin-Token": "admin-token"}
    )
    lookup = client.get("/foods/lookup", params={"name": "Quinoa"}).json()

    assert response.status_code == 200
    assert response.json()["records"] == 1
    assert response.json()["duplicates"] == 1
    assert response.json()["skipped"] == 1
    assert lookup["food"]["grams_per_measure"] == 170.0


def test_admin_catalog_reload_failure_keeps_catalog(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    container.catalog_service.path.write_text("{broken", encoding="utf-8")

    response = client.post(
        "/admin/catalog/reload", headers={"X-Admin-Token": "admin-token"}
    )
    lookup = client.get("/foods/lookup", params={"name": "milk"}).json()

    assert response.status_code == 503
    assert lookup["food"]["name"] == "Milk"
