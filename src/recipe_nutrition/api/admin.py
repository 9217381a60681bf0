"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from recipe_nutrition.services.catalog import CatalogLoadError

if TYPE_CHECKING:
    from recipe_nutrition.containers import AppContainer
    from recipe_nutrition.services.catalog import InMemoryFoodCatalog

router = APIRouter(prefix="/admin", tags=["admin"])

_logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str | None = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not admin_token or not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/catalog", dependencies=[Depends(require_admin)])
async def catalog_info(request: Request) -> dict[str, object]:
    """Return the active catalog's source and load counts."""
    container: AppContainer = request.app.state.container
    return _serialize_catalog(container.catalog_service.current())


@router.post("/catalog/reload", dependencies=[Depends(require_admin)])
async def reload_catalog(request: Request) -> dict[str, object]:
    """Reload the food catalog from its source file."""
    container: AppContainer = request.app.state.container
    try:
        catalog = container.catalog_service.reload()
    except CatalogLoadError as exc:
        _logger.exception("Food catalog reload failed")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return _serialize_catalog(catalog)


def _serialize_catalog(catalog: InMemoryFoodCatalog) -> dict[str, object]:
    return {
        "source": catalog.source,
        "records": catalog.stats.loaded,
        "skipped": catalog.stats.skipped,
        "duplicates": catalog.stats.duplicates,
    }
