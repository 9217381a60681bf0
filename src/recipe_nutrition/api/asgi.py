"""ASGI entrypoint, served with ``uvicorn recipe_nutrition.api.asgi:app``."""

from recipe_nutrition.api.app import create_app
from recipe_nutrition.app_logging import configure_logging
from recipe_nutrition.config import Settings
from recipe_nutrition.containers import build_container

settings = Settings()
# Logging must be configured before the container loads the catalog.
configure_logging(settings.debug)
app = create_app(build_container(settings))
