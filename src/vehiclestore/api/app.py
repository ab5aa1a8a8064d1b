"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from vehiclestore import __version__
from vehiclestore._logging import configure_logging
from vehiclestore.api.errors import vehicle_error_handler
from vehiclestore.api.routes import router
from vehiclestore.config import Settings
from vehiclestore.exceptions import VehicleError
from vehiclestore.loader import load_vehicles
from vehiclestore.repository import VehicleMap, VehicleRepository
from vehiclestore.service import VehicleService

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    repository: VehicleRepository | None = None,
) -> FastAPI:
    """Build the app around *repository*, or a store seeded from ``settings.seed_file``."""
    settings = settings or Settings()
    configure_logging(settings.log_dir)

    if repository is None:
        seed = load_vehicles(settings.seed_file) if settings.seed_file else None
        repository = VehicleMap(seed)
        logger.info("Vehicle store ready with %d vehicles", len(seed or {}))

    app = FastAPI(title=settings.app_name, version=__version__)
    app.state.settings = settings
    app.state.service = VehicleService(repository)
    app.add_exception_handler(VehicleError, vehicle_error_handler)  # type: ignore[arg-type]
    app.include_router(router)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok", "service": settings.app_name}

    return app
