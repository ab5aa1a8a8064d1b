"""Run the vehicle API with uvicorn: ``python -m vehiclestore.api``."""

from __future__ import annotations

import logging

import uvicorn

from vehiclestore.api.app import create_app
from vehiclestore.config import Settings


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
