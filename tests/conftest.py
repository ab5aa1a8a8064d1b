"""Shared test fixtures and sample vehicle payloads."""

from __future__ import annotations

import pytest

from vehiclestore._logging import configure_logging
from vehiclestore.models.vehicle import Vehicle
from vehiclestore.repository import VehicleMap

BASE_URL = "http://vehicles.test"


SAMPLE_VEHICLE = {
    "id": 1,
    "brand": "Ford",
    "model": "Fiesta",
    "registration": "ABC-123",
    "color": "Red",
    "year": 2020,
    "passengers": 5,
    "max_speed": 200.0,
    "fuel_type": "gasoline",
    "transmission": "manual",
    "weight": 1200.0,
    "height": 1.5,
    "length": 4.0,
    "width": 1.8,
}

SAMPLE_FLEET = [
    SAMPLE_VEHICLE,
    {
        **SAMPLE_VEHICLE,
        "id": 2,
        "model": "Focus",
        "registration": "DEF-456",
        "color": "Blue",
        "year": 2018,
        "max_speed": 180.0,
        "fuel_type": "diesel",
        "transmission": "automatic",
        "weight": 1300.0,
        "length": 4.4,
    },
    {
        **SAMPLE_VEHICLE,
        "id": 3,
        "brand": "Toyota",
        "model": "Prius",
        "registration": "GHI-789",
        "color": "White",
        "year": 2020,
        "passengers": 4,
        "max_speed": 170.0,
        "fuel_type": "hybrid",
        "transmission": "automatic",
        "weight": 1400.0,
        "length": 4.5,
        "width": 1.76,
    },
    {
        **SAMPLE_VEHICLE,
        "id": 4,
        "model": "Transit",
        "registration": "JKL-012",
        "color": "White",
        "year": 2015,
        "passengers": 9,
        "max_speed": 150.0,
        "fuel_type": "diesel",
        "weight": 2500.0,
        "height": 2.5,
        "length": 5.5,
        "width": 2.0,
    },
]


def make_vehicle(**overrides: object) -> Vehicle:
    """Build a complete vehicle from SAMPLE_VEHICLE with *overrides* applied."""
    return Vehicle.model_validate({**SAMPLE_VEHICLE, **overrides})


@pytest.fixture(autouse=True)
def _call_log_in_tmp_path(tmp_path):
    """Send the call log to tmp_path and close its handler afterwards."""
    configure_logging(str(tmp_path / "logs"))
    yield tmp_path / "logs"
    configure_logging(str(tmp_path / "logs"))


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def fleet() -> dict[int, Vehicle]:
    vehicles = [Vehicle.model_validate(v) for v in SAMPLE_FLEET]
    return {v.id: v for v in vehicles}


@pytest.fixture
def store(fleet) -> VehicleMap:
    return VehicleMap(fleet)
