"""Record store — repository contract and in-memory implementation."""

from __future__ import annotations

from vehiclestore.repository.base import VehicleRepository
from vehiclestore.repository.memory import VehicleMap

__all__ = [
    "VehicleMap",
    "VehicleRepository",
]
