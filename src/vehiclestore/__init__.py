"""vehiclestore — in-memory vehicle records with filters, aggregates and an HTTP API."""

from vehiclestore._filters import Bounds
from vehiclestore.client import AsyncVehicleClient, VehicleClient
from vehiclestore.exceptions import (
    VehicleAlreadyExistsError,
    VehicleAPIError,
    VehicleClientError,
    VehicleConnectionError,
    VehicleError,
    VehicleIncompleteError,
    VehicleInvalidError,
    VehicleNotFoundError,
    VehicleTimeoutError,
    VehicleValidationError,
)
from vehiclestore.models import Vehicle
from vehiclestore.repository import VehicleMap, VehicleRepository
from vehiclestore.service import VehicleService

__all__ = [
    "AsyncVehicleClient",
    "Bounds",
    "Vehicle",
    "VehicleAPIError",
    "VehicleAlreadyExistsError",
    "VehicleClient",
    "VehicleClientError",
    "VehicleConnectionError",
    "VehicleError",
    "VehicleIncompleteError",
    "VehicleInvalidError",
    "VehicleMap",
    "VehicleNotFoundError",
    "VehicleRepository",
    "VehicleService",
    "VehicleTimeoutError",
    "VehicleValidationError",
]

__version__ = "0.1.0"
