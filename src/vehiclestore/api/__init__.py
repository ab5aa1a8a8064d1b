"""HTTP transport for the vehicle store."""

from vehiclestore.api.app import create_app
from vehiclestore.api.errors import ParameterError, status_for

__all__ = [
    "ParameterError",
    "create_app",
    "status_for",
]
