"""Vehicle store data models."""

from vehiclestore.models.vehicle import Vehicle

__all__ = ["Vehicle"]
