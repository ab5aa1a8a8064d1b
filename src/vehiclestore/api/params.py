"""Parsing of raw request parameters."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from vehiclestore._filters import Bounds
from vehiclestore.api.errors import ParameterError
from vehiclestore.models.vehicle import Vehicle

_VEHICLE = TypeAdapter(Vehicle)
_VEHICLE_LIST = TypeAdapter(list[Vehicle])


def parse_int(value: str | None, name: str) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ParameterError(f"{name} must be an integer") from None


def parse_float(value: str | None, name: str) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ParameterError(f"{name} must be a number") from None


def parse_bounds(value: str | None, name: str) -> Bounds:
    """Parse a ``min-max`` query value such as ``length=3.5-4.8``."""
    try:
        return Bounds.parse(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ParameterError(f"{name} must be a range in the form 'min-max'") from None


def parse_vehicle(body: Any) -> Vehicle:
    try:
        return _VEHICLE.validate_python(body)
    except ValidationError:
        raise ParameterError("invalid request body") from None


def parse_vehicles(body: Any) -> list[Vehicle]:
    try:
        return _VEHICLE_LIST.validate_python(body)
    except ValidationError:
        raise ParameterError("invalid request body") from None
