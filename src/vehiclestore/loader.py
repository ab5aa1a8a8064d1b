"""Load seed vehicles from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from vehiclestore.exceptions import VehicleSeedError
from vehiclestore.models.vehicle import Vehicle

_VEHICLE_LIST = TypeAdapter(list[Vehicle])


def load_vehicles(path: str | Path) -> dict[int, Vehicle]:
    """Read a JSON array of flat vehicle objects into an id-keyed dict.

    Every record must be complete and every id unique, the same rules a
    batch insert applies.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise VehicleSeedError(f"Failed to read seed file {path}: {exc}") from exc

    try:
        vehicles = _VEHICLE_LIST.validate_python(raw)
    except ValidationError as exc:
        raise VehicleSeedError(f"Invalid vehicle data in {path}: {exc}") from exc

    seeded: dict[int, Vehicle] = {}
    for v in vehicles:
        if v.id in seeded:
            raise VehicleSeedError(f"Duplicate vehicle id {v.id} in {path}")
        if not v.is_complete:
            raise VehicleSeedError(f"Incomplete vehicle with id {v.id} in {path}")
        seeded[v.id] = v
    return seeded
