"""HTTP routes for the vehicle resource.

Handlers are ``async def`` so every store call runs on the event loop thread;
the in-memory store itself does no locking.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import JSONResponse

from vehiclestore.api.errors import ParameterError
from vehiclestore.api.params import (
    parse_bounds,
    parse_float,
    parse_int,
    parse_vehicle,
    parse_vehicles,
)
from vehiclestore.models.vehicle import Vehicle
from vehiclestore.service import VehicleService

router = APIRouter()


def _service(request: Request) -> VehicleService:
    return request.app.state.service


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ParameterError("invalid request body") from None


def _success(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": "success", "data": data})


def _as_map(vehicles: dict[int, Vehicle]) -> dict[str, dict[str, Any]]:
    return {str(key): v.model_dump() for key, v in vehicles.items()}


def _as_list(vehicles: list[Vehicle]) -> list[dict[str, Any]]:
    return [v.model_dump() for v in vehicles]


# ── Collection ───────────────────────────────────────────────────────────────


@router.get("/vehicles")
async def get_all(request: Request) -> JSONResponse:
    return _success(_as_map(_service(request).find_all()))


@router.post("/vehicles")
async def create(request: Request) -> JSONResponse:
    vehicle = parse_vehicle(await _read_json(request))
    _service(request).create(vehicle)
    return _success(vehicle.model_dump(), status_code=201)


@router.post("/vehicles/batch")
async def create_batch(request: Request) -> JSONResponse:
    vehicles = parse_vehicles(await _read_json(request))
    created = _service(request).create_batch(vehicles)
    return _success(_as_list(created), status_code=201)


# ── Lookups ──────────────────────────────────────────────────────────────────


@router.get("/vehicles/color/{color}/year/{year}")
async def get_by_color_and_year(request: Request, color: str, year: str) -> JSONResponse:
    year_int = parse_int(year, "year")
    return _success(_as_map(_service(request).find_by_color_and_year(color, year_int)))


@router.get("/vehicles/brand/{brand}/between/{start_year}/{end_year}")
async def get_by_brand_and_year_range(
    request: Request, brand: str, start_year: str, end_year: str,
) -> JSONResponse:
    year_from = parse_int(start_year, "start_year")
    year_to = parse_int(end_year, "end_year")
    found = _service(request).find_by_brand_and_year_range(brand, year_from, year_to)
    return _success(_as_map(found))


@router.get("/vehicles/fuel_type/{fuel_type}")
async def get_by_fuel_type(request: Request, fuel_type: str) -> JSONResponse:
    return _success(_as_map(_service(request).find_by_fuel_type(fuel_type)))


@router.get("/vehicles/transmission/{transmission}")
async def get_by_transmission_type(request: Request, transmission: str) -> JSONResponse:
    return _success(_as_map(_service(request).find_by_transmission_type(transmission)))


@router.get("/vehicles/dimensions")
async def get_by_dimensions(
    request: Request,
    length: str | None = Query(None),
    width: str | None = Query(None),
) -> JSONResponse:
    lengths = parse_bounds(length, "length")
    widths = parse_bounds(width, "width")
    found = _service(request).find_by_dimensions(
        lengths.low, lengths.high, widths.low, widths.high,
    )
    return _success(_as_list(found))


@router.get("/vehicles/weight")
async def get_by_weight(
    request: Request,
    min_weight: str | None = Query(None, alias="min"),
    max_weight: str | None = Query(None, alias="max"),
) -> JSONResponse:
    low = parse_float(min_weight, "min")
    high = parse_float(max_weight, "max")
    return _success(_as_list(_service(request).find_by_weight(low, high)))


# ── Aggregates ───────────────────────────────────────────────────────────────


@router.get("/vehicles/average_speed/brand/{brand}")
async def get_average_speed_by_brand(request: Request, brand: str) -> JSONResponse:
    return _success(_service(request).average_speed_by_brand(brand))


@router.get("/vehicles/average_capacity/brand/{brand}")
async def get_average_capacity_by_brand(request: Request, brand: str) -> JSONResponse:
    return _success(_service(request).average_capacity_by_brand(brand))


# ── Mutations ────────────────────────────────────────────────────────────────


@router.put("/vehicles/{vehicle_id}/update_speed")
async def update_speed_by_id(
    request: Request, vehicle_id: str, speed: str | None = Query(None),
) -> JSONResponse:
    id_int = parse_int(vehicle_id, "id")
    speed_float = parse_float(speed, "speed")
    updated = _service(request).update_speed_by_id(id_int, speed_float)
    return _success(updated.model_dump())


@router.put("/vehicles/{vehicle_id}/update_fuel")
async def update_fuel_by_id(
    request: Request, vehicle_id: str, fuel_type: str = Query(""),
) -> JSONResponse:
    id_int = parse_int(vehicle_id, "id")
    updated = _service(request).update_fuel_by_id(id_int, fuel_type)
    return _success(updated.model_dump())


@router.delete("/vehicles/{vehicle_id}")
async def delete_by_id(request: Request, vehicle_id: str) -> Response:
    _service(request).delete_by_id(parse_int(vehicle_id, "id"))
    return Response(status_code=204)
