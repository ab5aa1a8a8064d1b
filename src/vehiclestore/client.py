"""Public client classes for the vehicle HTTP API."""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import TypeAdapter

from vehiclestore._filters import Bounds
from vehiclestore._http import AsyncTransport, SyncTransport
from vehiclestore.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from vehiclestore.exceptions import VehicleValidationError
from vehiclestore.models.vehicle import Vehicle

VehicleMapping = dict[int, Vehicle]

T = TypeVar("T")


def _validate(type_: Any, data: Any) -> T:
    """Validate response data against a type such as ``list[Vehicle]``."""
    try:
        return TypeAdapter(type_).validate_python(data)
    except Exception as exc:
        raise VehicleValidationError(
            f"Failed to validate {type_} response: {exc}"
        ) from exc


def _segment(value: str | int) -> str:
    """Quote one path segment.

    The server decodes ``%2F`` before routing, so a value holding ``/`` could
    never reach its route and is refused here.
    """
    text = str(value)
    if "/" in text:
        raise ValueError(f"Path value {text!r} must not contain '/'")
    return quote(text, safe="")


def _dump(vehicle: Vehicle) -> dict[str, Any]:
    return vehicle.model_dump(mode="json")


class VehicleClient:
    """Synchronous client for the vehicle API.

    Usage:
        with VehicleClient("http://localhost:8080") as api:
            api.create(Vehicle(id=1, brand="Ford", ...))
            fords = api.find_by_brand_and_year_range("Ford", 2015, 2020)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> VehicleClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _mapping(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> VehicleMapping:
        return _validate(VehicleMapping, self._transport.request("GET", endpoint, params))

    def _list(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> list[Vehicle]:
        return _validate(list[Vehicle], self._transport.request("GET", endpoint, params))

    # ── Endpoints ──────────────────────────────────────────────

    def find_all(self) -> VehicleMapping:
        """Get every stored vehicle keyed by id."""
        return self._mapping("/vehicles")

    def create(self, vehicle: Vehicle) -> Vehicle:
        """Store a single vehicle."""
        data = self._transport.request("POST", "/vehicles", json=_dump(vehicle))
        return _validate(Vehicle, data)

    def create_batch(self, vehicles: list[Vehicle]) -> list[Vehicle]:
        """Store several vehicles, all or nothing."""
        data = self._transport.request("POST", "/vehicles/batch", json=[_dump(v) for v in vehicles])
        return _validate(list[Vehicle], data)

    def find_by_color_and_year(self, color: str, year: int) -> VehicleMapping:
        return self._mapping(f"/vehicles/color/{_segment(color)}/year/{year}")

    def find_by_brand_and_year_range(self, brand: str, year_from: int, year_to: int) -> VehicleMapping:
        return self._mapping(f"/vehicles/brand/{_segment(brand)}/between/{year_from}/{year_to}")

    def average_speed_by_brand(self, brand: str) -> float:
        data = self._transport.request("GET", f"/vehicles/average_speed/brand/{_segment(brand)}")
        return _validate(float, data)

    def average_capacity_by_brand(self, brand: str) -> float:
        data = self._transport.request("GET", f"/vehicles/average_capacity/brand/{_segment(brand)}")
        return _validate(float, data)

    def update_speed_by_id(self, vehicle_id: int, speed: float) -> Vehicle:
        data = self._transport.request(
            "PUT", f"/vehicles/{vehicle_id}/update_speed", [("speed", str(speed))],
        )
        return _validate(Vehicle, data)

    def update_fuel_by_id(self, vehicle_id: int, fuel_type: str) -> Vehicle:
        data = self._transport.request(
            "PUT", f"/vehicles/{vehicle_id}/update_fuel", [("fuel_type", fuel_type)],
        )
        return _validate(Vehicle, data)

    def find_by_fuel_type(self, fuel_type: str) -> VehicleMapping:
        return self._mapping(f"/vehicles/fuel_type/{_segment(fuel_type)}")

    def find_by_transmission_type(self, transmission: str) -> VehicleMapping:
        return self._mapping(f"/vehicles/transmission/{_segment(transmission)}")

    def delete_by_id(self, vehicle_id: int) -> None:
        self._transport.request("DELETE", f"/vehicles/{vehicle_id}")

    def find_by_dimensions(self, length: Bounds, width: Bounds) -> list[Vehicle]:
        """Get vehicles whose length and width fall inside the given ranges."""
        return self._list(
            "/vehicles/dimensions",
            [("length", length.to_param()), ("width", width.to_param())],
        )

    def find_by_weight(self, min_weight: float, max_weight: float) -> list[Vehicle]:
        return self._list("/vehicles/weight", [("min", str(min_weight)), ("max", str(max_weight))])


class AsyncVehicleClient:
    """Asynchronous client for the vehicle API.

    Usage:
        async with AsyncVehicleClient() as api:
            average = await api.average_speed_by_brand("Ford")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncVehicleClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _mapping(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> VehicleMapping:
        return _validate(VehicleMapping, await self._transport.request("GET", endpoint, params))

    async def _list(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> list[Vehicle]:
        return _validate(list[Vehicle], await self._transport.request("GET", endpoint, params))

    # ── Endpoints ──────────────────────────────────────────────

    async def find_all(self) -> VehicleMapping:
        """Get every stored vehicle keyed by id."""
        return await self._mapping("/vehicles")

    async def create(self, vehicle: Vehicle) -> Vehicle:
        """Store a single vehicle."""
        data = await self._transport.request("POST", "/vehicles", json=_dump(vehicle))
        return _validate(Vehicle, data)

    async def create_batch(self, vehicles: list[Vehicle]) -> list[Vehicle]:
        """Store several vehicles, all or nothing."""
        data = await self._transport.request(
            "POST", "/vehicles/batch", json=[_dump(v) for v in vehicles],
        )
        return _validate(list[Vehicle], data)

    async def find_by_color_and_year(self, color: str, year: int) -> VehicleMapping:
        return await self._mapping(f"/vehicles/color/{_segment(color)}/year/{year}")

    async def find_by_brand_and_year_range(
        self, brand: str, year_from: int, year_to: int,
    ) -> VehicleMapping:
        return await self._mapping(
            f"/vehicles/brand/{_segment(brand)}/between/{year_from}/{year_to}",
        )

    async def average_speed_by_brand(self, brand: str) -> float:
        data = await self._transport.request(
            "GET", f"/vehicles/average_speed/brand/{_segment(brand)}",
        )
        return _validate(float, data)

    async def average_capacity_by_brand(self, brand: str) -> float:
        data = await self._transport.request(
            "GET", f"/vehicles/average_capacity/brand/{_segment(brand)}",
        )
        return _validate(float, data)

    async def update_speed_by_id(self, vehicle_id: int, speed: float) -> Vehicle:
        data = await self._transport.request(
            "PUT", f"/vehicles/{vehicle_id}/update_speed", [("speed", str(speed))],
        )
        return _validate(Vehicle, data)

    async def update_fuel_by_id(self, vehicle_id: int, fuel_type: str) -> Vehicle:
        data = await self._transport.request(
            "PUT", f"/vehicles/{vehicle_id}/update_fuel", [("fuel_type", fuel_type)],
        )
        return _validate(Vehicle, data)

    async def find_by_fuel_type(self, fuel_type: str) -> VehicleMapping:
        return await self._mapping(f"/vehicles/fuel_type/{_segment(fuel_type)}")

    async def find_by_transmission_type(self, transmission: str) -> VehicleMapping:
        return await self._mapping(f"/vehicles/transmission/{_segment(transmission)}")

    async def delete_by_id(self, vehicle_id: int) -> None:
        await self._transport.request("DELETE", f"/vehicles/{vehicle_id}")

    async def find_by_dimensions(self, length: Bounds, width: Bounds) -> list[Vehicle]:
        """Get vehicles whose length and width fall inside the given ranges."""
        return await self._list(
            "/vehicles/dimensions",
            [("length", length.to_param()), ("width", width.to_param())],
        )

    async def find_by_weight(self, min_weight: float, max_weight: float) -> list[Vehicle]:
        return await self._list(
            "/vehicles/weight", [("min", str(min_weight)), ("max", str(max_weight))],
        )
