"""Vehicle service — forwards every operation to the repository unchanged."""

from __future__ import annotations

from vehiclestore._logging import log_service_call
from vehiclestore.models.vehicle import Vehicle
from vehiclestore.repository.base import VehicleRepository


class VehicleService:
    """Stable operation set the HTTP layer depends on.

    Adds no validation of its own: results and errors come straight from the
    wrapped repository.
    """

    def __init__(self, repo: VehicleRepository) -> None:
        self._repo = repo

    @log_service_call
    def find_all(self) -> dict[int, Vehicle]:
        return self._repo.find_all()

    @log_service_call
    def create(self, vehicle: Vehicle) -> None:
        self._repo.create(vehicle)

    @log_service_call
    def create_batch(self, vehicles: list[Vehicle]) -> list[Vehicle]:
        return self._repo.create_batch(vehicles)

    @log_service_call
    def find_by_color_and_year(
        self, color: str | None = None, year: int | None = None,
    ) -> dict[int, Vehicle]:
        return self._repo.find_by_color_and_year(color, year)

    @log_service_call
    def find_by_brand_and_year_range(
        self, brand: str, year_from: int, year_to: int,
    ) -> dict[int, Vehicle]:
        return self._repo.find_by_brand_and_year_range(brand, year_from, year_to)

    @log_service_call
    def average_speed_by_brand(self, brand: str) -> float:
        return self._repo.average_speed_by_brand(brand)

    @log_service_call
    def average_capacity_by_brand(self, brand: str) -> float:
        return self._repo.average_capacity_by_brand(brand)

    @log_service_call
    def update_speed_by_id(self, vehicle_id: int, speed: float) -> Vehicle:
        return self._repo.update_speed_by_id(vehicle_id, speed)

    @log_service_call
    def update_fuel_by_id(self, vehicle_id: int, fuel_type: str) -> Vehicle:
        return self._repo.update_fuel_by_id(vehicle_id, fuel_type)

    @log_service_call
    def find_by_fuel_type(self, fuel_type: str) -> dict[int, Vehicle]:
        return self._repo.find_by_fuel_type(fuel_type)

    @log_service_call
    def find_by_transmission_type(self, transmission: str) -> dict[int, Vehicle]:
        return self._repo.find_by_transmission_type(transmission)

    @log_service_call
    def delete_by_id(self, vehicle_id: int) -> None:
        self._repo.delete_by_id(vehicle_id)

    @log_service_call
    def find_by_dimensions(
        self, min_length: float, max_length: float, min_width: float, max_width: float,
    ) -> list[Vehicle]:
        return self._repo.find_by_dimensions(min_length, max_length, min_width, max_width)

    @log_service_call
    def find_by_weight(self, min_weight: float, max_weight: float) -> list[Vehicle]:
        return self._repo.find_by_weight(min_weight, max_weight)
