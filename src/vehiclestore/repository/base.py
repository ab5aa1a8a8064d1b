"""Abstract base repository for vehicle storage."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vehiclestore.models.vehicle import Vehicle


class VehicleRepository(ABC):
    """Storage-agnostic interface for vehicle records."""

    @abstractmethod
    def find_all(self) -> dict[int, Vehicle]: ...

    @abstractmethod
    def create(self, vehicle: Vehicle) -> None: ...

    @abstractmethod
    def create_batch(self, vehicles: list[Vehicle]) -> list[Vehicle]: ...

    @abstractmethod
    def find_by_color_and_year(
        self, color: str | None = None, year: int | None = None,
    ) -> dict[int, Vehicle]: ...

    @abstractmethod
    def find_by_brand_and_year_range(
        self, brand: str, year_from: int, year_to: int,
    ) -> dict[int, Vehicle]: ...

    @abstractmethod
    def average_speed_by_brand(self, brand: str) -> float: ...

    @abstractmethod
    def average_capacity_by_brand(self, brand: str) -> float: ...

    @abstractmethod
    def update_speed_by_id(self, vehicle_id: int, speed: float) -> Vehicle: ...

    @abstractmethod
    def update_fuel_by_id(self, vehicle_id: int, fuel_type: str) -> Vehicle: ...

    @abstractmethod
    def find_by_fuel_type(self, fuel_type: str) -> dict[int, Vehicle]: ...

    @abstractmethod
    def find_by_transmission_type(self, transmission: str) -> dict[int, Vehicle]: ...

    @abstractmethod
    def delete_by_id(self, vehicle_id: int) -> None: ...

    @abstractmethod
    def find_by_dimensions(
        self, min_length: float, max_length: float, min_width: float, max_width: float,
    ) -> list[Vehicle]: ...

    @abstractmethod
    def find_by_weight(self, min_weight: float, max_weight: float) -> list[Vehicle]: ...
