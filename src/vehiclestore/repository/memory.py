"""In-memory vehicle repository backed by a dict keyed by vehicle id."""

from __future__ import annotations

import math
import statistics
from collections.abc import Callable, Iterable, Mapping

from vehiclestore._filters import Bounds, text_matches
from vehiclestore._logging import log_repository_call
from vehiclestore.exceptions import (
    VehicleAlreadyExistsError,
    VehicleBatchEmptyError,
    VehicleBrandEmptyError,
    VehicleColorEmptyError,
    VehicleFuelTypeEmptyError,
    VehicleIdInvalidError,
    VehicleIncompleteError,
    VehicleLengthInvalidError,
    VehicleMinLengthGreaterThanMaxLengthError,
    VehicleMinWeightGreaterThanMaxWeightError,
    VehicleMinWidthGreaterThanMaxWidthError,
    VehicleNotFoundError,
    VehicleSpeedInvalidError,
    VehicleTransmissionEmptyError,
    VehicleWeightInvalidError,
    VehicleWidthInvalidError,
    VehicleYearEmptyError,
    VehicleYearEndInvalidError,
)
from vehiclestore.models.vehicle import Vehicle
from vehiclestore.repository.base import VehicleRepository


class VehicleMap(VehicleRepository):
    """Vehicle repository holding every record in a private dict.

    Records are frozen models, so handing them out is safe; the dict itself is
    never exposed and every read returns a fresh container. There is no
    locking: callers must serialise access.
    """

    def __init__(self, db: Mapping[int, Vehicle] | None = None) -> None:
        self._db: dict[int, Vehicle] = dict(db) if db else {}

    def __len__(self) -> int:
        return len(self._db)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _select(self, predicate: Callable[[Vehicle], bool]) -> dict[int, Vehicle]:
        found = {key: v for key, v in self._db.items() if predicate(v)}
        if not found:
            raise VehicleNotFoundError()
        return found

    def _by_brand(self, brand: str) -> list[Vehicle]:
        if not brand:
            raise VehicleBrandEmptyError()
        matches = [v for v in self._db.values() if text_matches(v.brand, brand)]
        if not matches:
            raise VehicleNotFoundError()
        return matches

    def _get(self, vehicle_id: int) -> Vehicle:
        if vehicle_id <= 0:
            raise VehicleIdInvalidError()
        try:
            return self._db[vehicle_id]
        except KeyError:
            raise VehicleNotFoundError() from None

    def _check_new(self, vehicles: Iterable[Vehicle]) -> None:
        """Reject ids already stored or repeated within *vehicles*."""
        seen: set[int] = set()
        for v in vehicles:
            if v.id in self._db or v.id in seen:
                raise VehicleAlreadyExistsError(f"vehicle with id {v.id} already exists")
            seen.add(v.id)

    # ── Reads ────────────────────────────────────────────────────────────

    @log_repository_call
    def find_all(self) -> dict[int, Vehicle]:
        return dict(self._db)

    @log_repository_call
    def find_by_color_and_year(
        self, color: str | None = None, year: int | None = None,
    ) -> dict[int, Vehicle]:
        """Filter by color, by year, or by both when both are given.

        An empty color or a ``None``/0 year means "do not filter on it".
        At least one of the two must be supplied.
        """
        if year is not None and year < 0:
            raise VehicleYearEmptyError()
        if not color and not year:
            raise VehicleColorEmptyError()

        def predicate(v: Vehicle) -> bool:
            if color and not text_matches(v.color, color):
                return False
            return not year or v.year == year

        return self._select(predicate)

    @log_repository_call
    def find_by_brand_and_year_range(
        self, brand: str, year_from: int, year_to: int,
    ) -> dict[int, Vehicle]:
        if not brand:
            raise VehicleBrandEmptyError()
        if year_from <= 0 or year_to <= 0:
            raise VehicleYearEmptyError()
        years = Bounds(year_from, year_to)
        if not years.is_ordered:
            raise VehicleYearEndInvalidError()
        return self._select(
            lambda v: text_matches(v.brand, brand) and years.contains(v.year),
        )

    @log_repository_call
    def average_speed_by_brand(self, brand: str) -> float:
        return float(statistics.mean(v.max_speed for v in self._by_brand(brand)))

    @log_repository_call
    def average_capacity_by_brand(self, brand: str) -> float:
        return float(statistics.mean(v.passengers for v in self._by_brand(brand)))

    @log_repository_call
    def find_by_fuel_type(self, fuel_type: str) -> dict[int, Vehicle]:
        if not fuel_type:
            raise VehicleFuelTypeEmptyError()
        return self._select(lambda v: text_matches(v.fuel_type, fuel_type))

    @log_repository_call
    def find_by_transmission_type(self, transmission: str) -> dict[int, Vehicle]:
        if not transmission:
            raise VehicleTransmissionEmptyError()
        return self._select(lambda v: text_matches(v.transmission, transmission))

    @log_repository_call
    def find_by_dimensions(
        self, min_length: float, max_length: float, min_width: float, max_width: float,
    ) -> list[Vehicle]:
        lengths = Bounds(min_length, max_length)
        widths = Bounds(min_width, max_width)
        if not lengths.is_positive:
            raise VehicleLengthInvalidError()
        if not widths.is_positive:
            raise VehicleWidthInvalidError()
        if not lengths.is_ordered:
            raise VehicleMinLengthGreaterThanMaxLengthError()
        if not widths.is_ordered:
            raise VehicleMinWidthGreaterThanMaxWidthError()
        found = self._select(
            lambda v: lengths.contains(v.length) and widths.contains(v.width),
        )
        return list(found.values())

    @log_repository_call
    def find_by_weight(self, min_weight: float, max_weight: float) -> list[Vehicle]:
        weights = Bounds(min_weight, max_weight)
        if not weights.is_positive:
            raise VehicleWeightInvalidError()
        if not weights.is_ordered:
            raise VehicleMinWeightGreaterThanMaxWeightError()
        found = self._select(lambda v: weights.contains(v.weight))
        return list(found.values())

    # ── Writes ───────────────────────────────────────────────────────────

    @log_repository_call
    def create(self, vehicle: Vehicle) -> None:
        self._check_new([vehicle])
        if not vehicle.is_complete:
            raise VehicleIncompleteError()
        self._db[vehicle.id] = vehicle

    @log_repository_call
    def create_batch(self, vehicles: list[Vehicle]) -> list[Vehicle]:
        """Insert every vehicle or none of them."""
        if not vehicles:
            raise VehicleBatchEmptyError()
        self._check_new(vehicles)
        for v in vehicles:
            if not v.is_complete:
                raise VehicleIncompleteError(f"vehicle with id {v.id} is incomplete")

        for v in vehicles:
            self._db[v.id] = v
        return list(vehicles)

    @log_repository_call
    def update_speed_by_id(self, vehicle_id: int, speed: float) -> Vehicle:
        if vehicle_id <= 0:
            raise VehicleIdInvalidError()
        if not math.isfinite(speed) or speed <= 0:
            raise VehicleSpeedInvalidError()
        updated = self._get(vehicle_id).model_copy(update={"max_speed": float(speed)})
        self._db[vehicle_id] = updated
        return updated

    @log_repository_call
    def update_fuel_by_id(self, vehicle_id: int, fuel_type: str) -> Vehicle:
        if vehicle_id <= 0:
            raise VehicleIdInvalidError()
        if not fuel_type:
            raise VehicleFuelTypeEmptyError()
        updated = self._get(vehicle_id).model_copy(update={"fuel_type": fuel_type})
        self._db[vehicle_id] = updated
        return updated

    @log_repository_call
    def delete_by_id(self, vehicle_id: int) -> None:
        self._get(vehicle_id)
        del self._db[vehicle_id]
