"""Tests for the in-memory VehicleMap repository."""

from __future__ import annotations

import pytest

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
from vehiclestore.models.vehicle import NUMERIC_FIELDS, TEXT_FIELDS, Vehicle
from vehiclestore.repository import VehicleMap, VehicleRepository
from tests.conftest import make_vehicle


class TestVehicleRepository:
    def test_cannot_instantiate_abc(self):
        with pytest.raises(TypeError):
            VehicleRepository()

    def test_partial_implementation_fails(self):
        class PartialRepo(VehicleRepository):
            def find_all(self): return {}

        with pytest.raises(TypeError):
            PartialRepo()

    def test_vehicle_map_is_repository(self):
        assert isinstance(VehicleMap(), VehicleRepository)


class TestFindAll:
    def test_empty(self):
        assert VehicleMap().find_all() == {}

    def test_returns_all(self, store, fleet):
        assert store.find_all() == fleet

    def test_returns_copy(self, store):
        result = store.find_all()
        result.clear()
        assert len(store.find_all()) == 4

    def test_initial_mapping_is_copied(self, fleet):
        store = VehicleMap(fleet)
        fleet.clear()
        assert len(store) == 4


class TestCreate:
    def test_round_trip(self):
        store = VehicleMap()
        v = make_vehicle(id=10)
        store.create(v)
        assert store.find_all() == {10: v}

    def test_returns_none(self):
        assert VehicleMap().create(make_vehicle()) is None

    def test_duplicate_id(self, store):
        with pytest.raises(VehicleAlreadyExistsError):
            store.create(make_vehicle(id=1, brand="Fiat", model="Punto"))

    def test_existence_checked_before_completeness(self, store):
        with pytest.raises(VehicleAlreadyExistsError):
            store.create(Vehicle(id=1))

    def test_incomplete(self):
        with pytest.raises(VehicleIncompleteError):
            VehicleMap().create(Vehicle(id=5, brand="Ford"))

    def test_non_positive_id_is_incomplete(self):
        with pytest.raises(VehicleIncompleteError):
            VehicleMap().create(make_vehicle(id=0))

    @pytest.mark.parametrize("field", TEXT_FIELDS)
    def test_empty_text_field(self, field):
        store = VehicleMap()
        with pytest.raises(VehicleIncompleteError):
            store.create(make_vehicle(**{field: ""}))
        assert store.find_all() == {}

    @pytest.mark.parametrize("field", NUMERIC_FIELDS)
    def test_zero_numeric_field(self, field):
        store = VehicleMap()
        with pytest.raises(VehicleIncompleteError):
            store.create(make_vehicle(**{field: 0}))
        assert store.find_all() == {}


class TestCreateBatch:
    def test_inserts_all(self, store):
        batch = [make_vehicle(id=10), make_vehicle(id=11)]
        created = store.create_batch(batch)
        assert created == batch
        assert set(store.find_all()) == {1, 2, 3, 4, 10, 11}

    def test_empty(self, store):
        with pytest.raises(VehicleBatchEmptyError):
            store.create_batch([])

    def test_id_already_stored(self, store, fleet):
        with pytest.raises(VehicleAlreadyExistsError):
            store.create_batch([make_vehicle(id=10), make_vehicle(id=3)])
        assert store.find_all() == fleet

    def test_id_repeated_in_batch(self, store, fleet):
        with pytest.raises(VehicleAlreadyExistsError):
            store.create_batch([make_vehicle(id=10), make_vehicle(id=11), make_vehicle(id=10)])
        assert store.find_all() == fleet

    def test_incomplete_inserts_nothing(self, store, fleet):
        with pytest.raises(VehicleIncompleteError):
            store.create_batch([make_vehicle(id=10), make_vehicle(id=11, color="")])
        assert store.find_all() == fleet

    def test_duplicate_reported_before_incomplete(self, store):
        with pytest.raises(VehicleAlreadyExistsError):
            store.create_batch([make_vehicle(id=10, brand=""), make_vehicle(id=1)])


class TestFindByColorAndYear:
    def test_color_and_year(self, store):
        assert set(store.find_by_color_and_year("White", 2020)) == {3}

    def test_color_case_insensitive(self, store):
        assert set(store.find_by_color_and_year("wHiTe", 2015)) == {4}

    def test_color_only(self, store):
        assert set(store.find_by_color_and_year("white")) == {3, 4}
        assert set(store.find_by_color_and_year("white", 0)) == {3, 4}

    def test_year_only(self, store):
        assert set(store.find_by_color_and_year(year=2020)) == {1, 3}
        assert set(store.find_by_color_and_year("", 2020)) == {1, 3}

    def test_neither(self, store):
        with pytest.raises(VehicleColorEmptyError):
            store.find_by_color_and_year("", 0)

    def test_negative_year(self, store):
        with pytest.raises(VehicleYearEmptyError):
            store.find_by_color_and_year("Red", -1)

    def test_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.find_by_color_and_year("Red", 2015)


class TestFindByBrandAndYearRange:
    def test_inclusive_range(self, store):
        assert set(store.find_by_brand_and_year_range("Ford", 2015, 2018)) == {2, 4}

    def test_brand_case_insensitive(self, store):
        assert set(store.find_by_brand_and_year_range("ford", 2019, 2021)) == {1}

    def test_single_record_example(self):
        store = VehicleMap({1: make_vehicle(id=1, brand="Ford", year=2020, max_speed=200)})
        assert set(store.find_by_brand_and_year_range("Ford", 2019, 2021)) == {1}
        with pytest.raises(VehicleYearEndInvalidError):
            store.find_by_brand_and_year_range("Ford", 2021, 2019)

    def test_brand_empty(self, store):
        with pytest.raises(VehicleBrandEmptyError):
            store.find_by_brand_and_year_range("", 2015, 2020)

    @pytest.mark.parametrize("year_from, year_to", [(0, 2020), (2015, 0), (-5, 2020)])
    def test_year_empty(self, store, year_from, year_to):
        with pytest.raises(VehicleYearEmptyError):
            store.find_by_brand_and_year_range("Ford", year_from, year_to)

    def test_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.find_by_brand_and_year_range("Toyota", 2000, 2010)


class TestAverages:
    def test_average_speed(self, store):
        assert store.average_speed_by_brand("Ford") == pytest.approx((200 + 180 + 150) / 3)

    def test_average_speed_single(self, store):
        assert store.average_speed_by_brand("TOYOTA") == 170.0

    def test_average_capacity(self, store):
        assert store.average_capacity_by_brand("ford") == pytest.approx((5 + 5 + 9) / 3)

    def test_average_capacity_returns_float(self, store):
        result = store.average_capacity_by_brand("Toyota")
        assert isinstance(result, float)
        assert result == 4.0

    def test_brand_empty(self, store):
        with pytest.raises(VehicleBrandEmptyError):
            store.average_speed_by_brand("")
        with pytest.raises(VehicleBrandEmptyError):
            store.average_capacity_by_brand("")

    def test_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.average_speed_by_brand("Fiat")
        with pytest.raises(VehicleNotFoundError):
            store.average_capacity_by_brand("Fiat")


class TestUpdateSpeed:
    def test_updates_only_speed(self, store, fleet):
        updated = store.update_speed_by_id(1, 220.5)
        assert updated.max_speed == 220.5
        assert updated.model_dump(exclude={"max_speed"}) == fleet[1].model_dump(exclude={"max_speed"})
        assert store.find_all()[1] == updated

    def test_id_invalid(self, store):
        with pytest.raises(VehicleIdInvalidError):
            store.update_speed_by_id(0, 100)

    def test_id_checked_before_speed(self, store):
        with pytest.raises(VehicleIdInvalidError):
            store.update_speed_by_id(-1, -1)

    def test_speed_invalid(self, store):
        with pytest.raises(VehicleSpeedInvalidError):
            store.update_speed_by_id(1, 0)

    @pytest.mark.parametrize("speed", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_speed_rejected(self, store, fleet, speed):
        with pytest.raises(VehicleSpeedInvalidError):
            store.update_speed_by_id(1, speed)
        assert store.find_all()[1] == fleet[1]

    def test_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.update_speed_by_id(99, 100)

    def test_previous_copy_unchanged(self, store):
        before = store.find_all()[1]
        store.update_speed_by_id(1, 99.0)
        assert before.max_speed == 200.0


class TestUpdateFuel:
    def test_updates_only_fuel(self, store, fleet):
        updated = store.update_fuel_by_id(2, "electric")
        assert updated.fuel_type == "electric"
        assert updated.model_dump(exclude={"fuel_type"}) == fleet[2].model_dump(exclude={"fuel_type"})
        assert store.find_all()[2].fuel_type == "electric"

    def test_id_invalid(self, store):
        with pytest.raises(VehicleIdInvalidError):
            store.update_fuel_by_id(0, "diesel")

    def test_fuel_empty(self, store):
        with pytest.raises(VehicleFuelTypeEmptyError):
            store.update_fuel_by_id(1, "")

    def test_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.update_fuel_by_id(99, "diesel")


class TestFindByFuelAndTransmission:
    def test_fuel_type(self, store):
        assert set(store.find_by_fuel_type("DIESEL")) == {2, 4}

    def test_fuel_type_empty(self, store):
        with pytest.raises(VehicleFuelTypeEmptyError):
            store.find_by_fuel_type("")

    def test_fuel_type_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.find_by_fuel_type("electric")

    def test_transmission(self, store):
        assert set(store.find_by_transmission_type("Automatic")) == {2, 3}

    def test_transmission_empty(self, store):
        with pytest.raises(VehicleTransmissionEmptyError):
            store.find_by_transmission_type("")

    def test_transmission_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.find_by_transmission_type("cvt")


class TestDelete:
    def test_delete(self, store):
        assert store.delete_by_id(3) is None
        assert 3 not in store.find_all()
        with pytest.raises(VehicleNotFoundError):
            store.find_by_fuel_type("hybrid")

    def test_second_delete_not_found(self, store):
        store.delete_by_id(3)
        with pytest.raises(VehicleNotFoundError):
            store.delete_by_id(3)

    def test_id_invalid(self, store):
        with pytest.raises(VehicleIdInvalidError):
            store.delete_by_id(0)


class TestFindByDimensions:
    def test_inclusive(self):
        inside = make_vehicle(id=1, length=1.5, width=1.5)
        outside = make_vehicle(id=2, length=3.0, width=1.5)
        store = VehicleMap({1: inside, 2: outside})
        assert store.find_by_dimensions(1.0, 2.0, 1.0, 2.0) == [inside]

    def test_bounds_are_inclusive(self, store, fleet):
        assert store.find_by_dimensions(4.0, 4.4, 1.8, 1.8) == [fleet[1], fleet[2]]

    def test_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.find_by_dimensions(10.0, 12.0, 1.0, 3.0)

    def test_length_invalid(self, store):
        with pytest.raises(VehicleLengthInvalidError):
            store.find_by_dimensions(0, 4.0, 1.0, 2.0)

    def test_width_invalid(self, store):
        with pytest.raises(VehicleWidthInvalidError):
            store.find_by_dimensions(1.0, 4.0, 1.0, -2.0)

    def test_min_length_greater(self, store):
        with pytest.raises(VehicleMinLengthGreaterThanMaxLengthError):
            store.find_by_dimensions(5.0, 4.0, 1.0, 2.0)

    def test_min_width_greater(self, store):
        with pytest.raises(VehicleMinWidthGreaterThanMaxWidthError):
            store.find_by_dimensions(4.0, 5.0, 2.5, 2.0)


class TestFindByWeight:
    def test_range(self, store, fleet):
        result = store.find_by_weight(1250, 1400)
        assert result == [fleet[2], fleet[3]]

    def test_weight_invalid(self, store):
        with pytest.raises(VehicleWeightInvalidError):
            store.find_by_weight(0, 1000)

    def test_min_greater_than_max(self, store):
        with pytest.raises(VehicleMinWeightGreaterThanMaxWeightError):
            store.find_by_weight(2000, 1000)

    def test_not_found(self, store):
        with pytest.raises(VehicleNotFoundError):
            store.find_by_weight(5000, 6000)
