"""Basic usage examples for the vehicle API client.

Start the server first, optionally seeded:
    VEHICLESTORE_SEED_FILE=vehicles.json python -m vehiclestore.api
"""

from vehiclestore import Bounds, Vehicle, VehicleAPIError, VehicleClient


def main() -> None:
    with VehicleClient("http://localhost:8080") as api:
        # Add a couple of vehicles in one all-or-nothing batch
        print("=== Batch insert ===")
        try:
            created = api.create_batch([
                Vehicle(
                    id=1001, brand="Ford", model="Fiesta", registration="ABC-123",
                    color="Red", year=2020, passengers=5, max_speed=190.0,
                    fuel_type="gasoline", transmission="manual", weight=1150.0,
                    height=1.48, length=4.06, width=1.73,
                ),
                Vehicle(
                    id=1002, brand="Ford", model="Transit", registration="XYZ-987",
                    color="White", year=2017, passengers=9, max_speed=160.0,
                    fuel_type="diesel", transmission="manual", weight=2400.0,
                    height=2.55, length=5.53, width=2.05,
                ),
            ])
            for v in created:
                print(f"  #{v.id} {v.brand} {v.model}")
        except VehicleAPIError as exc:
            print(f"  Batch rejected ({exc.status_code}): {exc.message}")

        # Aggregates by brand
        print("\n=== Ford averages ===")
        print(f"  Speed: {api.average_speed_by_brand('Ford'):.1f} km/h")
        print(f"  Passengers: {api.average_capacity_by_brand('Ford'):.1f}")

        # Range lookups
        print("\n=== Ford 2015-2020 ===")
        for v in api.find_by_brand_and_year_range("Ford", 2015, 2020).values():
            print(f"  #{v.id} {v.model} ({v.year})")

        print("\n=== Compact cars (length 3.5-4.5 m, width 1.6-1.8 m) ===")
        try:
            for v in api.find_by_dimensions(Bounds(3.5, 4.5), Bounds(1.6, 1.8)):
                print(f"  #{v.id} {v.brand} {v.model}: {v.length} x {v.width} m")
        except VehicleAPIError as exc:
            print(f"  {exc.message}")

        # Field updates
        print("\n=== Updates ===")
        v = api.update_speed_by_id(1001, 195.0)
        print(f"  #{v.id} max speed is now {v.max_speed}")
        v = api.update_fuel_by_id(1002, "electric")
        print(f"  #{v.id} fuel type is now {v.fuel_type}")


if __name__ == "__main__":
    main()
