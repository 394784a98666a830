# examples/car_fleet.py
"""A small fleet: many registrations, few shared car models."""

from flyweight import CarModel, CarUsage, FlyweightCache

FLEET = [
    ("Model S", "Tesla", "Electric", "TS1234", "Alice"),
    ("Model S", "Tesla", "Electric", "TS5678", "Bob"),
    ("Mustang", "Ford", "Gasoline", "FD1234", "Charlie"),
    ("Mustang", "Ford", "Gasoline", "FD9999", "Dana"),
    ("Model S", "Tesla", "Electric", "TS0001", "Eve"),
]


def main():
    print("=== Car Fleet Demo ===\n")

    cache = FlyweightCache(CarModel)
    cache.subscribe(
        lambda result: print(
            f"{'✓ created' if result.created else '↺ reused'}: {result.record.model}"
        )
    )

    for model, brand, engine_type, registration, owner in FLEET:
        car = cache.acquire(model, brand, engine_type)
        print(cache.render(car, CarUsage(registration_number=registration, owner=owner)))
        print()

    stats = cache.stats
    print(f"{len(FLEET)} registrations, {stats.size} shared models")
    print(f"hits={stats.hits} misses={stats.misses}")


if __name__ == "__main__":
    main()
