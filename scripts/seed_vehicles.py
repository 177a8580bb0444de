#!/usr/bin/env python3
"""
Seed the vehicles table with deterministic random inventory.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: prices correlated with year + brand band, mileage with age
- Both kinds: gas listings and electric listings

Usage:
    python scripts/seed_vehicles.py
    # or via Docker:
    docker compose run --rm api uv run python scripts/seed_vehicles.py
"""

from __future__ import annotations

import random
import sys
import uuid
from datetime import timedelta
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from autohaus.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from autohaus.domain.vehicle import Vehicle, VehicleKind, VehicleStatus, utc_now
from autohaus.infra.config import get_settings
from autohaus.infra.db.models import VehicleRow
from autohaus.infra.db.session import Database


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_GAS = 40
NUM_ELECTRIC = 20
CURRENT_YEAR = 2026


# ==============================================================================
# Inventory Data
# ==============================================================================

# Brand bands with base prices (USD)
GAS_BRANDS = {
    "value": {
        "brands": ["Ford", "Chevrolet", "Toyota", "Honda"],
        "base_price_min": Decimal("22000"),
        "base_price_max": Decimal("45000"),
    },
    "premium": {
        "brands": ["BMW", "Mercedes-Benz", "Audi", "Lexus"],
        "base_price_min": Decimal("45000"),
        "base_price_max": Decimal("95000"),
    },
}

GAS_MODELS = {
    "Ford": [("F-150", "Pickup"), ("Mustang", "Coupe"), ("Explorer", "SUV")],
    "Chevrolet": [("Silverado", "Pickup"), ("Tahoe", "SUV"), ("Malibu", "Sedan")],
    "Toyota": [("Camry", "Sedan"), ("RAV4", "SUV"), ("Tacoma", "Pickup")],
    "Honda": [("Civic", "Sedan"), ("CR-V", "SUV"), ("Accord", "Sedan")],
    "BMW": [("330i", "Sedan"), ("X5", "SUV"), ("M4", "Coupe")],
    "Mercedes-Benz": [("C 300", "Sedan"), ("GLE 350", "SUV"), ("E 450 Cabriolet", "Convertible")],
    "Audi": [("A4", "Sedan"), ("Q5", "SUV"), ("A5 Sportback", "Hatchback")],
    "Lexus": [("ES 350", "Sedan"), ("RX 350", "SUV"), ("IS 500", "Sedan")],
}

ELECTRIC_MODELS = {
    "Tesla": [("Model 3", Decimal("42000")), ("Model Y", Decimal("48000")), ("Model S", Decimal("82000"))],
    "Rivian": [("R1T", Decimal("73000")), ("R1S", Decimal("78000"))],
    "Hyundai": [("Ioniq 5", Decimal("43000")), ("Ioniq 6", Decimal("41000"))],
    "Polestar": [("Polestar 2", Decimal("50000"))],
}

TRANSMISSIONS = ["Automatic", "Manual", "CVT"]
COLOURS = ["Black", "White", "Silver", "Blue", "Red", "Grey"]
DRIVETRAINS = ["FWD", "RWD", "AWD", "4WD"]


# ==============================================================================
# Price Calculation with Realism
# ==============================================================================


def calculate_price(base_min: Decimal, base_max: Decimal, year: int) -> Decimal:
    """
    Calculate price based on brand band and year.

    Logic:
    - Newer vehicles are more expensive
    - Price depreciates ~9% per year, capped at 60% total depreciation
    - Rounded to the nearest 500
    """
    base_price = Decimal(random.randint(int(base_min), int(base_max)))
    years_old = max(0, CURRENT_YEAR - year)
    depreciation = min(Decimal("0.09") * years_old, Decimal("0.60"))
    variance = Decimal(str(round(random.uniform(0.92, 1.08), 3)))
    price = base_price * (Decimal("1") - depreciation) * variance
    return max((price / 500).quantize(Decimal("1")) * 500, Decimal("8000"))


# ==============================================================================
# Seed Generation
# ==============================================================================


def _stock_number(prefix: str, index: int) -> str:
    return f"{prefix}{index:05d}"


def generate_gas_vehicle(index: int) -> Vehicle:
    band = random.choice(list(GAS_BRANDS.values()))
    brand = random.choice(band["brands"])
    model, body = random.choice(GAS_MODELS[brand])

    year = random.choices(
        range(2016, CURRENT_YEAR + 1),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7, 4],  # Favor newer years
        k=1,
    )[0]
    price = calculate_price(band["base_price_min"], band["base_price_max"], year)

    years_old = CURRENT_YEAR - year
    mileage = random.randint(0, max(1000, min(150000, years_old * 12000 + random.randint(0, 15000))))

    return Vehicle(
        id=str(uuid.uuid4()),
        kind=VehicleKind.GAS,
        title=f"{year} {brand} {model}",
        brand=brand,
        model=model,
        year=year,
        price=price,
        price_display=f"{price:,.2f}",
        status=random.choices(list(VehicleStatus), weights=[8, 1, 1], k=1)[0],
        mileage=mileage,
        engine=Decimal(random.choice(["2.0", "2.5", "3.0", "3.5", "5.0"])),
        cylinders=random.choice([4, 6, 8]),
        gearbox=f"{random.choice([6, 8, 10])}-speed",
        transmission=random.choices(TRANSMISSIONS, weights=[6, 1, 2], k=1)[0],
        body=body,
        drivetrain=random.choice(DRIVETRAINS),
        colour=random.choice(COLOURS),
        stock_number=_stock_number("G", index),
        time_to_60=Decimal(str(round(random.uniform(3.8, 8.9), 1))),
        description=f"Well kept {brand} {model} with full service history.",
        created_at=utc_now() - timedelta(days=random.randint(0, 120), minutes=index),
    )


def generate_electric_vehicle(index: int) -> Vehicle:
    brand = random.choice(list(ELECTRIC_MODELS))
    model, base_price = random.choice(ELECTRIC_MODELS[brand])
    year = random.randint(2020, CURRENT_YEAR)
    price = calculate_price(base_price * Decimal("0.9"), base_price * Decimal("1.1"), year)
    range_km = Decimal(random.randint(380, 650))

    return Vehicle(
        id=str(uuid.uuid4()),
        kind=VehicleKind.ELECTRIC,
        title=f"{year} {brand} {model}",
        brand=brand,
        model=model,
        year=year,
        price=price,
        price_display=f"{price:,.2f}",
        status=random.choices(list(VehicleStatus), weights=[8, 1, 1], k=1)[0],
        subtitle=random.choice(["Long Range", "Performance", "Standard Range", "Dual Motor"]),
        range_km=range_km,
        range_description=f"Up to {range_km} km (EPA est.)",
        colour=random.choice(COLOURS),
        stock_number=_stock_number("E", index),
        top_speed=Decimal(random.choice([180, 201, 209, 250, 261])),
        time_to_60=Decimal(str(round(random.uniform(2.1, 6.5), 1))),
        description=f"{brand} {model} with home charger included.",
        created_at=utc_now() - timedelta(days=random.randint(0, 120), minutes=index),
    )


def seed_vehicles(num_gas: int = NUM_GAS, num_electric: int = NUM_ELECTRIC, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random inventory.

    Args:
        num_gas: Number of gas vehicles to generate
        num_electric: Number of electric vehicles to generate
        seed: Random seed for deterministic results
    """
    # Set random seed for deterministic results
    random.seed(seed)

    settings = get_settings()
    database = Database(settings.database_url())
    database.connect()
    repository = PostgresVehicleRepository(database)

    print(f"🌱 Seeding database with {num_gas} gas and {num_electric} electric vehicles (seed={seed})...")

    try:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing vehicles...")
        with database.session() as session:
            deleted_count = session.query(VehicleRow).delete()
        print(f"   Deleted {deleted_count} existing vehicles")

        # Step 2: Generate and insert new vehicles
        vehicles = [generate_gas_vehicle(i) for i in range(1, num_gas + 1)]
        vehicles += [generate_electric_vehicle(i) for i in range(1, num_electric + 1)]
        for vehicle in vehicles:
            repository.add(vehicle)

        print(f"✅ Successfully seeded {len(vehicles)} vehicles!")

        # Print some sample data
        print("\n📊 Sample vehicles:")
        for i, vehicle in enumerate(vehicles[:5], 1):
            print(f"   {i}. {vehicle.title} - ${vehicle.price:,.2f} ({vehicle.status.value})")

        if len(vehicles) > 5:
            print(f"   ... and {len(vehicles) - 5} more")
    finally:
        database.disconnect()


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
