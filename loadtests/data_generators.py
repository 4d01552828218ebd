"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's input validation and
match the exact field names expected by its Pydantic request schemas.
Capacities are kept small so several warehouses fit on one location.
"""

import random
import uuid

from faker import Faker

fake = Faker()

LOCATIONS = [
    "ZWOLLE-001",
    "ZWOLLE-002",
    "AMSTERDAM-001",
    "AMSTERDAM-002",
    "TILBURG-001",
    "HELMOND-001",
    "EINDHOVEN-001",
    "VETSBY-001",
]


# ---------- Warehouses ----------


def business_unit_code() -> str:
    """Generate unique business unit codes like 'MWH.LT.a1b2c3d4'."""
    return f"MWH.LT.{uuid.uuid4().hex[:8]}"


def warehouse_data() -> dict:
    """Generate CreateWarehouseRequest payload."""
    capacity = random.randint(1, 10)
    return {
        "business_unit_code": business_unit_code(),
        "location": random.choice(LOCATIONS),
        "capacity": capacity,
        "stock": random.randint(0, capacity),
    }


def replacement_data(stock: int) -> dict:
    """Generate ReplaceWarehouseRequest payload that keeps ``stock``."""
    return {
        "location": random.choice(LOCATIONS),
        "capacity": stock + random.randint(1, 5),
        "stock": stock,
    }


# ---------- Assignments ----------


def store_id() -> str:
    """Generate store ids like 'STORE-amsterdam-1a2b'."""
    return f"STORE-{fake.city().split()[0].lower()}-{uuid.uuid4().hex[:4]}"


def product_id() -> str:
    """Pick from a small product range so warehouse limits are exercised."""
    return f"PROD-{random.randint(1, 12):03d}"
