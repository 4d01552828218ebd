"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, with no cross-user
sharing. State tracks what creation endpoints returned so follow-up
operations can reference it.
"""

from dataclasses import dataclass, field


@dataclass
class WarehouseState:
    """Tracks state for a single simulated warehouse lifecycle."""

    business_unit_code: str | None = None
    location: str | None = None
    capacity: int = 0
    stock: int = 0
    replacements: int = 0


@dataclass
class AssignmentState:
    """Tracks the warehouses seen and the triples assigned by one store."""

    store_id: str | None = None
    warehouse_codes: list[str] = field(default_factory=list)
    assigned: list[tuple[str, str]] = field(default_factory=list)
