"""Location catalog abstraction: pluggable source of location reference data."""

import os

from fulfilment.location.port import Location, LocationCatalog

_catalog_instance = None

__all__ = [
    "Location",
    "LocationCatalog",
    "get_location_catalog",
    "reset_location_catalog",
    "set_location_catalog",
]


def get_location_catalog() -> LocationCatalog:
    """Return the configured location catalog (singleton).

    Uses FixedLocationCatalog by default. Other sources are selected via the
    LOCATION_CATALOG environment variable.
    """
    global _catalog_instance
    if _catalog_instance is None:
        adapter = os.environ.get("LOCATION_CATALOG", "fixed")
        if adapter == "fixed":
            from fulfilment.location.fixed_adapter import FixedLocationCatalog

            _catalog_instance = FixedLocationCatalog()
        else:
            raise ValueError(f"Unknown location catalog: {adapter}")
    return _catalog_instance


def set_location_catalog(catalog: LocationCatalog) -> None:
    """Install a specific catalog instance (custom sources and tests)."""
    global _catalog_instance
    _catalog_instance = catalog


def reset_location_catalog():
    """Reset the catalog singleton (useful for testing)."""
    global _catalog_instance
    _catalog_instance = None
