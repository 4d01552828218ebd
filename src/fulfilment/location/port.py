"""Location catalog port (abstract interface).

Locations are reference data owned by an external system. The engines only
read them, so the contract is a single lookup by identifier.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A named site with fixed warehouse-count and capacity ceilings."""

    identification: str
    max_number_of_warehouses: int
    max_capacity: int


class LocationCatalog(ABC):
    """Abstract location catalog interface."""

    @abstractmethod
    def resolve(self, identifier: str) -> Location | None:
        """Return the location for ``identifier``, or None when it is unknown."""
        ...
