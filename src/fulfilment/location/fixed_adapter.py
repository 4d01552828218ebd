"""Fixed location catalog: the static set of sites known to the business."""

from fulfilment.location.port import Location, LocationCatalog

LOCATIONS = (
    Location("ZWOLLE-001", 1, 40),
    Location("ZWOLLE-002", 2, 50),
    Location("AMSTERDAM-001", 5, 100),
    Location("AMSTERDAM-002", 3, 75),
    Location("TILBURG-001", 1, 40),
    Location("HELMOND-001", 1, 45),
    Location("EINDHOVEN-001", 2, 70),
    Location("VETSBY-001", 1, 90),
)


class FixedLocationCatalog(LocationCatalog):
    """Catalog backed by an in-process tuple of locations."""

    def __init__(self, locations=LOCATIONS):
        self._locations = {location.identification: location for location in locations}

    def resolve(self, identifier: str) -> Location | None:
        if identifier is None:
            return None
        return self._locations.get(identifier)
