"""Location feasibility: may one more warehouse be admitted at a location?

Shared by create and replace. Replace passes the warehouse it retires as
``replacing`` so the check runs as if that record were already archived.
"""

from fulfilment.exceptions import ConstraintViolation
from fulfilment.location import Location
from fulfilment.warehouse.warehouse import Warehouse


def ensure_location_can_host(
    location: Location,
    warehouses_at_location: list[Warehouse],
    capacity: int,
    replacing: Warehouse | None = None,
) -> None:
    """Raise ConstraintViolation when ``location`` cannot take ``capacity`` more.

    ``warehouses_at_location`` are the active warehouses currently at the
    location.
    """
    siblings = [
        w
        for w in warehouses_at_location
        if replacing is None or w.business_unit_code != replacing.business_unit_code
    ]

    if len(siblings) >= location.max_number_of_warehouses:
        raise ConstraintViolation(
            {
                "location": [
                    f"Maximum number of warehouses reached for location {location.identification}"
                ]
            }
        )

    total_capacity = sum(w.capacity or 0 for w in siblings) + capacity
    if total_capacity > location.max_capacity:
        raise ConstraintViolation(
            {
                "capacity": [
                    f"Total capacity for location {location.identification} would exceed "
                    f"the maximum allowed capacity of {location.max_capacity}"
                ]
            }
        )
