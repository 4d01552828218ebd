"""Domain events for the Warehouse aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from fulfilment.domain import fulfilment


@fulfilment.event(part_of="Warehouse")
class WarehouseCreated:
    """A new warehouse was admitted at a location."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    business_unit_code = String(required=True)
    location = String(required=True)
    capacity = Integer()
    stock = Integer()
    created_at = DateTime(required=True)


@fulfilment.event(part_of="Warehouse")
class WarehouseArchived:
    """A warehouse was retired; it no longer counts towards its location."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    business_unit_code = String(required=True)
    location = String(required=True)
    archived_at = DateTime(required=True)


@fulfilment.event(part_of="Warehouse")
class WarehouseReplaced:
    """A new warehouse took over the business unit code of an archived one."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    replaced_warehouse_id = Identifier(required=True)
    business_unit_code = String(required=True)
    previous_location = String(required=True)
    location = String(required=True)
    capacity = Integer()
    stock = Integer()
    created_at = DateTime(required=True)
