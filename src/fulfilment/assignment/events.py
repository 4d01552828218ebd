"""Domain events for the FulfilmentAssignment aggregate."""

from protean.fields import DateTime, Identifier, String

from fulfilment.domain import fulfilment


@fulfilment.event(part_of="FulfilmentAssignment")
class FulfilmentAssigned:
    """A warehouse now fulfils a product for a store."""

    __version__ = 1

    assignment_id = Identifier(required=True)
    store_id = Identifier(required=True)
    product_id = Identifier(required=True)
    warehouse_code = String(required=True)
    assigned_at = DateTime(required=True)
