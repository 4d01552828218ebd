"""FulfilmentAssignment aggregate (CQRS): a (store, product, warehouse) relation.

Records that a product, at a store, is fulfilled from a warehouse. The
warehouse is referenced by its business unit code. Assignments are created
once and never updated; ``assignment_key`` makes the triple unique in the
store, so two concurrent assigns of the same triple cannot both commit.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from fulfilment.assignment.events import FulfilmentAssigned
from fulfilment.domain import fulfilment


def assignment_key(store_id, product_id, warehouse_code):
    return f"{store_id}|{product_id}|{warehouse_code}"


@fulfilment.aggregate(limit=-1)
class FulfilmentAssignment:
    store_id = Identifier(required=True)
    product_id = Identifier(required=True)
    warehouse_code = String(required=True, max_length=50)
    assignment_key = String(required=True, max_length=255, unique=True)
    assigned_at = DateTime()

    @classmethod
    def assign(cls, store_id, product_id, warehouse_code):
        now = datetime.now(UTC)
        assignment = cls(
            store_id=store_id,
            product_id=product_id,
            warehouse_code=warehouse_code,
            assignment_key=assignment_key(store_id, product_id, warehouse_code),
            assigned_at=now,
        )
        assignment.raise_(
            FulfilmentAssigned(
                assignment_id=str(assignment.id),
                store_id=str(store_id),
                product_id=str(product_id),
                warehouse_code=warehouse_code,
                assigned_at=now,
            )
        )
        return assignment
