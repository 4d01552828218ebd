"""Warehouse aggregate (CQRS): a logistics unit that stores product at a location.

A warehouse is identified in business terms by its business unit code. The
code survives a replace: the old record is archived in place and a new record
is created under the same code, so at most one record per code is active.
Archived records are never deleted.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from fulfilment.domain import fulfilment
from fulfilment.warehouse.events import WarehouseArchived, WarehouseCreated, WarehouseReplaced


@fulfilment.aggregate(limit=-1)
class Warehouse:
    """A warehouse unit; active while ``archived_at`` is unset."""

    business_unit_code = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    capacity = Integer(required=True, min_value=1)
    stock = Integer(default=0, min_value=0)
    created_at = DateTime()
    archived_at = DateTime()

    @invariant.post
    def stock_cannot_exceed_capacity(self):
        if self.stock is not None and self.capacity is not None and self.stock > self.capacity:
            raise ValidationError({"stock": ["Stock cannot exceed capacity"]})

    @classmethod
    def create(cls, business_unit_code, location, capacity, stock=0):
        """Create a new active warehouse."""
        now = datetime.now(UTC)
        warehouse = cls(
            business_unit_code=business_unit_code,
            location=location,
            capacity=capacity,
            stock=stock,
            created_at=now,
            archived_at=None,
        )
        warehouse.raise_(
            WarehouseCreated(
                warehouse_id=str(warehouse.id),
                business_unit_code=business_unit_code,
                location=location,
                capacity=capacity,
                stock=stock,
                created_at=now,
            )
        )
        return warehouse

    @classmethod
    def replacing(cls, existing, location, capacity, stock):
        """Create the successor of ``existing`` under the same business unit code.

        The caller archives ``existing`` in the same unit of work.
        """
        now = datetime.now(UTC)
        warehouse = cls(
            business_unit_code=existing.business_unit_code,
            location=location,
            capacity=capacity,
            stock=stock,
            created_at=now,
            archived_at=None,
        )
        warehouse.raise_(
            WarehouseReplaced(
                warehouse_id=str(warehouse.id),
                replaced_warehouse_id=str(existing.id),
                business_unit_code=existing.business_unit_code,
                previous_location=existing.location,
                location=location,
                capacity=capacity,
                stock=stock,
                created_at=now,
            )
        )
        return warehouse

    def is_archived(self):
        return self.archived_at is not None

    def archive(self):
        """Archive the warehouse. Archiving an archived warehouse changes nothing."""
        if self.is_archived():
            return
        self.archived_at = datetime.now(UTC)
        self.raise_(
            WarehouseArchived(
                warehouse_id=str(self.id),
                business_unit_code=self.business_unit_code,
                location=self.location,
                archived_at=self.archived_at,
            )
        )
