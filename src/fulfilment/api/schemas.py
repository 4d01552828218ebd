"""Pydantic request/response schemas for the Fulfilment API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands. Business rules are left to the domain, so the
numeric fields are not range-checked here.
"""

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Warehouse Schemas
# ---------------------------------------------------------------------------
class CreateWarehouseRequest(BaseModel):
    business_unit_code: str | None = None
    location: str | None = None
    capacity: int | None = None
    stock: int | None = None


class ReplaceWarehouseRequest(BaseModel):
    location: str | None = None
    capacity: int | None = None
    stock: int | None = None


class WarehouseResponse(BaseModel):
    id: str
    business_unit_code: str
    location: str
    capacity: int
    stock: int
    created_at: datetime | None = None
    archived_at: datetime | None = None

    @classmethod
    def from_aggregate(cls, warehouse) -> "WarehouseResponse":
        return cls(
            id=str(warehouse.id),
            business_unit_code=warehouse.business_unit_code,
            location=warehouse.location,
            capacity=warehouse.capacity,
            stock=warehouse.stock,
            created_at=warehouse.created_at,
            archived_at=warehouse.archived_at,
        )


# ---------------------------------------------------------------------------
# Assignment Schemas
# ---------------------------------------------------------------------------
class AssignFulfilmentRequest(BaseModel):
    store_id: str | None = None
    product_id: str | None = None
    warehouse_code: str | None = None


class AssignmentResponse(BaseModel):
    id: str
    store_id: str
    product_id: str
    warehouse_code: str
    assigned_at: datetime | None = None

    @classmethod
    def from_aggregate(cls, assignment) -> "AssignmentResponse":
        return cls(
            id=str(assignment.id),
            store_id=str(assignment.store_id),
            product_id=str(assignment.product_id),
            warehouse_code=assignment.warehouse_code,
            assigned_at=assignment.assigned_at,
        )
