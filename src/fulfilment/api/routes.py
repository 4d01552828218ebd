"""FastAPI routes for the Fulfilment domain: warehouses and assignments."""

from fastapi import APIRouter, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from fulfilment.api.schemas import (
    AssignFulfilmentRequest,
    AssignmentResponse,
    CreateWarehouseRequest,
    ReplaceWarehouseRequest,
    WarehouseResponse,
)
from fulfilment.assignment.assign import AssignFulfilment
from fulfilment.assignment.assignment import FulfilmentAssignment
from fulfilment.warehouse.lifecycle import ArchiveWarehouse, CreateWarehouse, ReplaceWarehouse
from fulfilment.warehouse.warehouse import Warehouse

# ---------------------------------------------------------------------------
# Warehouse Router
# ---------------------------------------------------------------------------
warehouse_router = APIRouter(prefix="/warehouses", tags=["warehouses"])


@warehouse_router.get("", response_model=list[WarehouseResponse])
async def list_warehouses() -> list[WarehouseResponse]:
    warehouses = current_domain.repository_for(Warehouse).active()
    return [WarehouseResponse.from_aggregate(w) for w in warehouses]


@warehouse_router.get("/{business_unit_code}", response_model=WarehouseResponse)
async def get_warehouse(business_unit_code: str) -> WarehouseResponse:
    warehouse = current_domain.repository_for(Warehouse).find_active_by_code(business_unit_code)
    if warehouse is None:
        raise ObjectNotFoundError(f"Warehouse not found for business unit code: {business_unit_code}")
    return WarehouseResponse.from_aggregate(warehouse)


@warehouse_router.post("", status_code=201, response_model=WarehouseResponse)
async def create_warehouse(body: CreateWarehouseRequest) -> WarehouseResponse:
    command = CreateWarehouse(
        business_unit_code=body.business_unit_code,
        location=body.location,
        capacity=body.capacity,
        stock=body.stock,
    )
    warehouse = current_domain.process(command, asynchronous=False)
    return WarehouseResponse.from_aggregate(warehouse)


@warehouse_router.post("/{business_unit_code}/replacement", response_model=WarehouseResponse)
async def replace_warehouse(business_unit_code: str, body: ReplaceWarehouseRequest) -> WarehouseResponse:
    command = ReplaceWarehouse(
        business_unit_code=business_unit_code,
        location=body.location,
        capacity=body.capacity,
        stock=body.stock,
    )
    warehouse = current_domain.process(command, asynchronous=False)
    return WarehouseResponse.from_aggregate(warehouse)


@warehouse_router.delete("/{business_unit_code}", status_code=204)
async def archive_warehouse(business_unit_code: str) -> Response:
    command = ArchiveWarehouse(business_unit_code=business_unit_code)
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Assignment Router
# ---------------------------------------------------------------------------
assignment_router = APIRouter(prefix="/assignments", tags=["assignments"])


@assignment_router.post("", status_code=201, response_model=AssignmentResponse)
async def assign_fulfilment(body: AssignFulfilmentRequest) -> AssignmentResponse:
    command = AssignFulfilment(
        store_id=body.store_id,
        product_id=body.product_id,
        warehouse_code=body.warehouse_code,
    )
    assignment = current_domain.process(command, asynchronous=False)
    return AssignmentResponse.from_aggregate(assignment)


@assignment_router.get("", response_model=list[AssignmentResponse])
async def list_assignments(
    store_id: str | None = None,
    product_id: str | None = None,
    warehouse_code: str | None = None,
) -> list[AssignmentResponse]:
    assignments = current_domain.repository_for(FulfilmentAssignment).search(
        store_id=store_id,
        product_id=product_id,
        warehouse_code=warehouse_code,
    )
    return [AssignmentResponse.from_aggregate(a) for a in assignments]
