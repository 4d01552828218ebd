"""Warehouse lifecycle: create, replace and archive commands and their handler.

Every precondition is re-checked against the repository on each command, in a
fixed order, and the first violation is raised before anything is written.
Each handler method runs inside the unit of work Protean opens for it, so the
archive and create of a replace commit together or not at all.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from fulfilment.domain import fulfilment
from fulfilment.exceptions import ConstraintViolation, InvalidArgument, NotFound
from fulfilment.location import Location, get_location_catalog
from fulfilment.utils.logging import get_logger
from fulfilment.warehouse.capacity import ensure_location_can_host
from fulfilment.warehouse.warehouse import Warehouse

logger = get_logger(__name__)


@fulfilment.command(part_of="Warehouse")
class CreateWarehouse:
    """Admit a new warehouse at a location."""

    business_unit_code = String(max_length=50)
    location = String(max_length=50)
    capacity = Integer()
    stock = Integer()


@fulfilment.command(part_of="Warehouse")
class ReplaceWarehouse:
    """Retire the active warehouse under a code and admit its successor."""

    business_unit_code = String(max_length=50)
    location = String(max_length=50)
    capacity = Integer()
    stock = Integer()


@fulfilment.command(part_of="Warehouse")
class ArchiveWarehouse:
    """Retire the active warehouse under a code."""

    business_unit_code = String(max_length=50)


def _is_blank(value):
    return value is None or not str(value).strip()


def _require_business_unit_code(business_unit_code):
    if _is_blank(business_unit_code):
        raise InvalidArgument({"business_unit_code": ["Business unit code must be provided"]})


def _resolve_location(identifier) -> Location:
    if _is_blank(identifier):
        raise InvalidArgument({"location": ["Location must be provided"]})
    location = get_location_catalog().resolve(identifier)
    if location is None:
        raise NotFound({"location": [f"Invalid location: {identifier}"]})
    return location


def _validate_capacity_and_stock(capacity, stock):
    if capacity is None or capacity <= 0:
        raise InvalidArgument({"capacity": ["Capacity must be a positive integer"]})
    if stock is None:
        raise InvalidArgument({"stock": ["Stock must be provided"]})
    if stock < 0:
        raise InvalidArgument({"stock": ["Stock cannot be negative"]})
    if stock > capacity:
        raise InvalidArgument({"stock": ["Stock cannot exceed capacity"]})


@fulfilment.command_handler(part_of=Warehouse)
class WarehouseLifecycleHandler:
    @handle(CreateWarehouse)
    def create_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        try:
            _require_business_unit_code(command.business_unit_code)
            if repo.exists_with_code(command.business_unit_code):
                raise ConstraintViolation(
                    {
                        "business_unit_code": [
                            f"Warehouse with business unit code already exists: {command.business_unit_code}"
                        ]
                    }
                )
            location = _resolve_location(command.location)
            _validate_capacity_and_stock(command.capacity, command.stock)
            ensure_location_can_host(location, repo.active_at(location.identification), command.capacity)
        except ValidationError as exc:
            logger.info(
                "Warehouse creation rejected",
                business_unit_code=command.business_unit_code,
                location=command.location,
                reason=exc.messages,
            )
            raise

        warehouse = Warehouse.create(
            business_unit_code=command.business_unit_code,
            location=location.identification,
            capacity=command.capacity,
            stock=command.stock,
        )
        repo.add(warehouse)
        logger.info(
            "Warehouse created",
            business_unit_code=warehouse.business_unit_code,
            location=warehouse.location,
            capacity=warehouse.capacity,
        )
        return warehouse

    @handle(ReplaceWarehouse)
    def replace_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        try:
            _require_business_unit_code(command.business_unit_code)
            existing = repo.find_active_by_code(command.business_unit_code)
            if existing is None:
                raise NotFound(
                    {
                        "business_unit_code": [
                            f"Warehouse not found for business unit code: {command.business_unit_code}"
                        ]
                    }
                )
            location = _resolve_location(command.location)
            _validate_capacity_and_stock(command.capacity, command.stock)

            if command.stock != existing.stock:
                raise ConstraintViolation(
                    {"stock": ["New warehouse stock must match existing warehouse stock"]}
                )
            if command.capacity < existing.stock:
                raise ConstraintViolation(
                    {
                        "capacity": [
                            "New warehouse capacity must accommodate the stock of the warehouse being replaced"
                        ]
                    }
                )

            ensure_location_can_host(
                location,
                repo.active_at(location.identification),
                command.capacity,
                replacing=existing,
            )
        except ValidationError as exc:
            logger.info(
                "Warehouse replacement rejected",
                business_unit_code=command.business_unit_code,
                location=command.location,
                reason=exc.messages,
            )
            raise

        existing.archive()
        repo.add(existing)

        successor = Warehouse.replacing(
            existing,
            location=location.identification,
            capacity=command.capacity,
            stock=command.stock,
        )
        repo.add(successor)
        logger.info(
            "Warehouse replaced",
            business_unit_code=successor.business_unit_code,
            previous_location=existing.location,
            location=successor.location,
            capacity=successor.capacity,
        )
        return successor

    @handle(ArchiveWarehouse)
    def archive_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        try:
            _require_business_unit_code(command.business_unit_code)

            records = repo.find_by_code(command.business_unit_code)
            if not records:
                raise NotFound(
                    {
                        "business_unit_code": [
                            f"Warehouse not found for business unit code: {command.business_unit_code}"
                        ]
                    }
                )
        except ValidationError as exc:
            logger.info(
                "Warehouse archive rejected",
                business_unit_code=command.business_unit_code,
                reason=exc.messages,
            )
            raise

        warehouse = next((w for w in records if not w.is_archived()), None)
        if warehouse is None:
            logger.debug("Warehouse already archived", business_unit_code=command.business_unit_code)
            return

        warehouse.archive()
        repo.add(warehouse)
        logger.info("Warehouse archived", business_unit_code=warehouse.business_unit_code)
