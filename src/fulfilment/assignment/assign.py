"""AssignFulfilment: link a (store, product) pair to a warehouse.

Assigning an existing triple again returns the stored assignment. New triples
must respect the per (store, product), per store and per warehouse fan-out
limits, evaluated in that order against the assignments already stored.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from fulfilment.assignment.assignment import FulfilmentAssignment
from fulfilment.assignment.rules import (
    check_store_limit,
    check_store_product_limit,
    check_warehouse_limit,
)
from fulfilment.domain import fulfilment
from fulfilment.exceptions import InvalidArgument, NotFound
from fulfilment.utils.logging import get_logger
from fulfilment.warehouse.warehouse import Warehouse

logger = get_logger(__name__)


@fulfilment.command(part_of="FulfilmentAssignment")
class AssignFulfilment:
    store_id = Identifier()
    product_id = Identifier()
    warehouse_code = String(max_length=50)


@fulfilment.command_handler(part_of=FulfilmentAssignment)
class AssignFulfilmentHandler:
    @handle(AssignFulfilment)
    def assign(self, command):
        store_id, product_id, warehouse_code = command.store_id, command.product_id, command.warehouse_code
        if any(value is None or not str(value).strip() for value in (store_id, product_id, warehouse_code)):
            raise InvalidArgument({"assignment": ["Store, Product and Warehouse must be provided"]})

        store_id, product_id = str(store_id), str(product_id)
        repo = current_domain.repository_for(FulfilmentAssignment)
        existing = repo.find_exact(store_id, product_id, warehouse_code)
        if existing is not None:
            return existing

        if current_domain.repository_for(Warehouse).find_active_by_code(warehouse_code) is None:
            raise NotFound({"warehouse_code": [f"Warehouse not found for business unit code: {warehouse_code}"]})

        try:
            check_store_product_limit(repo.for_store_and_product(store_id, product_id), warehouse_code)
            check_store_limit(repo.for_store(store_id), warehouse_code)
            check_warehouse_limit(repo.for_warehouse(warehouse_code), product_id)
        except ValidationError as exc:
            logger.info(
                "Fulfilment assignment rejected",
                store_id=store_id,
                product_id=product_id,
                warehouse_code=warehouse_code,
                reason=exc.messages,
            )
            raise

        assignment = FulfilmentAssignment.assign(store_id, product_id, warehouse_code)
        repo.add(assignment)
        logger.info(
            "Fulfilment assigned",
            store_id=store_id,
            product_id=product_id,
            warehouse_code=warehouse_code,
        )
        return assignment
