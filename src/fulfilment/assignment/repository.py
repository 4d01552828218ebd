"""Repository for the FulfilmentAssignment aggregate."""

from fulfilment.assignment.assignment import FulfilmentAssignment, assignment_key
from fulfilment.domain import fulfilment


@fulfilment.repository(part_of=FulfilmentAssignment)
class FulfilmentAssignmentRepository:
    def find_exact(self, store_id, product_id, warehouse_code) -> FulfilmentAssignment | None:
        """The assignment for exactly this triple, if one exists."""
        return (
            self._dao.query.filter(assignment_key=assignment_key(store_id, product_id, warehouse_code))
            .all()
            .first
        )

    def for_store_and_product(self, store_id, product_id) -> list[FulfilmentAssignment]:
        return self._dao.query.filter(store_id=str(store_id), product_id=str(product_id)).all().items

    def for_store(self, store_id) -> list[FulfilmentAssignment]:
        return self._dao.query.filter(store_id=str(store_id)).all().items

    def for_warehouse(self, warehouse_code) -> list[FulfilmentAssignment]:
        return self._dao.query.filter(warehouse_code=warehouse_code).all().items

    def search(self, store_id=None, product_id=None, warehouse_code=None) -> list[FulfilmentAssignment]:
        """Assignments matching every given criterion, oldest first."""
        criteria = {
            key: str(value)
            for key, value in {
                "store_id": store_id,
                "product_id": product_id,
                "warehouse_code": warehouse_code,
            }.items()
            if value is not None
        }
        return self._dao.query.filter(**criteria).order_by("assigned_at").all().items
