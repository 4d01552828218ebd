"""Repository for the Warehouse aggregate.

Archived records are kept, so queries over the live network filter on
``archived_at`` in the store.
"""

from fulfilment.domain import fulfilment
from fulfilment.warehouse.warehouse import Warehouse


@fulfilment.repository(part_of=Warehouse)
class WarehouseRepository:
    def active(self) -> list[Warehouse]:
        """All active warehouses, oldest first."""
        return self._dao.query.filter(archived_at__isnull=True).order_by("created_at").all().items

    def active_at(self, location: str) -> list[Warehouse]:
        """Active warehouses at ``location``."""
        return self._dao.query.filter(location=location, archived_at__isnull=True).all().items

    def find_by_code(self, business_unit_code: str) -> list[Warehouse]:
        """Every record that ever held ``business_unit_code``, newest first."""
        return (
            self._dao.query.filter(business_unit_code=business_unit_code)
            .order_by("-created_at")
            .all()
            .items
        )

    def find_active_by_code(self, business_unit_code: str) -> Warehouse | None:
        """The active warehouse holding ``business_unit_code``, if any."""
        return (
            self._dao.query.filter(business_unit_code=business_unit_code, archived_at__isnull=True)
            .all()
            .first
        )

    def exists_with_code(self, business_unit_code: str) -> bool:
        """True when any record, active or archived, holds ``business_unit_code``."""
        return self._dao.query.filter(business_unit_code=business_unit_code).count() > 0
