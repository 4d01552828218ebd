"""Fulfilment bounded context: Warehouse Lifecycle and Fulfilment Assignment.

Decides which warehouses a location may host (count and capacity ceilings),
how a warehouse is archived or replaced under its business unit code, and
which warehouses may fulfil a product for a store (fan-out limits). Uses CQRS
aggregates; every decision re-reads current state through the repositories.
"""

from protean.domain import Domain

from fulfilment.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

fulfilment = Domain(name="fulfilment")
