from fulfilment.api.errors import register_fulfilment_exception_handlers
from fulfilment.api.routes import assignment_router, warehouse_router

__all__ = ["assignment_router", "warehouse_router", "register_fulfilment_exception_handlers"]
