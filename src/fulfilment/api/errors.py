"""HTTP mapping for the fulfilment rejection kinds.

Protean's handlers map every ValidationError to 400; the more specific kinds
get their own status codes on top.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from fulfilment.exceptions import ConstraintViolation, NotFound


def register_fulfilment_exception_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": exc.messages})

    @app.exception_handler(ConstraintViolation)
    async def constraint_violation_handler(request: Request, exc: ConstraintViolation) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": exc.messages})
