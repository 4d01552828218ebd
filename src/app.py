"""Fulfilment FastAPI application.

Web server that processes warehouse and assignment commands synchronously via
HTTP. Each request is wrapped in the fulfilment domain context based on URL
prefix.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fulfilment.domain import fulfilment
from fulfilment.utils.logging import add_context, clear_context, get_logger

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - unset/"test" → in-memory providers, sync processing
#   - "production" → PostgreSQL via DATABASE_URL
fulfilment.init()

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/warehouses": fulfilment,
    "/assignments": fulfilment,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Fulfilment API",
    description="Warehouse lifecycle and fulfilment assignment",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the fulfilment domain context and a request id for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        add_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        response.headers["X-Request-ID"] = request_id
        return response
    # No domain match, pass through (health check, docs, etc.)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from fulfilment.api import (  # noqa: E402
    assignment_router,
    register_fulfilment_exception_handlers,
    warehouse_router,
)

register_fulfilment_exception_handlers(app)
app.include_router(warehouse_router)
app.include_router(assignment_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "fulfilment": {"name": fulfilment.name},
            },
        }
    )
