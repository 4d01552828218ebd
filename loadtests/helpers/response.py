"""Response error extraction for load test observability.

Parses Fulfilment API error responses into human-readable messages.
Handles two response shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Domain rejections (400/404/409): {"error": {"field": ["reason", ...]}} or {"error": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON, return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if "detail" in body and isinstance(body["detail"], list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(
                f"{field}: {'; '.join(reasons) if isinstance(reasons, list) else reasons}"
                for field, reasons in error.items()
            )
        return str(error)

    return str(body)[:300]


def is_rejection(response: Response) -> bool:
    """True for a business rejection the engine is expected to produce under load."""
    return response.status_code == 409
