"""DRF exception handler.

Reshapes framework errors into the API's two error bodies:

- ``400`` responses become ``{"errors": [{"msg": ...}, ...]}``, the same
  list shape the validation pipeline returns.
- every other handled status becomes ``{"error": "..."}``.

Database failures that escape a view (lost connection, constraint
violations the validators did not anticipate) are logged with their
traceback and reported as ``503 {"error": "service unavailable"}``
instead of falling through to Django's HTML 500 page.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)


def _flatten(data: Any, path: Optional[str] = None) -> List[Dict[str, Any]]:
    if isinstance(data, dict):
        items: List[Dict[str, Any]] = []
        for key, value in data.items():
            items.extend(_flatten(value, key if path is None else f"{path}.{key}"))
        return items
    if isinstance(data, list):
        return [item for value in data for item in _flatten(value, path)]
    error: Dict[str, Any] = {"type": "request", "msg": str(data)}
    if path is not None:
        error.update({"type": "field", "path": path, "location": "body"})
    return [error]


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if response is not None:
        data = response.data
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            if isinstance(data, dict) and "detail" in data:
                data = data["detail"]
            response.data = {"errors": _flatten(data)}
        else:
            detail = data.get("detail", data) if isinstance(data, dict) else data
            response.data = {"error": str(detail)}
        logger.info(
            "api_exception",
            view=view_name,
            exception=type(exc).__name__,
            status_code=response.status_code,
        )
        return response

    if isinstance(exc, DatabaseError):
        set_rollback()
        logger.error(
            "unhandled_database_error",
            view=view_name,
            exception=type(exc).__name__,
            exc_info=exc,
        )
        return Response(
            {"error": "service unavailable"},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return None
