"""Declarative request validation for DRF views.

A ``FieldCheck`` names one request field, where to read it from (the JSON
body or the URL path) and an ordered chain of ``Rule`` objects.  Every rule
in the chain is evaluated, so a single field can contribute several errors.

``validate_request`` wraps a view action: it runs the declared checks in
order, and if any of them produced an error it answers ``400`` with
``{"errors": [...]}`` without calling the action.

Error items share one shape::

    {"type": "field", "value": "abc", "msg": "invalid ID",
     "path": "id", "location": "params"}

``value`` is left out when the field was not sent at all.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import wraps
from typing import Any, Callable, Dict, List, Sequence

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

BODY = "body"
PARAMS = "params"

MISSING = object()

_NUMERIC_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)")
_INT_RE = re.compile(r"[+-]?[0-9]+")

ErrorItem = Dict[str, Any]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def not_empty(value: Any) -> bool:
    """``False`` for missing, ``null``, blank strings and empty containers."""
    if value is MISSING or value is None:
        return False
    if isinstance(value, (list, tuple, dict)):
        return bool(value)
    return str(value).strip() != ""


def is_numeric(value: Any) -> bool:
    """Accept JSON numbers and numeric strings; booleans are not numbers."""
    if value is MISSING or value is None or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, str):
        return _NUMERIC_RE.fullmatch(value) is not None
    return False


def is_int(value: Any) -> bool:
    if value is MISSING or value is None or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return _INT_RE.fullmatch(value) is not None
    return False


def greater_than(limit: int) -> Callable[[Any], bool]:
    """Build a predicate comparing numeric values (or numeric strings) to ``limit``."""

    def predicate(value: Any) -> bool:
        if not is_numeric(value):
            return False
        try:
            return Decimal(str(value)) > limit
        except InvalidOperation:
            return False

    return predicate


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rule:
    predicate: Callable[[Any], bool]
    message: str

    def passes(self, value: Any) -> bool:
        try:
            return bool(self.predicate(value))
        except (TypeError, ValueError, ArithmeticError):
            return False


@dataclass(frozen=True)
class FieldCheck:
    """One field plus the ordered rules it must satisfy."""

    field: str
    rules: Sequence[Rule]
    location: str = BODY

    def read(self, body: Mapping, params: Mapping) -> Any:
        container = params if self.location == PARAMS else body
        return container.get(self.field, MISSING)

    def run(self, body: Mapping, params: Mapping) -> List[ErrorItem]:
        value = self.read(body, params)
        return [
            field_error(self.field, rule.message, value, self.location)
            for rule in self.rules
            if not rule.passes(value)
        ]


def field_error(
    path: str, msg: str, value: Any = MISSING, location: str = BODY
) -> ErrorItem:
    error: ErrorItem = {"type": "field"}
    if value is not MISSING:
        error["value"] = value
    error.update({"msg": msg, "path": path, "location": location})
    return error


def request_body(request: Request) -> Mapping:
    """The parsed body as a mapping; arrays and scalars count as an empty body."""
    data = request.data
    return data if isinstance(data, Mapping) else {}


def run_checks(
    checks: Sequence[FieldCheck], body: Mapping, params: Mapping
) -> List[ErrorItem]:
    errors: List[ErrorItem] = []
    for check in checks:
        errors.extend(check.run(body, params))
    return errors


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


def validation_error_response(errors: List[ErrorItem]) -> Response:
    return Response({"errors": errors}, status=status.HTTP_400_BAD_REQUEST)


def errors_from_pydantic(
    exc: PydanticValidationError, location: str = BODY
) -> List[ErrorItem]:
    """Translate a pydantic ``ValidationError`` into error items.

    Messages raised by our own ``field_validator`` functions are reported
    verbatim, without pydantic's ``"Value error, "`` prefix.
    """
    errors: List[ErrorItem] = []
    for err in exc.errors():
        ctx_error = err.get("ctx", {}).get("error")
        if err["type"] == "value_error" and ctx_error:
            msg = str(ctx_error)
        else:
            msg = err["msg"]
        path = ".".join(str(part) for part in err["loc"])
        errors.append(field_error(path, msg, err.get("input", MISSING), location))
    return errors


def validate_request(*checks: FieldCheck):
    """Run ``checks`` before a view action and short-circuit with ``400`` on failure."""

    def decorator(action):
        @wraps(action)
        def wrapper(view, request: Request, *args, **kwargs):
            errors = run_checks(checks, request_body(request), kwargs)
            if errors:
                logger.info(
                    "request_validation_failed",
                    action=action.__name__,
                    error_count=len(errors),
                    fields=sorted({e["path"] for e in errors}),
                )
                return validation_error_response(errors)
            return action(view, request, *args, **kwargs)

        return wrapper

    return decorator
