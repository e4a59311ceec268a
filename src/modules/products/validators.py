"""Validation pipeline declarations for the Product routes.

Each route composes these checks, in order, through
``modules.core.validation.validate_request``:

=========================  =========================
Route                      Checks
=========================  =========================
GET /api/products/{id}     ``PRODUCT_ID``
POST /api/products         ``PRODUCT_BODY``
PUT /api/products/{id}     ``PRODUCT_ID``, ``PRODUCT_BODY``, ``AVAILABILITY``
PATCH /api/products/{id}   ``PRODUCT_ID``
DELETE /api/products/{id}  ``PRODUCT_ID``
=========================  =========================

The id check comes first so an invalid id is reported even when the body
is also invalid.
"""

from __future__ import annotations

from modules.core.validation import (
    PARAMS,
    FieldCheck,
    Rule,
    greater_than,
    is_int,
    is_numeric,
    not_empty,
)
from modules.products.constants import (
    AVAILABILITY_EMPTY,
    ID_INVALID,
    NAME_EMPTY,
    PRICE_EMPTY,
    PRICE_INVALID,
    PRICE_NOT_NUMERIC,
)

PRODUCT_ID = FieldCheck(
    "id",
    location=PARAMS,
    rules=[Rule(is_int, ID_INVALID)],
)

PRODUCT_BODY = (
    FieldCheck("name", rules=[Rule(not_empty, NAME_EMPTY)]),
    FieldCheck(
        "price",
        rules=[
            Rule(is_numeric, PRICE_NOT_NUMERIC),
            Rule(not_empty, PRICE_EMPTY),
            Rule(greater_than(0), PRICE_INVALID),
        ],
    ),
)

AVAILABILITY = FieldCheck("availability", rules=[Rule(not_empty, AVAILABILITY_EMPTY)])
