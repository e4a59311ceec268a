"""Unit tests for the declarative request validation helpers.

Covers:
- Predicates: not_empty, is_numeric, is_int, greater_than.
- FieldCheck: every rule runs, error shape, body/params lookup.
- errors_from_pydantic: message and path translation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import BaseModel, ValidationError, field_validator

from modules.core.validation import (
    BODY,
    MISSING,
    PARAMS,
    FieldCheck,
    Rule,
    errors_from_pydantic,
    greater_than,
    is_int,
    is_numeric,
    not_empty,
    run_checks,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# Predicates
# ===========================================================================


class TestNotEmpty:
    @pytest.mark.parametrize("value", [MISSING, None, "", "   ", [], {}])
    def test_empty_values(self, value):
        assert not_empty(value) is False

    @pytest.mark.parametrize("value", ["x", 0, False, True, 12.5, [1]])
    def test_present_values(self, value):
        assert not_empty(value) is True


class TestIsNumeric:
    @pytest.mark.parametrize(
        "value", [0, 100, -3, 1.5, "100", "-2.5", ".5", "+7", Decimal("9.99")]
    )
    def test_numeric(self, value):
        assert is_numeric(value) is True

    @pytest.mark.parametrize(
        "value",
        [MISSING, None, "", "abc", "1e5x", " 5", True, False, float("nan"), [1]],
    )
    def test_not_numeric(self, value):
        assert is_numeric(value) is False


class TestIsInt:
    @pytest.mark.parametrize("value", ["1", "2000", "-4", "+9", 7])
    def test_integers(self, value):
        assert is_int(value) is True

    @pytest.mark.parametrize("value", ["testing", "1.5", "", "1a", True, MISSING])
    def test_not_integers(self, value):
        assert is_int(value) is False


class TestGreaterThan:
    def test_compares_numbers_and_numeric_strings(self):
        positive = greater_than(0)
        assert positive(1) is True
        assert positive("0.01") is True
        assert positive(0) is False
        assert positive("-1") is False

    def test_non_numeric_fails(self):
        positive = greater_than(0)
        assert positive("Hola") is False
        assert positive(MISSING) is False
        assert positive(True) is False


# ===========================================================================
# FieldCheck
# ===========================================================================


class TestFieldCheck:
    def test_every_rule_is_evaluated(self):
        check = FieldCheck(
            "price",
            rules=[Rule(is_numeric, "not numeric"), Rule(not_empty, "empty")],
        )
        errors = check.run({}, {})
        assert [e["msg"] for e in errors] == ["not numeric", "empty"]

    def test_error_shape_includes_value_when_sent(self):
        check = FieldCheck("id", location=PARAMS, rules=[Rule(is_int, "invalid ID")])
        errors = check.run({}, {"id": "abc"})
        assert errors == [
            {
                "type": "field",
                "value": "abc",
                "msg": "invalid ID",
                "path": "id",
                "location": "params",
            }
        ]

    def test_error_shape_omits_missing_value(self):
        check = FieldCheck("name", rules=[Rule(not_empty, "required")])
        (error,) = check.run({}, {})
        assert "value" not in error
        assert error["location"] == BODY

    def test_reads_from_the_declared_location(self):
        check = FieldCheck("id", location=PARAMS, rules=[Rule(is_int, "invalid ID")])
        assert check.run({"id": "abc"}, {"id": "5"}) == []

    def test_predicate_exceptions_count_as_failures(self):
        def explode(value):
            raise TypeError("boom")

        check = FieldCheck("name", rules=[Rule(explode, "broken")])
        assert [e["msg"] for e in check.run({"name": "x"}, {})] == ["broken"]

    def test_run_checks_preserves_declaration_order(self):
        checks = [
            FieldCheck("b", rules=[Rule(not_empty, "b empty")]),
            FieldCheck("a", rules=[Rule(not_empty, "a empty")]),
        ]
        assert [e["path"] for e in run_checks(checks, {}, {})] == ["b", "a"]


# ===========================================================================
# errors_from_pydantic
# ===========================================================================


class _Sample(BaseModel):
    amount: Decimal
    flag: bool

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("amount must be positive")
        return v


class TestErrorsFromPydantic:
    def test_custom_messages_lose_pydantic_prefix(self):
        with pytest.raises(ValidationError) as excinfo:
            _Sample(amount=Decimal("-1"), flag=True)

        errors = errors_from_pydantic(excinfo.value)
        assert errors[0]["msg"] == "amount must be positive"
        assert errors[0]["path"] == "amount"
        assert errors[0]["location"] == BODY

    def test_type_errors_keep_pydantic_message(self):
        with pytest.raises(ValidationError) as excinfo:
            _Sample(amount=Decimal("1"), flag="maybe")

        (error,) = errors_from_pydantic(excinfo.value)
        assert error["path"] == "flag"
        assert error["value"] == "maybe"
        assert error["msg"]
