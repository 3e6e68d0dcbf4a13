# =============================================================================
# tests/test_validation.py - Validation Chain Tests
# =============================================================================
# Unit tests for core.validation:
# - Rules run in declared order
# - Failures are aggregated per field
# - Dependent rules are skipped when their requirement failed
# - Field-by-field parsing reported together with rule failures
# =============================================================================

import asyncio
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

import pytest
from pydantic import BaseModel, Field

from app.exceptions import FieldError, RequestValidationFailed, field_errors
from core.models import SignUpRequest
from core.validation import Rule, ValidationChain, parse_fields


@dataclass
class State:
    calls: list[str] = field(default_factory=list)
    resolved: str | None = None


def passing(name):
    async def check(state):
        state.calls.append(name)
        return True
    return check


def failing(name):
    async def check(state):
        state.calls.append(name)
        return False
    return check


def run(chain, state):
    return asyncio.run(chain.run(state))


def run_with(chain, state, errors):
    return asyncio.run(chain.run(state, errors))


class TestValidationChain:
    """Tests for ValidationChain.run."""

    def test_all_rules_pass(self):
        """No exception when every rule passes, and all of them ran in order."""
        state = State()
        chain = ValidationChain(
            Rule("a", passing("a"), "a failed"),
            Rule("b", passing("b"), "b failed"),
            Rule("c", passing("c"), "c failed"),
        )

        run(chain, state)

        assert state.calls == ["a", "b", "c"]

    def test_failures_are_aggregated(self):
        """Independent failing rules are all reported in one exception."""
        state = State()
        chain = ValidationChain(
            Rule("a", failing("a"), "a failed"),
            Rule("b", passing("b"), "b failed"),
            Rule("c", failing("c"), "c failed"),
        )

        with pytest.raises(RequestValidationFailed) as exc_info:
            run(chain, state)

        assert [e.field for e in exc_info.value.errors] == ["a", "c"]
        assert [e.message for e in exc_info.value.errors] == ["a failed", "c failed"]
        assert state.calls == ["a", "b", "c"]

    def test_dependent_rule_skipped_after_failure(self):
        """A rule requiring a failed field doesn't run and isn't reported."""
        state = State()
        chain = ValidationChain(
            Rule("id", failing("id"), "not found"),
            Rule("owner", passing("owner"), "not yours", requires=("id",)),
        )

        with pytest.raises(RequestValidationFailed) as exc_info:
            run(chain, state)

        assert state.calls == ["id"]
        assert [e.field for e in exc_info.value.errors] == ["id"]

    def test_skip_propagates_transitively(self):
        """Skipped fields count as failed for rules further down the chain."""
        state = State()
        chain = ValidationChain(
            Rule("a", failing("a"), "a failed"),
            Rule("b", passing("b"), "b failed", requires=("a",)),
            Rule("c", passing("c"), "c failed", requires=("b",)),
            Rule("d", passing("d"), "d failed"),
        )

        with pytest.raises(RequestValidationFailed):
            run(chain, state)

        assert state.calls == ["a", "d"]

    def test_rules_can_enrich_state(self):
        """A later rule sees what an earlier rule attached to the state."""
        async def resolve(state):
            state.resolved = "task-1"
            return True

        async def uses_resolved(state):
            return state.resolved == "task-1"

        state = State()
        chain = ValidationChain(
            Rule("id", resolve, "not found"),
            Rule("owner", uses_resolved, "not yours", requires=("id",)),
        )

        run(chain, state)

        assert state.resolved == "task-1"

    def test_same_field_rules_stop_at_first_failure(self):
        """Several rules on one field: later ones requiring it are skipped."""
        state = State()
        chain = ValidationChain(
            Rule("photo", passing("present"), "required"),
            Rule("photo", failing("type"), "bad type", requires=("photo",)),
            Rule("photo", passing("size"), "too big", requires=("photo",)),
        )

        with pytest.raises(RequestValidationFailed) as exc_info:
            run(chain, state)

        assert state.calls == ["present", "type"]
        assert [e.message for e in exc_info.value.errors] == ["bad type"]

    def test_fields_property(self):
        chain = ValidationChain(
            Rule("id", passing("id"), "x"),
            Rule("parent_id", passing("parent_id"), "y", requires=("id",)),
        )
        assert chain.fields == ["id", "parent_id"]

    def test_earlier_errors_reported_with_rule_failures(self):
        """Parse errors come first; rules on other fields still run."""
        state = State()
        chain = ValidationChain(
            Rule("id", failing("id"), "Task not found"),
            Rule("parent_id", passing("parent_id"), "not yours", requires=("id",)),
            Rule("description", passing("description"), "duplicate"),
        )
        parsed = [FieldError("description", "String should have at least 4 characters")]

        with pytest.raises(RequestValidationFailed) as exc_info:
            run_with(chain, state, parsed)

        assert [e.field for e in exc_info.value.errors] == ["description", "id"]
        assert state.calls == ["id"]

    def test_rules_on_unparsed_fields_are_skipped(self):
        """A field that didn't parse blocks its own rules and their dependents."""
        state = State()
        chain = ValidationChain(
            Rule("id", passing("id"), "not found"),
            Rule("parent_id", passing("parent_id"), "not yours", requires=("id",)),
            Rule("photo", passing("photo"), "required"),
        )

        with pytest.raises(RequestValidationFailed) as exc_info:
            run_with(chain, state, [FieldError("id", "Input should be a valid UUID")])

        assert state.calls == ["photo"]
        assert [e.field for e in exc_info.value.errors] == ["id"]


class TestRequestValidationFailed:
    """Tests for the exception's wire format."""

    def test_to_dict_lists_errors(self):
        exc = RequestValidationFailed([FieldError("email", "Email already registered")])

        assert exc.status_code == 422
        assert exc.to_dict() == {
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": [{"field": "email", "message": "Email already registered"}],
        }


# =============================================================================
# Field Parsing
# =============================================================================

class Sample(BaseModel):
    id: UUID
    description: str = Field(..., min_length=4)
    due: date | None = None


class TestParseFields:
    """Tests for parse_fields."""

    def test_valid_data(self):
        values, errors = parse_fields(
            Sample,
            {"id": "61b016a6-8081-4a00-9379-f1e4c0000000", "description": "Wash dishes"},
        )

        assert errors == []
        assert values == {
            "id": UUID("61b016a6-8081-4a00-9379-f1e4c0000000"),
            "description": "Wash dishes",
            "due": None,
        }

    def test_valid_fields_kept_when_others_fail(self):
        values, errors = parse_fields(
            Sample,
            {"id": "61b016a6-8081-4a00-9379-f1e4c0000000", "description": "ab", "due": "2024-05-01"},
        )

        assert [e.field for e in errors] == ["description"]
        assert values == {
            "id": UUID("61b016a6-8081-4a00-9379-f1e4c0000000"),
            "due": date(2024, 5, 1),
        }

    def test_missing_required_fields(self):
        values, errors = parse_fields(Sample, {})

        assert sorted(e.field for e in errors) == ["description", "id"]
        assert all(e.message == "Field required" for e in errors)
        assert values == {"due": None}

    def test_non_object_counts_as_empty(self):
        _, errors = parse_fields(Sample, None)

        assert sorted(e.field for e in errors) == ["description", "id"]

    def test_annotated_validators_apply_to_kept_fields(self):
        """The email of a sign-up with a weak password is still lower-cased."""
        values, errors = parse_fields(SignUpRequest, {"email": "Parent@Example.com", "password": "weak"})

        assert [e.field for e in errors] == ["password"]
        assert values["email"] == "parent@example.com"


class TestFieldErrors:
    """Tests for flattening pydantic error locations."""

    def test_request_part_prefix_dropped(self):
        errors = field_errors([
            {"loc": ("body", "email"), "msg": "value is not a valid email address"},
            {"loc": ("path", "task_id"), "msg": "Input should be a valid UUID"},
            {"loc": ("body",), "msg": "Field required"},
            {"loc": ("items", 0, "name"), "msg": "Field required"},
        ])

        assert [e.field for e in errors] == ["email", "task_id", "body", "items.0.name"]
        assert errors[0].message == "value is not a valid email address"
