# =============================================================================
# core/validation.py - Ordered Validation Chains
# =============================================================================
# Business-rule validation that runs before any handler touches the database.
#
# Request bodies are first parsed field by field against their pydantic model
# (parse_fields). The chain then runs its rules over whatever parsed, and the
# parse errors and rule failures are reported together.
#
# A chain is an ordered list of rules. Each rule checks one field against a
# scratch state object and may attach the entity it resolved (the task being
# edited, the user matching an email) so later rules and the handler can use
# it. Every failure is collected; the chain raises once at the end.
#
# Usage:
#   values, errors = parse_fields(TaskUpdateRequest, body)
#   chain = ValidationChain(
#       Rule("id", task_exists, "Task not found"),
#       Rule("parent_id", task_owned, "Task does not belong to the user", requires=("id",)),
#   )
#   await chain.run(state, errors)
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Annotated, Any, Awaitable, Callable, Sequence

from pydantic import BaseModel, TypeAdapter, ValidationError

from app.exceptions import FieldError, RequestValidationFailed, field_errors

logger = logging.getLogger(__name__)

Check = Callable[[Any], Awaitable[bool]]


def parse_fields(model: type[BaseModel], data: Any) -> tuple[dict[str, Any], list[FieldError]]:
    """
    Validate request data against a model, keeping every field that parsed.

    Args:
        model: Request model declaring types and constraints
        data: Raw JSON object or form fields (anything but a dict counts as empty)

    Returns:
        (values, errors): parsed values by field name, and one FieldError per
        failing field. Optional fields that were omitted get their default.
    """
    if not isinstance(data, dict):
        data = {}

    try:
        return dict(model.model_validate(data)), []
    except ValidationError as e:
        errors = field_errors(e.errors())

    failed = {error.field.split(".")[0] for error in errors}
    values: dict[str, Any] = {}

    # Remaining fields passed inside the model; convert them on their own
    for name, info in model.model_fields.items():
        if name in failed:
            continue
        if name not in data:
            values[name] = info.get_default(call_default_factory=True)
            continue
        annotation = Annotated[(info.annotation, *info.metadata)] if info.metadata else info.annotation
        values[name] = TypeAdapter(annotation).validate_python(data[name])

    return values, errors


@dataclass(frozen=True)
class Rule:
    """
    One validation step.

    Attributes:
        field: Name reported to the client when the rule fails
        check: Async callable receiving the chain state, returns True when valid
        message: Error message for the field
        requires: Fields that must have passed before this rule runs
    """
    field: str
    check: Check
    message: str
    requires: tuple[str, ...] = ()


class ValidationChain:
    """Runs rules sequentially and aggregates failures per field."""

    def __init__(self, *rules: Rule):
        self.rules = list(rules)

    @property
    def fields(self) -> list[str]:
        return [rule.field for rule in self.rules]

    async def run(self, state: Any, errors: Sequence[FieldError] = ()) -> None:
        """
        Execute every rule in declared order.

        Rules whose requirements failed are skipped; the skipped field is
        treated as failed so anything depending on it is skipped too.

        Args:
            state: Scratch object passed to every check
            errors: Failures found before the chain (unparseable fields).
                Rules on those fields, and rules requiring them, are skipped;
                the errors are reported first.

        Raises:
            RequestValidationFailed: If a rule failed or errors were passed in
        """
        unparsed = {error.field.split(".")[0] for error in errors}
        failed: set[str] = set(unparsed)
        collected: list[FieldError] = list(errors)

        for rule in self.rules:
            if rule.field in unparsed or any(name in failed for name in rule.requires):
                failed.add(rule.field)
                continue

            if not await rule.check(state):
                failed.add(rule.field)
                collected.append(FieldError(field=rule.field, message=rule.message))

        if collected:
            logger.debug(f"Validation failed for fields: {[e.field for e in collected]}")
            raise RequestValidationFailed(collected)
