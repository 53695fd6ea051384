"""Schema-driven validation returning plain dicts or raising the domain ValidationError."""

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.domain.exceptions import FieldViolation, ValidationError


def _violations(exc: PydanticValidationError) -> list[FieldViolation]:
    violations = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        message = error["msg"].removeprefix("Value error, ")
        violations.append(FieldViolation(field=field, message=message))
    return violations


def validate_record(schema: type[BaseModel], payload: dict[str, Any]) -> dict[str, Any]:
    """Validate a full record and return its normalised snake_case fields."""
    try:
        model = schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(_violations(exc)) from exc
    return model.model_dump()


def validate_changes(schema: type[BaseModel], payload: dict[str, Any]) -> dict[str, Any]:
    """Validate a partial payload; only fields the client sent with a value survive.

    ``None`` means "leave unchanged" so that multipart forms and JSON bodies
    behave the same way for fields the client did not touch.
    """
    try:
        model = schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(_violations(exc)) from exc
    return {
        name: value
        for name, value in model.model_dump(exclude_unset=True).items()
        if value is not None
    }
