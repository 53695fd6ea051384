"""Shared Pydantic building blocks — camelCase wire format, field types, envelope."""

import re
from typing import Annotated, Any, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email

from app.domain.slug import slugify

DataT = TypeVar("DataT")

_HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$")


class CamelModel(BaseModel):
    """Base DTO: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ── Field normalisers ───────────────────────────────────────────────

def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _strip_or_empty(value: Any) -> Any:
    if value is None:
        return ""
    return _strip(value)


def _require_text(value: str) -> str:
    if not value:
        raise ValueError("is required and cannot be empty")
    return value


def _hex_color(value: str) -> str:
    value = value.upper()
    if not _HEX_COLOR.match(value):
        raise ValueError("must be a hex colour like #2563EB")
    return value


def _optional_email(value: str) -> str:
    if not value:
        return value
    _, normalized = validate_email(value)
    return normalized


def _string_list(value: Any) -> Any:
    """Accept a single string (one multipart value) as a one-item list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, list):
        return [item.strip() if isinstance(item, str) else item for item in value]
    return value


RequiredText = Annotated[str, BeforeValidator(_strip), AfterValidator(_require_text)]
OptionalText = Annotated[str, BeforeValidator(_strip_or_empty)]
HexColor = Annotated[str, BeforeValidator(_strip), AfterValidator(_hex_color)]
OptionalEmail = Annotated[str, BeforeValidator(_strip_or_empty), AfterValidator(_optional_email)]
TextList = Annotated[list[str], BeforeValidator(_string_list)]
SlugKey = Annotated[
    str, BeforeValidator(_strip), AfterValidator(slugify), AfterValidator(_require_text)
]


# ── Envelope ────────────────────────────────────────────────────────

class PaginationMeta(CamelModel):
    page: int
    limit: int | None
    total: int
    pages: int


class ApiResponse(CamelModel, Generic[DataT]):
    """Uniform response wrapper: ``{success, data?, message, error?}``."""

    success: bool = True
    data: DataT | None = None
    message: str
    error: str | None = None
    pagination: PaginationMeta | None = None


class DeleteResult(CamelModel):
    """Payload of a successful delete — asset cleanup problems surface as warnings."""

    id: str
    warnings: list[str] = []
