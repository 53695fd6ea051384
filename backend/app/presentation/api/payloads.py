"""Decoding of JSON and multipart request bodies into an ``IncomingPayload``."""

from fastapi import Request
from starlette.datastructures import UploadFile

from app.application.schemas.payload import IncomingPayload, UploadedAsset
from app.domain.exceptions import ValidationError

_FORM_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def read_payload(request: Request) -> IncomingPayload:
    """FastAPI dependency: the request body as ``fields`` + ``uploads``.

    Form fields repeated under one key (``gallery``, ``features``) become
    lists. File inputs submitted without a file are ignored.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        return await _read_form(request)

    try:
        body = await request.json()
    except ValueError as exc:
        raise ValidationError.single("body", "must be a JSON object") from exc
    if not isinstance(body, dict):
        raise ValidationError.single("body", "must be a JSON object")
    return IncomingPayload(fields=body)


async def _read_form(request: Request) -> IncomingPayload:
    payload = IncomingPayload()
    form = await request.form()
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if not value.filename:
                continue
            payload.uploads[key] = UploadedAsset(
                content=await value.read(),
                filename=value.filename,
                content_type=value.content_type or "application/octet-stream",
            )
        elif key in payload.fields:
            existing = payload.fields[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                payload.fields[key] = [existing, value]
        else:
            payload.fields[key] = value
    return payload
