"""Request body parsing shared by the write endpoints."""

from typing import Annotated, Any

from fastapi import Depends, Request

from src.app.core.logging import get_logger

logger = get_logger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_payload(request: Request) -> dict[str, Any]:
    """Read the body as a flat mapping, from either JSON or a submitted form.

    An unreadable or non-object body is treated as empty, so the caller
    reports the missing fields instead of a transport error.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.multi_items() if isinstance(value, str)}

    body = await request.body()
    if not body:
        return {}
    try:
        data = await request.json()
    except ValueError:
        logger.debug("Ignoring unparseable request body", content_type=content_type)
        return {}
    return data if isinstance(data, dict) else {}


Payload = Annotated[dict[str, Any], Depends(get_payload)]
