"""Issue schemas for API request/response."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

# Fields a client may filter on, keyed by their wire name
FILTER_FIELDS: dict[str, TypeAdapter[Any]] = {
    "_id": TypeAdapter(UUID),
    "project": TypeAdapter(str),
    "issue_title": TypeAdapter(str),
    "issue_text": TypeAdapter(str),
    "created_by": TypeAdapter(str),
    "assigned_to": TypeAdapter(str),
    "status_text": TypeAdapter(str),
    "open": TypeAdapter(bool),
    "created_on": TypeAdapter(datetime),
    "updated_on": TypeAdapter(datetime),
}

REQUIRED_FIELDS = ("issue_title", "issue_text", "created_by")


class IssueCreate(BaseModel):
    """Schema for creating an issue. Presence is checked before this runs."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    issue_title: str = Field(min_length=1)
    issue_text: str = Field(min_length=1)
    created_by: str = Field(min_length=1)
    assigned_to: str = ""
    status_text: str = ""


class IssueUpdate(BaseModel):
    """User-updatable fields. Anything else sent with an update is dropped."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    issue_title: str | None = None
    issue_text: str | None = None
    created_by: str | None = None
    assigned_to: str | None = None
    status_text: str | None = None
    open: bool | None = None


class IssueRead(BaseModel):
    """Schema for reading an issue."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID = Field(alias="_id")
    project: str
    issue_title: str
    issue_text: str
    created_by: str
    assigned_to: str
    status_text: str
    open: bool
    created_on: datetime
    updated_on: datetime


class IssueActionResult(BaseModel):
    """Body returned after a successful update or delete."""

    model_config = ConfigDict(populate_by_name=True)

    result: str
    issue_id: str = Field(alias="_id")


def parse_filters(params: Mapping[str, str]) -> dict[str, Any] | None:
    """Coerce query parameters to typed equality filters keyed by column name.

    Returns None when the filters cannot match anything: an undeclared field
    or a value that does not fit the field's type.
    """
    filters: dict[str, Any] = {}
    for key, raw in params.items():
        adapter = FILTER_FIELDS.get(key)
        if adapter is None:
            return None
        try:
            value = adapter.validate_python(raw)
        except ValidationError:
            return None
        filters["id" if key == "_id" else key] = value
    return filters
