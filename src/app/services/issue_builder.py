"""Create validation and update-set computation for issues."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from pydantic import ValidationError

from src.app.core.exceptions import (
    EmptyUpdateSet,
    MissingIdentifier,
    MissingRequiredField,
    RecordNotFound,
)
from src.app.core.logging import get_logger
from src.app.models import Issue
from src.app.models.base import utc_now
from src.app.schemas import REQUIRED_FIELDS, IssueCreate, IssueUpdate

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateSet:
    """Identifier plus the column values an update will write."""

    issue_id: str
    changes: dict[str, Any]


def build_new_issue(project: str, payload: Mapping[str, Any]) -> Issue:
    """Validate a create payload and return an unsaved issue with defaults applied.

    Null optional fields take their defaults. An optional value that cannot
    be stored as text is dropped in favour of its default as well.

    Raises:
        MissingRequiredField: If issue_title, issue_text or created_by is absent or empty
    """
    if not project or any(not payload.get(field) for field in REQUIRED_FIELDS):
        raise MissingRequiredField()

    sent = {key: value for key, value in payload.items() if value is not None}
    try:
        data = IssueCreate.model_validate(sent)
    except ValidationError as e:
        invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
        if invalid.intersection(REQUIRED_FIELDS):
            raise MissingRequiredField() from e
        logger.debug("Dropping invalid optional fields", fields=sorted(map(str, invalid)))
        data = IssueCreate.model_validate(
            {key: value for key, value in sent.items() if key not in invalid}
        )

    now = utc_now()
    return Issue(
        project=project,
        issue_title=data.issue_title,
        issue_text=data.issue_text,
        created_by=data.created_by,
        assigned_to=data.assigned_to,
        status_text=data.status_text,
        open=True,
        created_on=now,
        updated_on=now,
    )


def get_identifier(payload: Mapping[str, Any]) -> str:
    """Return the _id sent by the client.

    Raises:
        MissingIdentifier: If _id is absent or falsy (empty, null, 0, false)
    """
    issue_id = payload.get("_id")
    if not issue_id:
        raise MissingIdentifier()
    return str(issue_id)


def parse_identifier(issue_id: str, action: str) -> UUID:
    """Parse a client identifier; malformed ones read as not found."""
    try:
        return UUID(issue_id)
    except ValueError as e:
        raise RecordNotFound(issue_id, action) from e


def build_update_set(payload: Mapping[str, Any]) -> UpdateSet:
    """Compute the fields an update writes.

    Empty-string values mean "leave unchanged", not "clear". Keys outside the
    updatable fields count as sent but are never written.

    Raises:
        MissingIdentifier: If _id is absent or empty
        EmptyUpdateSet: If nothing but _id and empty strings was sent
        RecordNotFound: If a value cannot be stored in its field
    """
    issue_id = get_identifier(payload)

    sent = {key: value for key, value in payload.items() if key != "_id" and value != ""}
    if not sent:
        raise EmptyUpdateSet(issue_id)

    try:
        update = IssueUpdate.model_validate(sent)
    except ValidationError as e:
        raise RecordNotFound(issue_id, "update") from e

    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    changes["updated_on"] = utc_now()
    return UpdateSet(issue_id=issue_id, changes=changes)
