"""Issue service - one store call per operation."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.exceptions import RecordNotFound
from src.app.core.logging import get_logger
from src.app.models import Issue
from src.app.repositories import IssueRepository
from src.app.schemas import parse_filters
from src.app.services.issue_builder import (
    build_new_issue,
    build_update_set,
    get_identifier,
    parse_identifier,
)

logger = get_logger(__name__)


class IssueService:
    """Issue operations scoped by project - business logic only."""

    def __init__(self, issue_repo: IssueRepository, session: AsyncSession):
        self.issue_repo = issue_repo
        self.session = session

    async def list_issues(self, project: str, params: Mapping[str, str]) -> list[Issue]:
        """List a project's issues matching every query parameter exactly.

        Filters on undeclared fields, or with values that do not fit the
        field's type, match nothing.
        """
        filters = parse_filters(params)
        if filters is None:
            logger.debug("Filters cannot match any issue", filters=dict(params))
            return []
        return await self.issue_repo.find(project, filters)

    async def create_issue(self, project: str, payload: Mapping[str, Any]) -> Issue:
        """Validate and persist a new issue.

        Raises:
            MissingRequiredField: If a required field is absent or empty
        """
        issue = build_new_issue(project, payload)
        self.issue_repo.add(issue)
        await self.session.commit()
        await self.session.refresh(issue)

        logger.info("Issue created", issue_id=str(issue.id))
        return issue

    async def update_issue(self, payload: Mapping[str, Any]) -> str:
        """Apply a partial update to the issue named by _id.

        Returns:
            The identifier as sent by the client

        Raises:
            MissingIdentifier: If _id is absent
            EmptyUpdateSet: If no non-empty field was sent
            RecordNotFound: If the identifier is malformed or unknown
        """
        update_set = build_update_set(payload)
        issue_uuid = parse_identifier(update_set.issue_id, "update")

        updated = await self.issue_repo.update_by_id(issue_uuid, update_set.changes)
        if not updated:
            await self.session.rollback()
            raise RecordNotFound(update_set.issue_id, "update")
        await self.session.commit()

        logger.info(
            "Issue updated",
            issue_id=update_set.issue_id,
            fields=sorted(update_set.changes),
        )
        return update_set.issue_id

    async def delete_issue(self, payload: Mapping[str, Any]) -> str:
        """Permanently remove the issue named by _id.

        Raises:
            MissingIdentifier: If _id is absent
            RecordNotFound: If the identifier is malformed or unknown
        """
        issue_id = get_identifier(payload)
        issue_uuid = parse_identifier(issue_id, "delete")

        deleted = await self.issue_repo.delete_by_id(issue_uuid)
        if not deleted:
            await self.session.rollback()
            raise RecordNotFound(issue_id, "delete")
        await self.session.commit()

        logger.info("Issue deleted", issue_id=issue_id)
        return issue_id
