"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.app.api.dependencies.db import DBSession
from src.app.api.dependencies.repositories import IssueRepo
from src.app.services import IssueService


def get_issue_service(issue_repo: IssueRepo, session: DBSession) -> IssueService:
    """Get issue service."""
    return IssueService(issue_repo, session)


IssueServiceDep = Annotated[IssueService, Depends(get_issue_service)]
