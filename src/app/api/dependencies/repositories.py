"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.app.api.dependencies.db import DBSession
from src.app.repositories import IssueRepository


def get_issue_repository(session: DBSession) -> IssueRepository:
    """Get issue repository bound to the request session."""
    return IssueRepository(session)


IssueRepo = Annotated[IssueRepository, Depends(get_issue_repository)]
