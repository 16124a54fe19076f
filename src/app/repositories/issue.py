"""Repository for Issue entity."""

from typing import Any

from sqlmodel import select

from src.app.models import Issue
from src.app.repositories.base import BaseRepository


class IssueRepository(BaseRepository[Issue]):
    """Repository for issues, partitioned by project name."""

    model = Issue

    async def find(self, project: str, filters: dict[str, Any]) -> list[Issue]:
        """List issues in a project whose columns equal every filter value.

        Args:
            project: Project name from the route path
            filters: Column name to value, already coerced to column types

        Returns:
            Matching issues in store order
        """
        query = select(Issue).where(Issue.project == project)
        for column, value in filters.items():
            query = query.where(getattr(Issue, column) == value)
        result = await self.session.execute(query)
        return list(result.scalars().all())
