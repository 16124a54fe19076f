"""Repository layer - data access abstraction."""

from src.app.repositories.base import BaseRepository
from src.app.repositories.issue import IssueRepository

__all__ = [
    "BaseRepository",
    "IssueRepository",
]
