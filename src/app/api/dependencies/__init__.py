"""FastAPI dependency injection definitions.

Re-exports all dependencies so routes import from one place.
"""

from src.app.api.dependencies.db import (
    DBSession,
    Store,
    get_db_session,
    get_store,
)
from src.app.api.dependencies.payload import Payload, get_payload
from src.app.api.dependencies.repositories import IssueRepo, get_issue_repository
from src.app.api.dependencies.services import IssueServiceDep, get_issue_service

__all__ = [
    # Store
    "DBSession",
    "Store",
    "get_db_session",
    "get_store",
    # Request body
    "Payload",
    "get_payload",
    # Repositories
    "IssueRepo",
    "get_issue_repository",
    # Services
    "IssueServiceDep",
    "get_issue_service",
]
