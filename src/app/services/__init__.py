from src.app.services.issue_builder import UpdateSet, build_new_issue, build_update_set
from src.app.services.issue_service import IssueService

__all__ = [
    "IssueService",
    "UpdateSet",
    "build_new_issue",
    "build_update_set",
]
