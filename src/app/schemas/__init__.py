from src.app.schemas.issue import (
    FILTER_FIELDS,
    REQUIRED_FIELDS,
    IssueActionResult,
    IssueCreate,
    IssueRead,
    IssueUpdate,
    parse_filters,
)

__all__ = [
    "FILTER_FIELDS",
    "REQUIRED_FIELDS",
    "IssueActionResult",
    "IssueCreate",
    "IssueRead",
    "IssueUpdate",
    "parse_filters",
]
