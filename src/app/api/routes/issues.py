"""Issue endpoints - project-scoped CRUD.

Every outcome is reported with HTTP 200. Failures are distinguished only by
the body: ``{"error": ...}`` optionally carrying the ``_id`` that was sent.
"""

from fastapi import APIRouter, Request

from src.app.api.dependencies import IssueServiceDep, Payload
from src.app.core.logging import bind_project_context
from src.app.schemas import IssueActionResult, IssueRead

router = APIRouter(prefix="/issues", tags=["issues"])

ERROR_RESPONSE = {
    "description": "Failures share the 200 status and carry an `error` key instead",
}


@router.get(
    "/{project}",
    response_model=list[IssueRead],
    summary="List issues",
    description="List a project's issues. Query parameters are exact-match filters.",
)
async def list_issues(
    project: str,
    request: Request,
    service: IssueServiceDep,
) -> list[IssueRead]:
    """List issues matching every filter."""
    bind_project_context(project)
    params = dict(request.query_params.multi_items())
    issues = await service.list_issues(project, params)
    return [IssueRead.model_validate(issue) for issue in issues]


@router.post(
    "/{project}",
    response_model=IssueRead,
    summary="Create issue",
    description="Create an issue. issue_title, issue_text and created_by are required.",
    responses={200: ERROR_RESPONSE},
)
async def create_issue(
    project: str,
    payload: Payload,
    service: IssueServiceDep,
) -> IssueRead:
    """Create a new issue."""
    bind_project_context(project)
    issue = await service.create_issue(project, payload)
    return IssueRead.model_validate(issue)


@router.put(
    "/{project}",
    response_model=IssueActionResult,
    summary="Update issue",
    description="Update the issue named by _id. Empty-string fields are left unchanged.",
    responses={200: ERROR_RESPONSE},
)
async def update_issue(
    project: str,
    payload: Payload,
    service: IssueServiceDep,
) -> IssueActionResult:
    """Update an existing issue."""
    bind_project_context(project)
    issue_id = await service.update_issue(payload)
    return IssueActionResult(result="successfully updated", issue_id=issue_id)


@router.delete(
    "/{project}",
    response_model=IssueActionResult,
    summary="Delete issue",
    description="Permanently delete the issue named by _id.",
    responses={200: ERROR_RESPONSE},
)
async def delete_issue(
    project: str,
    payload: Payload,
    service: IssueServiceDep,
) -> IssueActionResult:
    """Delete an issue."""
    bind_project_context(project)
    issue_id = await service.delete_issue(payload)
    return IssueActionResult(result="successfully deleted", issue_id=issue_id)
