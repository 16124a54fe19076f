"""Issue model - the single record type the API manages."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.app.models.base import utc_now


class Issue(SQLModel, table=True):
    """Issue stored in the shared issues table, partitioned by project name."""

    __tablename__ = "issues"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project: str = Field(index=True, min_length=1)
    issue_title: str
    issue_text: str
    created_by: str
    assigned_to: str = Field(default="")
    status_text: str = Field(default="")
    open: bool = Field(default=True)
    created_on: datetime = Field(default_factory=utc_now)
    updated_on: datetime = Field(default_factory=utc_now)
