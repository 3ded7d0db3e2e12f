import datetime
from typing import Annotated

from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field

from app.enums import TeamStatus


class Team(Document):
    name: str
    description: str = ""
    status: TeamStatus = TeamStatus.forming
    event_id: Annotated[str, Indexed()]

    class Settings:
        name = "teams"


class ProjectSubmission(Document):
    team_id: Annotated[PydanticObjectId, Indexed()]
    event_id: Annotated[str, Indexed()]
    title: str
    description: str = ""
    repository_url: str | None = None
    demo_url: str | None = None
    video_url: str | None = None
    presentation_url: str | None = None
    technologies: list[str] = []
    submitted_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    class Settings:
        name = "project_submissions"
