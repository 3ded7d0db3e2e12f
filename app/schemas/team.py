import datetime

from app.enums import TeamStatus

from .base import CamelModel


class TeamInfo(CamelModel):
    id: str
    name: str
    description: str = ""
    status: TeamStatus | None = None
    event_id: str | None = None


class SubmissionInfo(CamelModel):
    id: str
    team_id: str
    event_id: str
    title: str
    description: str = ""
    repository_url: str | None = None
    demo_url: str | None = None
    video_url: str | None = None
    presentation_url: str | None = None
    technologies: list[str] = []
    submitted_at: datetime.datetime | None = None


class SubmittedTeam(CamelModel):
    team_id: str
    submission: SubmissionInfo | None = None
