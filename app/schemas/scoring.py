from typing import Annotated

from pydantic import Field, StringConstraints

from app.enums import IssueKind

from .base import CamelModel
from .team import SubmissionInfo, TeamInfo

CriterionName = Annotated[str, StringConstraints(min_length=1, max_length=128)]


class ScoringCriterion(CamelModel):
    id: str
    event_id: str | None = None
    name: str
    description: str = ""
    # Not constrained here: stored data may violate it and the aggregation tolerates that.
    max_points: int
    weight: float


class CriterionCreate(CamelModel):
    name: CriterionName
    description: Annotated[str, StringConstraints(min_length=1)]
    max_points: Annotated[int, Field(gt=0)]
    weight: Annotated[float, Field(gt=0)]


class RawScore(CamelModel):
    judge_id: str
    team_id: str
    criteria_id: str
    points: int
    feedback: str | None = None


class ScoreInfo(RawScore):
    id: str


class ScoreUpsert(CamelModel):
    judge_id: str
    criteria_id: str
    points: Annotated[int, Field(ge=0)]
    feedback: str | None = None


class CriterionResult(CamelModel):
    criteria_id: str
    criteria_name: str
    scores: list[RawScore] = Field(default=[], exclude=True)
    avg_score: float = 0.0
    max_points: int
    normalized_score: float = 0.0
    weight: float
    weighted_contribution: float = Field(default=0.0, exclude=True)
    judge_count: int = 0


class ScoringIssue(CamelModel):
    kind: IssueKind
    detail: str
    team_id: str | None = None
    criteria_id: str | None = None


class LeaderboardEntry(CamelModel):
    team_id: str
    team: TeamInfo | None
    submission: SubmissionInfo | None
    final_score: float
    criteria_scores: list[CriterionResult]
    total_judges: Annotated[int, Field(ge=0)]
    rank: Annotated[int, Field(ge=1)]


class LeaderboardResult(CamelModel):
    leaderboard: list[LeaderboardEntry]
    issues: list[ScoringIssue] = []


class CriteriaResponse(CamelModel):
    criteria: list[ScoringCriterion]


class CriterionResponse(CamelModel):
    criterion: ScoringCriterion


class ScoresResponse(CamelModel):
    scores: list[ScoreInfo]


class ScoreResponse(CamelModel):
    score: ScoreInfo
