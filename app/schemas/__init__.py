from .base import CamelModel
from .scoring import (
    CriteriaResponse,
    CriterionCreate,
    CriterionResponse,
    CriterionResult,
    LeaderboardEntry,
    LeaderboardResult,
    RawScore,
    ScoreInfo,
    ScoreResponse,
    ScoresResponse,
    ScoreUpsert,
    ScoringCriterion,
    ScoringIssue,
)
from .team import SubmissionInfo, SubmittedTeam, TeamInfo

__all__ = [
    "CamelModel",
    "CriteriaResponse",
    "CriterionCreate",
    "CriterionResponse",
    "CriterionResult",
    "LeaderboardEntry",
    "LeaderboardResult",
    "RawScore",
    "ScoreInfo",
    "ScoreResponse",
    "ScoresResponse",
    "ScoreUpsert",
    "ScoringCriterion",
    "ScoringIssue",
    "SubmissionInfo",
    "SubmittedTeam",
    "TeamInfo",
]
