from .base import CRUDBase, CRUDError
from .crud_criteria import CRUDScoringCriterion, criteria
from .crud_score import CRUDScore, score
from .crud_submission import CRUDSubmission, submission
from .crud_team import CRUDTeam, team

__all__ = [
    "CRUDBase",
    "CRUDError",
    "CRUDScore",
    "CRUDScoringCriterion",
    "CRUDSubmission",
    "CRUDTeam",
    "criteria",
    "score",
    "submission",
    "team",
]
