from .scoring import Score, ScoringCriterion
from .team import ProjectSubmission, Team

__all__ = [
    "ProjectSubmission",
    "Score",
    "ScoringCriterion",
    "Team",
]
