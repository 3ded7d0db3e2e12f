from typing import Annotated

from beanie import Document, Indexed, PydanticObjectId
from pymongo import IndexModel


class ScoringCriterion(Document):
    event_id: Annotated[str, Indexed()]
    name: str
    description: str = ""
    max_points: int
    weight: float

    class Settings:
        name = "scoring_criteria"


class Score(Document):
    judge_id: str
    team_id: Annotated[PydanticObjectId, Indexed()]
    criteria_id: PydanticObjectId
    points: int
    feedback: str | None = None

    class Settings:
        name = "scores"
        indexes = [
            IndexModel(
                ["judge_id", "team_id", "criteria_id"],
                unique=True,
                name="score_judge_team_criteria_unique_index",
            ),
        ]
