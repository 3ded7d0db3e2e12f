import logging

from beanie import PydanticObjectId
from beanie.odm.operators.find.comparison import Eq, In
from pymongo.errors import DuplicateKeyError

from app import models, schemas

from .base import CRUDBase, CRUDError, object_ids

logger = logging.getLogger(__name__)


class CRUDScore(CRUDBase[models.Score, schemas.ScoreUpsert, schemas.ScoreUpsert]):
    @staticmethod
    def to_schema(db_obj: models.Score) -> schemas.ScoreInfo:
        return schemas.ScoreInfo(
            id=str(db_obj.id),
            judge_id=db_obj.judge_id,
            team_id=str(db_obj.team_id),
            criteria_id=str(db_obj.criteria_id),
            points=db_obj.points,
            feedback=db_obj.feedback,
        )

    async def get_scores(self, team_ids: list[str]) -> list[schemas.RawScore]:
        ids = object_ids(team_ids)
        if not ids:
            return []
        scores = await self.model.find_many(In(self.model.team_id, ids)).to_list()
        return [self.to_schema(score) for score in scores]

    async def get_by_team(self, *, team_id: str) -> list[schemas.ScoreInfo]:
        return await self.get_scores([team_id])  # type: ignore

    async def _find(self, *, team_id: PydanticObjectId, obj_in: schemas.ScoreUpsert) -> models.Score | None:
        return await self.model.find_one(
            Eq(self.model.judge_id, obj_in.judge_id),
            Eq(self.model.team_id, team_id),
            Eq(self.model.criteria_id, PydanticObjectId(obj_in.criteria_id)),
        )

    async def upsert(self, *, team_id: str, obj_in: schemas.ScoreUpsert) -> schemas.ScoreInfo:
        """Create the judge's score for the team and criterion, or overwrite it if it already exists."""
        team_object_id = PydanticObjectId(team_id)
        update_data = {"points": obj_in.points, "feedback": obj_in.feedback}
        existing = await self._find(team_id=team_object_id, obj_in=obj_in)
        if existing is not None:
            return self.to_schema(await self.update(db_obj=existing, obj_in=update_data))

        db_obj = self.model(
            judge_id=obj_in.judge_id,
            team_id=team_object_id,
            criteria_id=PydanticObjectId(obj_in.criteria_id),
            **update_data,
        )
        try:
            await db_obj.create()
        except DuplicateKeyError:
            # Another request created the same score in the meantime
            logger.info(f"Concurrent score creation for judge '{obj_in.judge_id}', updating instead")
            existing = await self._find(team_id=team_object_id, obj_in=obj_in)
            if existing is None:
                raise CRUDError("Score could not be created nor found")
            return self.to_schema(await self.update(db_obj=existing, obj_in=update_data))
        return self.to_schema(db_obj)


score = CRUDScore(models.Score)
