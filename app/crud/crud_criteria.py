from beanie.odm.operators.find.comparison import Eq

from app import models, schemas

from .base import CRUDBase


class CRUDScoringCriterion(CRUDBase[models.ScoringCriterion, schemas.CriterionCreate, schemas.CriterionCreate]):
    @staticmethod
    def to_schema(db_obj: models.ScoringCriterion) -> schemas.ScoringCriterion:
        return schemas.ScoringCriterion(
            id=str(db_obj.id),
            event_id=db_obj.event_id,
            name=db_obj.name,
            description=db_obj.description,
            max_points=db_obj.max_points,
            weight=db_obj.weight,
        )

    async def get_criteria(self, event_id: str) -> list[schemas.ScoringCriterion]:
        criteria = await self.model.find_many(Eq(self.model.event_id, event_id)).to_list()
        return [self.to_schema(criterion) for criterion in criteria]

    async def get_for_event(self, *, id: str, event_id: str) -> schemas.ScoringCriterion | None:
        db_obj = await self.get(id)
        if db_obj is None or db_obj.event_id != event_id:
            return None
        return self.to_schema(db_obj)

    async def create_for_event(self, *, event_id: str, obj_in: schemas.CriterionCreate) -> schemas.ScoringCriterion:
        db_obj = self.model(
            event_id=event_id,
            name=obj_in.name,
            description=obj_in.description,
            max_points=obj_in.max_points,
            weight=obj_in.weight,
        )
        await db_obj.create()
        return self.to_schema(db_obj)


criteria = CRUDScoringCriterion(models.ScoringCriterion)
