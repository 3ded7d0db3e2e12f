from beanie.odm.operators.find.comparison import In

from app import models, schemas

from .base import CRUDBase, object_ids


class CRUDTeam(CRUDBase[models.Team, schemas.TeamInfo, schemas.TeamInfo]):
    @staticmethod
    def to_schema(db_obj: models.Team) -> schemas.TeamInfo:
        return schemas.TeamInfo(
            id=str(db_obj.id),
            name=db_obj.name,
            description=db_obj.description,
            status=db_obj.status,
            event_id=db_obj.event_id,
        )

    async def get_teams(self, team_ids: list[str]) -> dict[str, schemas.TeamInfo]:
        ids = object_ids(team_ids)
        if not ids:
            return {}
        teams = await self.model.find_many(In(self.model.id, ids)).to_list()
        return {str(team.id): self.to_schema(team) for team in teams}


team = CRUDTeam(models.Team)
