from beanie.odm.operators.find.comparison import Eq

from app import models, schemas

from .base import CRUDBase


class CRUDSubmission(CRUDBase[models.ProjectSubmission, schemas.SubmissionInfo, schemas.SubmissionInfo]):
    @staticmethod
    def to_schema(db_obj: models.ProjectSubmission) -> schemas.SubmissionInfo:
        return schemas.SubmissionInfo(
            id=str(db_obj.id),
            team_id=str(db_obj.team_id),
            event_id=db_obj.event_id,
            title=db_obj.title,
            description=db_obj.description,
            repository_url=db_obj.repository_url,
            demo_url=db_obj.demo_url,
            video_url=db_obj.video_url,
            presentation_url=db_obj.presentation_url,
            technologies=db_obj.technologies,
            submitted_at=db_obj.submitted_at,
        )

    async def get_info(self, id: str) -> schemas.SubmissionInfo | None:
        db_obj = await self.get(id)
        if db_obj is None:
            return None
        return self.to_schema(db_obj)

    async def get_submitted_teams(self, event_id: str) -> list[schemas.SubmittedTeam]:
        submissions = (
            await self.model.find_many(Eq(self.model.event_id, event_id))
            .sort(+self.model.submitted_at)  # type: ignore
            .to_list()
        )
        return [
            schemas.SubmittedTeam(team_id=str(submission.team_id), submission=self.to_schema(submission))
            for submission in submissions
        ]


submission = CRUDSubmission(models.ProjectSubmission)
