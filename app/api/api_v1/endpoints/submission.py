from fastapi import APIRouter, HTTPException
from starlette import status

from app import crud, schemas
from app.api import deps
from app.cache import leaderboard_cache_key
from app.config import settings

router = APIRouter()


async def _get_submission(submission_id: str) -> schemas.SubmissionInfo:
    submission = await crud.submission.get_info(submission_id)
    if submission is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Submission not found.")
    return submission


@router.get("/{submission_id}/scores", response_model=schemas.ScoresResponse)
async def get_scores(submission_id: str) -> schemas.ScoresResponse:
    submission = await _get_submission(submission_id)
    return schemas.ScoresResponse(scores=await crud.score.get_by_team(team_id=submission.team_id))


@router.post("/{submission_id}/scores", response_model=schemas.ScoreResponse)
async def submit_score(
    submission_id: str, score_request: schemas.ScoreUpsert, redis_client: deps.RedisDep
) -> schemas.ScoreResponse:
    """Score the team behind the submission on one criterion. A judge scoring the same criterion again overwrites
    their previous score."""
    submission = await _get_submission(submission_id)
    criterion = await crud.criteria.get_for_event(id=score_request.criteria_id, event_id=submission.event_id)
    if criterion is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Scoring criterion not found for this event."
        )
    if score_request.points > criterion.max_points:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Points must be between 0 and {criterion.max_points} for criterion '{criterion.name}'.",
        )
    try:
        score = await crud.score.upsert(team_id=submission.team_id, obj_in=score_request)
    except crud.CRUDError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, str(e))
    if settings.leaderboard_cache_expiration:
        await redis_client.delete(leaderboard_cache_key(submission.event_id))
    return schemas.ScoreResponse(score=score)
