from fastapi import APIRouter

from app import crud, schemas
from app.api import deps
from app.cache import leaderboard_cache_key
from app.config import settings

router = APIRouter()


@router.get("/{event_id}/scoring-criteria", response_model=schemas.CriteriaResponse)
async def list_criteria(event_id: str) -> schemas.CriteriaResponse:
    return schemas.CriteriaResponse(criteria=await crud.criteria.get_criteria(event_id))


@router.post("/{event_id}/scoring-criteria", response_model=schemas.CriterionResponse)
async def create_criterion(
    event_id: str, creation_request: schemas.CriterionCreate, redis_client: deps.RedisDep
) -> schemas.CriterionResponse:
    criterion = await crud.criteria.create_for_event(event_id=event_id, obj_in=creation_request)
    if settings.leaderboard_cache_expiration:
        await redis_client.delete(leaderboard_cache_key(event_id))
    return schemas.CriterionResponse(criterion=criterion)
