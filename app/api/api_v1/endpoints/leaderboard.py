import logging

from fastapi import APIRouter

from app import schemas
from app.api import deps
from app.cache import leaderboard_cache_key
from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{event_id}/leaderboard", response_model=schemas.LeaderboardResult)
async def get_leaderboard(
    event_id: str, builder: deps.LeaderboardBuilderDep, redis_client: deps.RedisDep
) -> schemas.LeaderboardResult:
    """Teams that submitted to the event, ranked by their weighted score over all criteria (0-100)."""
    cache_key = leaderboard_cache_key(event_id)
    if settings.leaderboard_cache_expiration:
        cached_leaderboard = await redis_client.get(cache_key)
        if cached_leaderboard is not None:
            logger.info(f"Using cached leaderboard for event '{event_id}'")
            return schemas.LeaderboardResult.model_validate_json(cached_leaderboard)

    result = await builder.build(event_id)
    if settings.leaderboard_cache_expiration:
        logger.info(f"Caching leaderboard for event '{event_id}'")
        await redis_client.set(cache_key, result.model_dump_json(), ex=settings.leaderboard_cache_expiration)
    return result
