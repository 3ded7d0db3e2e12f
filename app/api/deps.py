from typing import Annotated

import redis.asyncio as redis
from fastapi import Depends

from app import crud
from app.cache import redis_client
from app.internals.leaderboard import LeaderboardBuilder


def get_redis_client() -> redis.Redis:
    return redis_client


def get_leaderboard_builder() -> LeaderboardBuilder:
    return LeaderboardBuilder(
        criteria_catalog=crud.criteria,
        submission_catalog=crud.submission,
        score_store=crud.score,
        team_catalog=crud.team,
    )


RedisDep = Annotated[redis.Redis, Depends(get_redis_client)]
LeaderboardBuilderDep = Annotated[LeaderboardBuilder, Depends(get_leaderboard_builder)]
