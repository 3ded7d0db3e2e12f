import redis.asyncio as redis

from app.config import settings


def init_redis(host, password, port):
    return redis.Redis(host=host, port=port, password=password)


def leaderboard_cache_key(event_id: str) -> str:
    return f"leaderboard:{event_id}"


redis_client = init_redis(settings.redis_host, settings.redis_password.get_secret_value(), settings.redis_port)
