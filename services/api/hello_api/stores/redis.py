"""Redis store: the process-wide cache client handle.

The client is created once and lives as long as the process. Nothing in the
HTTP surface reads or writes through it yet; startup only checks that the
server answers a PING.
"""

import redis.asyncio as redis

from hello_api.settings import get_settings
from hello_api.stores.state import Dependency, DependencyState

# Redis client (created on startup)
_redis: redis.Redis | None = None


def get_redis_client() -> redis.Redis:
    """Get the Redis client, creating it on first use.

    redis-py connects lazily, so creating the client does no I/O.
    """
    global _redis
    if _redis is None:
        settings = get_settings()
        _redis = redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
    return _redis


async def connect_redis(dependency: Dependency) -> None:
    """Attempt a single connection to Redis and record the outcome.

    Errors are recorded on ``dependency`` and not raised. There is no retry.

    Args:
        dependency: State tracker for the cache store.
    """
    client = get_redis_client()
    dependency.transition(DependencyState.CONNECTING)
    try:
        await client.ping()
    except Exception as exc:
        dependency.transition(DependencyState.FAILED, exc)
        return
    dependency.transition(DependencyState.READY)
