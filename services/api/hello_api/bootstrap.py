"""Startup sequence for the external stores.

Order:
1. Create the Redis client, register its log observers, fire its connect
   attempt.
2. Create the MongoDB client, register its log observers, fire its connect
   attempt.

Both attempts run as background tasks. Nothing here waits for them, so the
HTTP listener binds whether the stores are up, down or still connecting.
"""

import asyncio
import logging

from hello_api.stores.mongo import connect_mongo, get_mongo_client
from hello_api.stores.redis import connect_redis, get_redis_client
from hello_api.stores.state import Dependency, DependencyRegistry, DependencyState

REDIS_DEPENDENCY = "redis"
MONGO_DEPENDENCY = "mongo"

logger = logging.getLogger("uvicorn.error")


def _log_redis_error(dependency: Dependency, error: BaseException | None) -> None:
    logger.error("Redis Client Error %s", error)


def _log_redis_connected(dependency: Dependency, error: BaseException | None) -> None:
    logger.info("Redis client connected")


def _log_mongo_error(dependency: Dependency, error: BaseException | None) -> None:
    logger.error("failed to connect to db %s", error)


def _log_mongo_connected(dependency: Dependency, error: BaseException | None) -> None:
    logger.info("connect to db ....")


def start_dependencies(registry: DependencyRegistry) -> list[asyncio.Task[None]]:
    """Create both store clients and schedule their connect attempts.

    Must be called from a running event loop. The returned tasks must be
    kept referenced by the caller for as long as they may be running.

    Args:
        registry: Registry receiving the ``redis`` and ``mongo`` dependencies.

    Returns:
        The scheduled connect tasks, cache store first.
    """
    get_redis_client()
    cache = registry.register(REDIS_DEPENDENCY)
    cache.on(DependencyState.FAILED, _log_redis_error)
    cache.on(DependencyState.READY, _log_redis_connected)
    cache_task = asyncio.create_task(connect_redis(cache), name="connect-redis")

    get_mongo_client()
    documents = registry.register(MONGO_DEPENDENCY)
    documents.on(DependencyState.FAILED, _log_mongo_error)
    documents.on(DependencyState.READY, _log_mongo_connected)
    documents_task = asyncio.create_task(connect_mongo(documents), name="connect-mongo")

    return [cache_task, documents_task]
