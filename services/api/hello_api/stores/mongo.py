"""MongoDB store: the process-wide document-store client handle."""

from pymongo import AsyncMongoClient

from hello_api.settings import get_settings
from hello_api.stores.state import Dependency, DependencyState

# Mongo client (created on startup)
_mongo: AsyncMongoClient | None = None


def get_mongo_client() -> AsyncMongoClient:
    """Get the MongoDB client, creating it on first use."""
    global _mongo
    if _mongo is None:
        settings = get_settings()
        _mongo = AsyncMongoClient(settings.mongo_uri)
    return _mongo


async def connect_mongo(dependency: Dependency) -> None:
    """Attempt a single connection to MongoDB and record the outcome.

    The ``ping`` admin command waits for server selection, so a failure here
    means the server could not be reached or rejected the credentials.
    Errors are recorded on ``dependency`` and not raised.

    Args:
        dependency: State tracker for the document store.
    """
    client = get_mongo_client()
    dependency.transition(DependencyState.CONNECTING)
    try:
        await client.admin.command("ping")
    except Exception as exc:
        dependency.transition(DependencyState.FAILED, exc)
        return
    dependency.transition(DependencyState.READY)
