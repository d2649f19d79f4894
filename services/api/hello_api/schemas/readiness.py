"""Readiness check schema."""

from pydantic import BaseModel, Field

from hello_api.stores.state import DependencyState


class ReadinessResponse(BaseModel):
    """Readiness of the service and the state of each dependency."""

    ready: bool
    dependencies: dict[str, DependencyState] = Field(default_factory=dict)
