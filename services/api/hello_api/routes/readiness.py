"""Readiness endpoint.

GET /ready -> 200 when every store is connected, 503 otherwise.

The listener binds before the stores connect; orchestrators should gate
traffic on this endpoint rather than on the port being open.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from hello_api.schemas import ReadinessResponse
from hello_api.stores.state import DependencyRegistry

router = APIRouter()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness(request: Request) -> JSONResponse:
    """Report per-dependency connection state.

    Returns:
        ReadinessResponse; status 503 until every dependency is ready, or
        when startup has not registered any dependency.
    """
    registry: DependencyRegistry | None = getattr(request.app.state, "dependencies", None)
    if registry is None:
        payload = ReadinessResponse(ready=False)
    else:
        payload = ReadinessResponse(ready=registry.all_ready, dependencies=registry.snapshot())

    return JSONResponse(
        status_code=200 if payload.ready else 503,
        content=payload.model_dump(mode="json"),
        headers={"Cache-Control": "no-store"},
    )
