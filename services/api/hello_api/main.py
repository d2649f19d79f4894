"""FastAPI application entry point.

Hello Worlds API - a greeting service backed by a cache store and a
document store.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hello_api.bootstrap import start_dependencies
from hello_api.routes import api_router
from hello_api.schemas import ErrorDetail, ErrorResponse
from hello_api.settings import get_settings
from hello_api.stores.state import DependencyRegistry


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Fires the store connect attempts and returns immediately; the listener
    binds without waiting for them. The clients are never closed.
    """
    registry = DependencyRegistry()
    app.state.dependencies = registry
    app.state.dependency_tasks = start_dependencies(registry)

    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Hello Worlds greeting service",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        body = ErrorResponse(
            error=ErrorDetail(
                code="INTERNAL_ERROR",
                message=str(exc) if settings.debug else "Internal server error",
            )
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    from hello_api.server import run

    run()
