"""API routes."""

from fastapi import APIRouter

from hello_api.routes import readiness, root

api_router = APIRouter()

# Greeting
api_router.include_router(root.router, tags=["root"])

# Readiness probe
api_router.include_router(readiness.router, tags=["health"])
