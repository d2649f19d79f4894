"""Pydantic schemas for API responses."""

from hello_api.schemas.common import ErrorDetail, ErrorResponse
from hello_api.schemas.readiness import ReadinessResponse

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "ReadinessResponse",
]
