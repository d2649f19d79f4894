"""Error body returned by the global exception handler."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Machine-readable code plus a human message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every 500 response: {"error": {"code": ..., "message": ...}}."""

    error: ErrorDetail
