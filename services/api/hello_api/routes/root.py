"""Root endpoint.

GET / -> 200 "Hello, Worlds!"

Constant response; never touches the Redis or MongoDB clients, so it
answers the same whether the stores are reachable or not.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello, Worlds!"

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    """Return the fixed greeting."""
    return GREETING
