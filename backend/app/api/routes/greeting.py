"""Greeting: fixed "Hello, World!" endpoint (GET and HEAD)."""

from fastapi import APIRouter

from app.core.messages import HELLO_MESSAGE
from app.schemas.responses import MessageResponse

router = APIRouter(prefix="/api", tags=["greeting"])


@router.get("/hello", response_model=MessageResponse)
@router.head("/hello", response_model=MessageResponse, include_in_schema=False)
async def hello():
    return MessageResponse(message=HELLO_MESSAGE)
