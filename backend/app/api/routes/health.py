"""Health & Status Probes: liveness endpoints for the demo server.

Invariants:
    - GET / always returns 200 with the fixed confirmation message
    - GET /api/status always returns 200, status "online", current UTC timestamp
    - HEAD answered wherever GET is (load balancer probes)
"""

from fastapi import APIRouter, status

from app.core.messages import ROOT_MESSAGE, STATUS_ONLINE
from app.core.timestamps import format_iso_timestamp, utc_now
from app.schemas.responses import MessageResponse, StatusResponse

router = APIRouter(tags=["health"])


@router.get(
    "/", response_model=MessageResponse, status_code=status.HTTP_200_OK,
)
@router.head("/", response_model=MessageResponse, include_in_schema=False)
async def root():
    """Basic liveness probe. Returns 200 if the process is up."""
    return MessageResponse(message=ROOT_MESSAGE)


@router.get("/api/status", response_model=StatusResponse)
@router.head(
    "/api/status", response_model=StatusResponse, include_in_schema=False,
)
async def server_status():
    """Server status plus the time the request was handled."""
    return StatusResponse(
        status=STATUS_ONLINE, timestamp=format_iso_timestamp(utc_now()),
    )
