"""Response Schemas: Pydantic models describing every JSON body the API returns.

Invariants:
    - One model per response shape; routes declare them as response_model
    - EchoResponse.received is untyped: any JSON value round-trips unchanged
"""

from typing import Any, Literal

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Fixed message payload (root and greeting routes)."""
    message: str


class StatusResponse(BaseModel):
    """Health status with the server's current time."""
    status: Literal["online"]
    timestamp: str


class EchoResponse(BaseModel):
    """The decoded request body, wrapped."""
    received: Any = None


class ErrorResponse(BaseModel):
    """Error envelope shared by every failure response."""
    error: str


# OpenAPI documentation for the error envelopes every router can return
ERROR_RESPONSES: dict[int | str, dict] = {
    404: {"model": ErrorResponse, "description": "Route not found"},
    500: {"model": ErrorResponse, "description": "Unhandled error"},
}
