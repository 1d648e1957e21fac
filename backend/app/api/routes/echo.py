"""Echo: returns the request body back to the caller, wrapped in `received`.

Invariants:
    - Bodies of unparsed content types are never read; they echo as null
    - Parsed bodies are read with the size limit enforced while streaming
    - Decode failures propagate as DemoServerError to the global handler
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_app_settings
from app.api.request_reader import read_limited_body
from app.config import Settings
from app.core.request_body import decode_body, is_parsed_content_type
from app.schemas.responses import EchoResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["echo"])


@router.post("/echo", response_model=EchoResponse)
async def echo(
    request: Request, settings: Settings = Depends(get_app_settings),
):
    """Echo the decoded JSON or form body."""
    content_type = request.headers.get("content-type")
    if not is_parsed_content_type(content_type):
        return EchoResponse(received=None)

    raw = await read_limited_body(request, settings.max_body_bytes)
    logger.debug(
        f"Echoing {len(raw)} byte body",
        extra={"method": request.method, "path": request.url.path},
    )
    return EchoResponse(
        received=decode_body(raw, content_type, settings.max_body_bytes),
    )
