"""Request Reader: reads request bodies without buffering past the size limit.

Invariants:
    - A declared Content-Length over the limit is rejected before any chunk is read
    - Streamed chunks are counted; BodyTooLargeError raised as soon as the total passes the limit
    - An unparsable Content-Length is ignored (the streamed total still applies)
"""

from fastapi import Request

from app.core.request_body import check_body_size


def declared_length(request: Request) -> int | None:
    raw = request.headers.get("content-length")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


async def read_limited_body(request: Request, max_bytes: int) -> bytes:
    """Read the full body, failing fast once it exceeds max_bytes."""
    length = declared_length(request)
    if length is not None:
        check_body_size(length, max_bytes)

    chunks: list[bytes] = []
    total = 0
    async for chunk in request.stream():
        total += len(chunk)
        check_body_size(total, max_bytes)
        chunks.append(chunk)
    return b"".join(chunks)
