"""ASGI response sending — translates roost responses to ASGI messages.

In-memory responses go out as a single body message; asset files are
streamed chunk by chunk with ``more_body=True``.
"""

import logging

from roost._types import Send
from roost.http.response import FileResponse, Response

logger = logging.getLogger("roost.server")


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _raw_headers(
    content_type: str,
    headers: tuple[tuple[str, str], ...],
    content_length: int,
) -> list[tuple[bytes, bytes]]:
    raw = [(b"content-type", content_type.encode("latin-1"))]
    raw.extend((name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in headers)
    raw.append((b"content-length", str(content_length).encode("latin-1")))
    return raw


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Translate a Response into ASGI send() calls.

    For HEAD requests the headers (including Content-Length) describe
    the body that a GET would have returned, but no body is written.
    """
    body = response.body_bytes if _body_allowed(response.status) else b""

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": _raw_headers(response.content_type, response.headers, len(body)),
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": b"" if head else body,
        }
    )


async def send_file_response(response: FileResponse, send: Send, *, head: bool = False) -> None:
    """Stream an opened file, closing it whatever happens.

    Headers are already on the wire when the first chunk is read, so a
    read error mid-stream can only be logged and the body ended early.
    """
    file = response.file
    try:
        await send(
            {
                "type": "http.response.start",
                "status": response.status,
                "headers": _raw_headers(response.content_type, response.headers, response.size),
            }
        )
        if head:
            await send({"type": "http.response.body", "body": b""})
            return

        try:
            while chunk := await file.read(response.chunk_size):
                await send({"type": "http.response.body", "body": chunk, "more_body": True})
        except OSError:
            logger.exception("Asset stream interrupted after headers were sent")

        await send({"type": "http.response.body", "body": b"", "more_body": False})
    finally:
        await file.aclose()
