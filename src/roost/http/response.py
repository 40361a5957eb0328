"""HTTP responses with a chainable ``.with_*()`` transformation API.

Each transformation returns a new response. Immutable by convention,
built incrementally.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, TypeAlias

HTML = "text/html; charset=utf-8"
PLAIN_TEXT = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """A complete, in-memory HTTP response."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = HTML
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or ``None``."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None


@dataclass(frozen=True, slots=True)
class FileResponse:
    """An already-opened file streamed to the client in chunks.

    ``file`` is an ``anyio.AsyncFile`` opened in binary mode. The sender
    owns it from here on and closes it once the body is written.
    """

    file: Any
    size: int
    status: int = 200
    content_type: str = "application/octet-stream"
    headers: tuple[tuple[str, str], ...] = ()
    chunk_size: int = 64 * 1024

    def with_header(self, name: str, value: str) -> FileResponse:
        """Return a new FileResponse with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))


# Any response the dispatcher can produce
AnyResponse: TypeAlias = Response | FileResponse
