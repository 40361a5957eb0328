"""Immutable HTTP request.

Only what the dispatcher needs: the method, the decoded path used to
locate asset files, and the path exactly as the client sent it, which
drives route matching and injection. The shell server never reads
request bodies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request built from an ASGI scope."""

    method: str
    path: str
    raw_path: str = ""

    @property
    def is_head(self) -> bool:
        return self.method == "HEAD"

    @property
    def pathname(self) -> str:
        """The path as sent on the wire, percent-encoding intact."""
        return self.raw_path or self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope.

        ``raw_path`` is optional in ASGI; without it the decoded path is
        all there is.
        """
        raw = scope.get("raw_path") or b""
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            raw_path=raw.split(b"?", 1)[0].decode("latin-1"),
        )
