"""The shell document: the single HTML page that boots the client app."""

from pathlib import Path

import anyio

from roost.http.response import Response
from roost.injection import DEFAULT_GLOBAL, inject_initial_route


class ShellDocument:
    """Reads the shell HTML and serves it with the initial route injected.

    The file is read on every request, so a rebuilt frontend is picked
    up without restarting the server.
    """

    __slots__ = ("_global_name", "_path")

    def __init__(self, path: str | Path, *, global_name: str = DEFAULT_GLOBAL) -> None:
        self._path = Path(path)
        self._global_name = global_name

    @property
    def path(self) -> Path:
        return self._path

    async def read(self) -> str:
        return await anyio.Path(self._path).read_text(encoding="utf-8")

    async def render(self, route: str) -> Response:
        """Return the shell document with *route* assigned to the route global."""
        html = await self.read()
        body = inject_initial_route(html, route, self._global_name)
        return Response(body=body).with_header("Cache-Control", "no-cache")
