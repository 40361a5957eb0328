"""Static asset serving for the build output's asset directory.

Paths under the asset prefix map straight onto files below the asset
directory. There is no existence check: the file is simply opened, and
a failed open propagates to the request pipeline as an internal error.

Security: resolves symlinks and verifies the final path is within the
asset directory to prevent path traversal.
"""

import mimetypes
from pathlib import Path

import anyio

from roost.errors import Forbidden
from roost.http.response import FileResponse


class AssetFiles:
    """Open asset files for paths under a URL prefix.

    Usage::

        assets = AssetFiles("dist/assets", prefix="/assets")
        if assets.claims(request.path):
            response = await assets.open(request.path)
    """

    __slots__ = ("_cache_control", "_chunk_size", "_directory", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/assets",
        *,
        cache_control: str = "public, max-age=3600",
        chunk_size: int = 64 * 1024,
    ) -> None:
        self._directory = Path(directory).resolve()
        self._cache_control = cache_control
        self._chunk_size = chunk_size
        # Normalize prefix to "/name/" so "/assetsx" is never claimed.
        self._prefix = "/" + prefix.strip("/") + "/"

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def directory(self) -> Path:
        return self._directory

    def claims(self, path: str) -> bool:
        """Whether *path* addresses the asset tree."""
        return path.startswith(self._prefix)

    def resolve(self, path: str) -> Path:
        """Map a request path to a file path, rejecting traversal with ``Forbidden``."""
        relative = path[len(self._prefix) :]
        file_path = (self._directory / relative).resolve()
        if not file_path.is_relative_to(self._directory):
            raise Forbidden()
        return file_path

    async def open(self, path: str) -> FileResponse:
        """Open the asset for *path* and wrap it in a streaming response."""
        file_path = self.resolve(path)
        file = await anyio.open_file(file_path, "rb")
        try:
            stat = await anyio.Path(file_path).stat()
        except BaseException:
            await file.aclose()
            raise

        content_type, _ = mimetypes.guess_type(file_path.name)
        return FileResponse(
            file=file,
            size=stat.st_size,
            content_type=content_type or "application/octet-stream",
            chunk_size=self._chunk_size,
        ).with_header("Cache-Control", self._cache_control)
