"""Roost application class.

Everything is compiled in the constructor: the route table, the asset
tree, and the shell document location. Nothing changes after that, so
the same App serves any number of concurrent requests without locks.
"""

import logging
from collections.abc import Iterable

import anyio

from roost._types import Receive, Scope, Send
from roost.config import AppConfig
from roost.errors import ConfigurationError
from roost.routing.matcher import RouteTable
from roost.server.assets import AssetFiles
from roost.server.handler import handle_request
from roost.server.shell import ShellDocument

logger = logging.getLogger("roost.server")


class App:
    """The roost application: an ASGI callable serving one single-page app.

    Usage::

        app = App(AppConfig(build_dir="dist"), routes=["about", "users/{id}"])
        app.run()

    *routes* defaults to ``config.routes``. Invalid patterns raise
    ``ConfigurationError`` here, before any request is accepted.
    """

    __slots__ = ("_assets", "_routes", "_shell", "config")

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        routes: Iterable[str] | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()

        if not self.config.route_global.isidentifier():
            msg = f"route_global must be a JavaScript identifier, got {self.config.route_global!r}"
            raise ConfigurationError(msg)

        patterns = self.config.routes if routes is None else tuple(routes)
        self._routes: RouteTable = RouteTable.from_patterns(patterns)
        self._assets = AssetFiles(
            self.config.asset_dir,
            self.config.asset_prefix,
            cache_control=self.config.asset_cache_control,
            chunk_size=self.config.chunk_size,
        )
        self._shell = ShellDocument(self.config.shell_path, global_name=self.config.route_global)

    @property
    def routes(self) -> RouteTable:
        """The compiled, read-only route table."""
        return self._routes

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start serving on the configured (or given) host and port."""
        from roost.server.run import run_server

        _host = host or self.config.host
        _port = port or self.config.port

        logger.info(
            "Starting roost on http://%s:%d (%d routes, build dir %s)",
            _host,
            _port,
            len(self._routes),
            self.config.build_dir,
        )
        run_server(self, _host, _port, log_level=self.config.log_level)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            routes=self._routes,
            assets=self._assets,
            shell=self._shell,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        A missing shell document is reported at startup but does not
        stop the server: the build may land after the process starts.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                if not await anyio.Path(self._shell.path).is_file():
                    logger.warning(
                        "Shell document %s not found; page requests will fail until it exists",
                        self._shell.path,
                    )
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
