"""Host HTTP listener.

Starts uvicorn with the live roost App object. uvicorn owns sockets,
connection handling, and the event loop; roost only sees ASGI calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roost.app import App


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    log_level: str = "info",
) -> None:
    """Serve *app* on ``host:port`` until interrupted.

    Args:
        app: ASGI callable (roost App instance).
        host: Bind host address.
        port: Bind port number.
        log_level: uvicorn log level name (``debug``, ``info``, ...).
    """
    import uvicorn

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=log_level,
        lifespan="on",
    )
