"""ASGI handler — the request dispatcher.

Every request ends in exactly one of:

1. an asset file streamed from the build output,
2. the shell document with the matched route injected, or
3. a plain-text error (404 for unknown paths, 500 for failures).

Requests share nothing but the read-only route table, asset directory,
and shell document location, so they run concurrently without locks.
"""

import logging

from roost._types import Receive, Scope, Send
from roost.errors import HTTPError, MethodNotAllowed, NotFound
from roost.http.request import Request
from roost.http.response import AnyResponse, FileResponse
from roost.routing.matcher import RouteTable
from roost.server.assets import AssetFiles
from roost.server.errors import handle_http_error, handle_internal_error
from roost.server.sender import send_file_response, send_response
from roost.server.shell import ShellDocument

logger = logging.getLogger("roost.server")

ALLOWED_METHODS = frozenset({"GET", "HEAD"})


def resolve_route(path: str, routes: RouteTable) -> str | None:
    """Return the route to inject for *path*, or ``None`` when it is unknown.

    The root is always a route. Any other path is matched without its
    leading separator, but the full request path is what gets injected.
    A path starting with two separators names no route.
    """
    if path == "/":
        return "/"
    segment = path[1:]
    if segment.startswith("/"):
        return None
    match = routes.match(segment)
    if match is None:
        return None
    logger.debug("%s matched route pattern %r", path, match.pattern)
    return path


async def dispatch(
    request: Request,
    *,
    routes: RouteTable,
    assets: AssetFiles,
    shell: ShellDocument,
) -> AnyResponse:
    """Pick the response for *request*. Raises ``HTTPError`` for client errors."""
    if request.method not in ALLOWED_METHODS:
        raise MethodNotAllowed(ALLOWED_METHODS)

    if assets.claims(request.path):
        return await assets.open(request.path)

    route = resolve_route(request.pathname, routes)
    if route is None:
        raise NotFound()

    return await shell.render(route)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    routes: RouteTable,
    assets: AssetFiles,
    shell: ShellDocument,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await dispatch(request, routes=routes, assets=assets, shell=shell)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    if isinstance(response, FileResponse):
        await send_file_response(response, send, head=request.is_head)
    else:
        await send_response(response, send, head=request.is_head)
