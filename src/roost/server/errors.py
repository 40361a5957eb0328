"""Error handling pipeline for roost requests.

Maps HTTPError exceptions and unexpected failures to plain-text
responses. Client errors are logged at DEBUG; internal failures are
logged with their traceback and never leak detail unless debugging.
"""

import logging

from roost.errors import HTTPError
from roost.http.request import Request
from roost.http.response import PLAIN_TEXT, Response

logger = logging.getLogger("roost.server")

INTERNAL_ERROR_BODY = "Internal Server Error"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a plain-text Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    resp = Response(
        body=exc.detail or str(exc.status),
        status=exc.status,
        content_type=PLAIN_TEXT,
    )
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Log an unexpected exception and answer with a generic 500."""
    logger.exception("500 %s %s", request.method, request.path)

    body = INTERNAL_ERROR_BODY
    if debug:
        body = f"{INTERNAL_ERROR_BODY}\n\n{type(exc).__name__}: {exc}"
    return Response(body=body, status=500, content_type=PLAIN_TEXT)
