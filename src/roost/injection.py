"""Initial-route injection into the shell document.

Inserts ``<script>window.__INITIAL_ROUTE__ = "...";</script>`` right
after the opening ``<head>`` tag so the client can render the matched
view on first paint.

The route is embedded as a JSON string literal with every character
that could end the string or the surrounding ``<script>`` element
escaped, so a crafted path like ``/a";alert(1)//`` or
``/</script><script>...`` stays inert data.
"""

import json
import re

DEFAULT_GLOBAL = "__INITIAL_ROUTE__"

_HEAD_OPEN = re.compile(r"<head(?:\s[^>]*)?>", re.IGNORECASE)
_DOCTYPE = re.compile(r"\s*<!doctype\b[^>]*>", re.IGNORECASE)

# Characters left intact by json.dumps that are still unsafe inside
# an inline <script> block.
_SCRIPT_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    ord("'"): "\\u0027",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


def script_literal(value: str) -> str:
    """Encode *value* as a double-quoted JS string literal safe for inline scripts."""
    return json.dumps(value).translate(_SCRIPT_ESCAPES)


def initial_route_script(route: str, global_name: str = DEFAULT_GLOBAL) -> str:
    """Render the bootstrap ``<script>`` assigning *route* to ``window.<global_name>``."""
    if not global_name.isidentifier():
        msg = f"Invalid JavaScript global name: {global_name!r}"
        raise ValueError(msg)
    return f"<script>window.{global_name} = {script_literal(route)};</script>"


def inject_initial_route(html: str, route: str, global_name: str = DEFAULT_GLOBAL) -> str:
    """Return *html* with the bootstrap script placed after the first ``<head>`` tag.

    Documents without a ``<head>`` tag get the script at the very start,
    after a leading doctype when there is one.
    """
    snippet = initial_route_script(route, global_name)
    match = _HEAD_OPEN.search(html) or _DOCTYPE.match(html)
    if match is None:
        return snippet + html
    end = match.end()
    return html[:end] + snippet + html[end:]
