"""Routing — the compiled, immutable table of client-side routes.

Patterns are compiled once at startup; lookups never allocate regexes.
"""

from roost.routing.loader import load_route_patterns
from roost.routing.matcher import Literal, RouteMatch, RouteTable, Templated, compile_pattern

__all__ = [
    "Literal",
    "RouteMatch",
    "RouteTable",
    "Templated",
    "compile_pattern",
    "load_route_patterns",
]
